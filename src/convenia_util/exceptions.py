"""
Exceptions raised by the integration adapters.

The validators and formatters never raise; only wiring the library into
a host program can fail.
"""


class ConveniaUtilError(Exception):
    """Base class for convenia-util errors"""


class IntegrationError(ConveniaUtilError):
    """Host object cannot receive the requested registrations"""
