"""
convenia-util - Validators and formatters for Brazilian data.

This library provides:
- Runtime type tags used as cheap input guards
- CPF, CNPJ, date and e-mail validators
- Formatters for documents, money, phones, dates and slugs
- Adapters for form validation registries and template environments
"""

from .types import (
    TypeTag,
    UNDEFINED,
    DateFormatSpec,
    type_of,
    is_type,
)
from .dates import detect_format, parse_date
from .chain import chain, replace
from .guards import guard_by, guard_by_type, format_for, format_for_type
from .validators import (
    VALIDATORS,
    is_valid_cpf,
    is_valid_cnpj,
    is_valid_date,
    is_valid_email,
)
from .formatters import (
    FORMATTERS,
    to_cpf,
    to_rg,
    to_money,
    to_years,
    to_days,
    to_date,
    to_interval,
    to_empty,
    to_phone,
    to_clean,
    to_slug,
    to_cep,
)
from .integrations import install, integrate, register_validation_rules
from .exceptions import ConveniaUtilError, IntegrationError

__version__ = "0.1.0"

__all__ = [
    # Types
    "TypeTag",
    "UNDEFINED",
    "DateFormatSpec",
    "type_of",
    "is_type",
    # Dates
    "detect_format",
    "parse_date",
    # Composition
    "chain",
    "replace",
    "guard_by",
    "guard_by_type",
    "format_for",
    "format_for_type",
    # Validators
    "VALIDATORS",
    "is_valid_cpf",
    "is_valid_cnpj",
    "is_valid_date",
    "is_valid_email",
    # Formatters
    "FORMATTERS",
    "to_cpf",
    "to_rg",
    "to_money",
    "to_years",
    "to_days",
    "to_date",
    "to_interval",
    "to_empty",
    "to_phone",
    "to_clean",
    "to_slug",
    "to_cep",
    # Integrations
    "install",
    "integrate",
    "register_validation_rules",
    # Errors
    "ConveniaUtilError",
    "IntegrationError",
]
