"""
Validators for Brazilian documents, dates and e-mails.

Every validator returns a bool and never raises, whatever it is given.
"""
import re
from typing import List, Optional

from .dates import DateFormat, detect_format, parse_date
from .types import TypeTag, is_type

CPF_LENGTH = 11
CNPJ_LENGTH = 14
CNPJ_WEIGHTS = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

_NON_DIGITS = re.compile(r"[^0-9]")
_EMAIL = re.compile(r"^.+@.+\..+$")


def _digits(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def _cpf_check_digit(digits: List[int]) -> int:
    # Weights run from len+1 down to 2.
    total = sum(digit * (len(digits) + 1 - index) for index, digit in enumerate(digits))
    rest = 11 - total % 11
    return 0 if rest > 9 else rest


def is_valid_cpf(value: object) -> bool:
    """
    Validate Brazilian CPF (individual taxpayer number).

    Validates:
    - 11 digits once punctuation is stripped
    - Not a repeated-digit sequence ("00000000000", "11111111111", ...)
    - Both check digits

    Args:
        value: CPF string, with or without punctuation

    Returns:
        True if the CPF is valid
    """
    if not is_type(value, TypeTag.STRING):
        return False

    clean = _digits(value)
    if len(clean) != CPF_LENGTH or not clean.isdigit():
        return False

    if len(set(clean)) == 1:
        return False

    digits = [int(c) for c in clean]
    if _cpf_check_digit(digits[:9]) != digits[9]:
        return False

    return _cpf_check_digit(digits[:10]) == digits[10]


def _cnpj_check_digit(digits: List[int], weights: List[int]) -> int:
    rest = sum(digit * weight for digit, weight in zip(digits, weights)) % 11
    return 0 if rest < 2 else 11 - rest


def is_valid_cnpj(value: object) -> bool:
    """
    Validate Brazilian CNPJ (company taxpayer number).

    Args:
        value: CNPJ string, with or without punctuation

    Returns:
        True if the CNPJ has 14 digits and both check digits match
    """
    if not is_type(value, TypeTag.STRING):
        return False

    clean = _digits(value)
    if len(clean) != CNPJ_LENGTH or not clean.isdigit():
        return False

    digits = [int(c) for c in clean]
    first = _cnpj_check_digit(digits[:12], CNPJ_WEIGHTS[1:])
    second = _cnpj_check_digit(digits[:13], CNPJ_WEIGHTS)

    return first * 10 + second == int(clean[-2:])


def is_valid_date(value: object, fmt: Optional[DateFormat] = None) -> bool:
    """
    Validate a date string.

    Without fmt, the layout is detected ("DD/MM/YYYY", "DD-MM-YYYY" or
    "YYYY-MM-DD", optionally followed by " HH:mm:ss").

    Examples:
        "21/12/2006" -> True
        "31/02/2006" -> False (no such day)
        "21/12/2006" with fmt "YYYY-MM-DD" -> False

    Args:
        value: Date string
        fmt: Pattern or DateFormatSpec to parse with

    Returns:
        True if the value is a real date in the format
    """
    fmt = fmt or detect_format(value)
    if not fmt:
        return False
    return parse_date(value, fmt) is not None


def is_valid_email(value: object) -> bool:
    """Basic e-mail sanity check (something@something.something), not RFC compliant."""
    return is_type(value, TypeTag.STRING) and bool(_EMAIL.match(value))


VALIDATORS = {
    "is_valid_cpf": is_valid_cpf,
    "is_valid_cnpj": is_valid_cnpj,
    "is_valid_date": is_valid_date,
    "is_valid_email": is_valid_email,
}
