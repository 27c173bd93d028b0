"""
Formatting utilities for Brazilian display strings.

Each formatter is a guarded chain of replace steps: when the guard
rejects the input the formatter returns None. Formatters that strip
punctuation before adding it back are idempotent, e.g.
``to_cep(to_cep("12345678")) == "12345-678"``.
"""
import math
import re
import unicodedata
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Context, Decimal
from datetime import date, datetime, time, timezone
from typing import Any, Optional

from .chain import replace
from .config import get_config
from .dates import DateFormat, detect_format, format_datetime, parse_date, years_between
from .guards import format_for, format_for_type
from .types import TypeTag, is_type
from .validators import is_valid_date

NON_DIGITS = re.compile(r"[^0-9]")
NON_WORD = re.compile(r"\W", re.ASCII)
WHITESPACE = re.compile(r"\s+")

CENT = Decimal("0.01")
# Enough digits for any finite float quantized to cents.
MONEY_CONTEXT = Context(prec=400)


def _is_money(value: Any) -> bool:
    if not (is_type(value, TypeTag.NUMBER) or is_type(value, TypeTag.STRING)):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError, OverflowError):
        return False


def _fold_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return unicodedata.normalize("NFC", stripped)


def _normalize_text(text: str) -> str:
    return WHITESPACE.sub(" ", _fold_diacritics(text).lower()).strip()


@format_for_type(TypeTag.STRING)
def to_cpf(value: str) -> str:
    """
    Format a value as CPF.

    Partial input is grouped as far as it goes.

    Examples:
        "00000000000" -> "000.000.000-00"
        "12345678" -> "123.456.78"
        42 -> None
    """
    return replace(value, [
        (NON_DIGITS, ""),
        (re.compile(r"([0-9]{3})([0-9])"), r"\1.\2", 1),
        (re.compile(r"([0-9]{3})([0-9])"), r"\1.\2", 1),
        (re.compile(r"([0-9]{3})([0-9]{1,2})$"), r"\1-\2", 1),
    ])


@format_for_type(TypeTag.STRING)
def to_rg(value: str) -> str:
    """
    Format a value as RG. The check character may be a digit, A, B or X.

    Examples:
        "000000000" -> "00.000.000-0"
        "12.345.678-x" -> "12.345.678-X"
    """
    return replace(value.upper(), [
        (re.compile(r"[^0-9ABX]"), ""),
        (re.compile(r"([0-9]{2})([0-9])"), r"\1.\2", 1),
        (re.compile(r"([0-9]{3})([0-9])"), r"\1.\2", 1),
        (re.compile(r"([0-9]{3})([0-9ABX])$"), r"\1-\2", 1),
    ])


@format_for(_is_money)
def to_money(value: Any) -> str:
    """
    Format a number or numeric string as BRL currency.

    Examples:
        "1200" -> "R$ 1.200,00"
        15.5 -> "R$ 15,50"
        0.125 -> "R$ 0,13" (halves round away from zero)
        "Abacaxi" -> None
    """
    cents = Decimal(float(value)).quantize(CENT, rounding=ROUND_HALF_UP, context=MONEY_CONTEXT)
    formatted = replace(f"{abs(cents) if cents.is_zero() else cents:f}", [
        (".", ",", 1),
        (re.compile(r"([0-9])(?=([0-9]{3})+(?![0-9]))"), r"\1."),
    ])
    return get_config().format.currency_prefix + formatted


def to_years(value: Any, now: Optional[datetime] = None) -> Optional[int]:
    """
    Get the number of whole years elapsed since a date.

    Args:
        value: Date string in one of the detected layouts
        now: Reference moment, defaults to the current local time

    Returns:
        Whole years between the date and now, or None if the date does
        not parse or now is not a date
    """
    parsed = parse_date(value)
    if parsed is None:
        return None
    if now is not None and not isinstance(now, date):
        return None

    if now is None:
        now = datetime.now()
    elif not isinstance(now, datetime):
        now = datetime.combine(now, time())
    if now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)

    return years_between(parsed, now)


def to_days(value: Any) -> str:
    """
    Format a number of days.

    Examples:
        1 -> "1 dia"
        2 -> "2 dias"
        0 -> "0 dias"
        float("nan") -> "0 dias"
    """
    days = 0
    if is_type(value, TypeTag.NUMBER):
        try:
            if math.isfinite(float(value)):
                if value == 1:
                    return "1 dia"
                days = int(value)
        except (TypeError, ValueError, ArithmeticError):
            days = 0
    return f"{days} dias"


def _can_format_date(
    value: Any,
    from_format: Optional[DateFormat] = None,
    to_format: Optional[str] = None,
    utc: bool = False,
) -> bool:
    if to_format is not None and not is_type(to_format, TypeTag.STRING):
        return False
    source = from_format or detect_format(value)
    return bool(source) and is_valid_date(value, source)


@format_for(_can_format_date)
def to_date(
    value: str,
    from_format: Optional[DateFormat] = None,
    to_format: Optional[str] = None,
    utc: bool = False,
) -> str:
    """
    Reformat a date string.

    Examples:
        "21-12-2006" -> "21/12/2006"
        "2006-12-21" -> "21/12/2006"
        "21/12/2006", to_format="YYYY-MM-DD" -> "2006-12-21"
        "2006/12/21" -> None

    Args:
        value: Date string
        from_format: Source pattern or DateFormatSpec, detected when omitted
        to_format: Target pattern, "DD/MM/YYYY" unless configured otherwise
        utc: Read the value as UTC instead of naive local time

    Returns:
        The date in the target pattern
    """
    parsed = parse_date(value, from_format or detect_format(value))
    if utc:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return format_datetime(parsed, to_format or get_config().format.date_output_format)


@format_for(lambda dates, **options: isinstance(dates, Mapping))
def to_interval(dates: Mapping, **options) -> Optional[str]:
    """
    Format a {"start": ..., "end": ...} pair of dates as an interval.

    Options are passed through to ``to_date``.

    Example:
        {"start": "21-12-2006", "end": "31-12-2006"} -> "21/12/2006 a 31/12/2006"
    """
    start = to_date(dates.get("start"), **options)
    end = to_date(dates.get("end"), **options)
    if start is None or end is None:
        return None
    return f"{start}{get_config().format.interval_separator}{end}"


def to_empty(value: Any, char: Optional[str] = None) -> Any:
    """
    Replace an empty value with a placeholder character.

    Anything falsy counts as empty, including 0, False and "".
    """
    if char is None:
        char = get_config().format.empty_char
    return value or char


@format_for_type(TypeTag.STRING)
def to_phone(value: str) -> str:
    """
    Format a value as a phone number, "(DD) NNNN-NNNN" or "(DD) NNNNN-NNNN".

    Partial input is punctuated as far as it goes.
    """
    return replace(value, [
        (NON_DIGITS, ""),
        (re.compile(r"([0-9]{1,2})"), r"(\1", 1),
        (re.compile(r"(\([0-9]{2})([0-9]{1,4})"), r"\1) \2", 1),
        (re.compile(r"( [0-9]{4})([0-9]{1,4})"), r"\1-\2", 1),
        (re.compile(r"( [0-9]{4})-([0-9])([0-9]{4})"), r"\1\2-\3", 1),
    ])


@format_for_type(TypeTag.STRING)
def to_clean(value: str) -> str:
    """
    Remove accents from a text.

    Examples:
        "Vítor" -> "Vitor"
        "Olá, tudo bem com você?" -> "Ola, tudo bem com voce?"
    """
    return _fold_diacritics(value)


@format_for_type(TypeTag.STRING)
def to_slug(value: str) -> str:
    """Format a text as kebab-case, e.g. "Pão & Açúcar" -> "pao-e-acucar"."""
    return replace(_normalize_text(value), [
        ("&", "-e-"),
        (NON_WORD, "-"),
        (re.compile(r"-{2,}"), "-"),
        (re.compile(r"^-+|-+$"), ""),
    ])


@format_for_type(TypeTag.STRING)
def to_cep(value: str) -> str:
    """Format a value as CEP, e.g. "12345678" -> "12345-678"."""
    return replace(value, [
        (NON_DIGITS, ""),
        (re.compile(r"([0-9]{5})([0-9]{1,3})"), r"\1-\2", 1),
    ])


FORMATTERS = {
    "to_cpf": to_cpf,
    "to_rg": to_rg,
    "to_money": to_money,
    "to_years": to_years,
    "to_days": to_days,
    "to_date": to_date,
    "to_interval": to_interval,
    "to_empty": to_empty,
    "to_phone": to_phone,
    "to_clean": to_clean,
    "to_slug": to_slug,
    "to_cep": to_cep,
}
