"""
Formatter decorators.

A guarded formatter runs only when its predicate accepts the arguments;
otherwise it returns None instead of raising or returning a mangled
string.
"""
import functools
from typing import Any, Callable, Optional, TypeVar, Union

import structlog

from .types import TypeTag, is_type

T = TypeVar("T")

logger = structlog.get_logger()


def guard_by(predicate: Callable[..., Any], formatter: Callable[..., T]) -> Callable[..., Optional[T]]:
    """
    Wrap formatter so it only runs when predicate accepts the arguments.

    Args:
        predicate: Called with the same arguments as the formatter
        formatter: Function to guard

    Returns:
        Function returning the formatter's result, or None when the
        predicate is falsy
    """
    @functools.wraps(formatter)
    def guarded(*args, **kwargs) -> Optional[T]:
        if not predicate(*args, **kwargs):
            logger.debug("formatter_rejected_input", formatter=getattr(formatter, "__name__", repr(formatter)))
            return None
        return formatter(*args, **kwargs)

    return guarded


def guard_by_type(tag: Union[TypeTag, str], formatter: Callable[..., T]) -> Callable[..., Optional[T]]:
    """Wrap formatter so it only runs when its first argument has the given type tag."""
    return guard_by(lambda value, *args, **kwargs: is_type(value, tag), formatter)


def format_for(predicate: Callable[..., Any]) -> Callable[[Callable[..., T]], Callable[..., Optional[T]]]:
    """Decorator form of guard_by."""
    return functools.partial(guard_by, predicate)


def format_for_type(tag: Union[TypeTag, str]) -> Callable[[Callable[..., T]], Callable[..., Optional[T]]]:
    """Decorator form of guard_by_type."""
    return functools.partial(guard_by_type, tag)
