"""
Chained text rewriting.

Every formatter is a list of replace steps run in order over a string.
A step is ``(matcher, replacement)`` or ``(matcher, replacement, count)``:
literal ``str`` matchers go through ``str.replace``, compiled patterns
through ``Pattern.sub`` (so replacements may use ``\\1`` back-references).
A count of 0 replaces every match.
"""
import re
from functools import reduce
from typing import Any, Callable, Iterable, Sequence, Tuple, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")

Matcher = Union[str, re.Pattern]
Step = Union[Tuple[Matcher, str], Tuple[Matcher, str, int]]


def chain(initial: A, selector: Callable[[Any], Callable[..., Any]], steps: Iterable[Sequence]) -> B:
    """
    Fold steps over an initial value.

    For each argument tuple, ``selector(current)`` gives the operation to
    run and it is called with the tuple unpacked. Its result is the input
    of the next step.

    Args:
        initial: Starting value
        selector: Returns the operation to apply to the current value
        steps: Argument tuples, one per step

    Returns:
        Value after the last step
    """
    return reduce(lambda value, args: selector(value)(*args), steps, initial)


def _replacer(text: str) -> Callable[..., str]:
    def run(matcher: Matcher, replacement: str, count: int = 0) -> str:
        if isinstance(matcher, str):
            return text.replace(matcher, replacement, count or -1)
        return matcher.sub(replacement, text, count=count)

    return run


def replace(text: str, steps: Iterable[Step]) -> str:
    """Run replace steps over text, in order."""
    return chain(text, _replacer, steps)
