"""
Resolvable Input Shapes

The resolver accepts either a single string or an ordered sequence of
strings. The shape is decided once, when the input enters the pipeline, and
travels with the data until the result is handed back to the caller.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class ScalarString:
    """A single string input."""

    value: str

    def strings(self) -> Iterator[str]:
        yield self.value

    def map(self, func: Callable[[str], str]) -> "ScalarString":
        return ScalarString(func(self.value))

    def unwrap(self) -> str:
        return self.value


@dataclass(frozen=True)
class StringList:
    """An ordered sequence of strings (list or tuple)."""

    values: Tuple[str, ...]
    container: type = list

    def strings(self) -> Iterator[str]:
        return iter(self.values)

    def map(self, func: Callable[[str], str]) -> "StringList":
        return StringList(tuple(func(v) for v in self.values), self.container)

    def unwrap(self) -> Sequence[str]:
        return self.container(self.values)


Resolvable = Union[ScalarString, StringList]


def as_resolvable(value: Any) -> Optional[Resolvable]:
    """
    Classify a raw input value.

    Args:
        value: Raw input supplied by the caller

    Returns:
        ScalarString for a str, StringList for a list/tuple made only of
        strings, None for any other shape (which passes through unresolved)
    """
    if isinstance(value, str):
        return ScalarString(value)
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return StringList(tuple(value), type(value))
    return None
