"""
Parameter Store Models

Data classes describing references found in the input and parameters
returned by the parameter store.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

# Delimiter the parameter store uses to encode StringList values
STRING_LIST_DELIMITER = ","


class ParameterType(Enum):
    """Parameter types supported by the parameter store."""

    STRING = "String"
    STRING_LIST = "StringList"
    SECURE_STRING = "SecureString"

    @classmethod
    def from_value(cls, value: str) -> "ParameterType":
        """
        Look up a ParameterType from the store's type string.

        Raises:
            ValueError: If the type is not known
        """
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown parameter type '{value}'")


@dataclass(frozen=True)
class Reference:
    """A {{ ssm:name }} occurrence found in the input."""

    raw: str
    name: str


@dataclass(frozen=True)
class Parameter:
    """A parameter resolved by the parameter store."""

    name: str
    type: ParameterType
    value: str
    version: Optional[int] = None
    arn: Optional[str] = None

    @property
    def is_secure(self) -> bool:
        return self.type == ParameterType.SECURE_STRING

    @property
    def values(self) -> List[str]:
        """Individual values of a StringList parameter (single item for other types)."""
        if self.type == ParameterType.STRING_LIST:
            return self.value.split(STRING_LIST_DELIMITER)
        return [self.value]

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        value = "***" if self.is_secure else repr(self.value)
        return f"Parameter(name={self.name!r}, type={self.type.value}, value={value})"


@dataclass
class LookupResult:
    """
    Outcome of one batched parameter store call.

    Attributes:
        parameters: Resolved parameters keyed by name, in the order returned
        invalid_names: Requested names the store reported as invalid
    """

    parameters: Dict[str, Parameter] = field(default_factory=dict)
    invalid_names: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of names accounted for by this result."""
        return len(self.parameters) + len(self.invalid_names)

    def merge(self, other: "LookupResult") -> None:
        """Fold another (chunked) result into this one."""
        self.parameters.update(other.parameters)
        for name in other.invalid_names:
            if name not in self.invalid_names:
                self.invalid_names.append(name)


# Raw reference text -> Parameter
ResolvedMap = Dict[str, Parameter]
