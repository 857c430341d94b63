"""
Positive numeric identifiers.

Identifiers come from storage or from authenticated internal state, so a
non-positive value is an internal invariant violation and fails with an
``InternalServerError`` rather than a client error.
"""

from typing import ClassVar

from userhub.domain.errors import InternalServerError

INT64_MAX = 2**63 - 1


class Identifier:
    """Signed 64-bit integer identifier that is strictly positive."""

    __slots__ = ("_value",)

    label: ClassVar[str] = "identifier"

    def __init__(self, value: int):
        # bool is an int subclass but never a valid identifier
        if (
            not isinstance(value, int)
            or isinstance(value, bool)
            or not 0 < value <= INT64_MAX
        ):
            raise InternalServerError(f"{self.label} must be a positive integer")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)


class UserId(Identifier):
    """Primary key of a user row."""

    __slots__ = ()

    label = "UserId"
