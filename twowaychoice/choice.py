from collections.abc import Callable
from typing import Any, Literal, NoReturn, Self, final
import copy
import logging

logger = logging.getLogger(__name__)


class WrongVariantError(AssertionError):
    """
    Raised when a choice is unwrapped as the variant it isn't.

    This is a programming error on the caller's side. Use ``is_first()`` /
    ``is_second()`` or the ``None``-returning ``into_*`` accessors first.
    """

    expected: str
    actual: str

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tried to unwrap `{expected}` variant, but it was `{actual}`."
        )


def _wrong_variant(expected: str, actual: str) -> WrongVariantError:
    logger.debug("Attempted to unwrap %s on a %s choice", expected, actual)
    return WrongVariantError(expected, actual)


class _Choice[_T]:
    __match_args__ = ("value",)

    _value: _T

    def __init__(self, value: _T) -> None:
        self._value = value

    @property
    def value(self) -> _T:
        return self._value

    def by_reference(self) -> Self:
        # Same variant, same payload object. Nothing is copied.
        return type(self)(self._value)

    def clone(self) -> Self:
        return copy.deepcopy(self)

    def __copy__(self) -> Self:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        new = type(self).__new__(type(self))
        # Register before copying so a payload that refers back to us resolves
        memo[id(self)] = new
        new._value = copy.deepcopy(self._value, memo)
        return new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Choice):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __str__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


@final
class First[_AT](_Choice[_AT]):
    def is_first(self) -> Literal[True]:
        return True

    def is_second(self) -> Literal[False]:
        return False

    def into_first(self) -> _AT:
        return self._value

    def into_second(self) -> None:
        return None

    def map_first[_NT](self, transform: Callable[[_AT], _NT]) -> "First[_NT]":
        return First(transform(self._value))

    def map_second(self, transform: Callable[[Any], object]) -> "First[_AT]":
        return self.clone()

    def unwrap_first(self) -> _AT:
        return self._value

    def unwrap_second(self) -> NoReturn:
        raise _wrong_variant(expected="Second", actual="First")


@final
class Second[_BT](_Choice[_BT]):
    def is_first(self) -> Literal[False]:
        return False

    def is_second(self) -> Literal[True]:
        return True

    def into_first(self) -> None:
        return None

    def into_second(self) -> _BT:
        return self._value

    def map_first(self, transform: Callable[[Any], object]) -> "Second[_BT]":
        return self.clone()

    def map_second[_NT](self, transform: Callable[[_BT], _NT]) -> "Second[_NT]":
        return Second(transform(self._value))

    def unwrap_first(self) -> NoReturn:
        raise _wrong_variant(expected="First", actual="Second")

    def unwrap_second(self) -> _BT:
        return self._value


type TwoWayChoice[_AT, _BT] = First[_AT] | Second[_BT]
