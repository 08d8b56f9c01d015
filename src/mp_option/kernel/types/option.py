"""Option[T] — Some and Nothing variants."""

from __future__ import annotations

from typing import Any, Final, Generic, Iterator, Literal, TypeVar

T = TypeVar("T")


class Some(Generic[T]):
    """Option with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    kind: Final[Literal["some"]] = "some"

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Some):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("some", self._value))

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __reduce__(self) -> tuple[type[Some[T]], tuple[T]]:
        return (Some, (self._value,))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing:
    """Empty option. There is exactly one instance, :data:`NOTHING`."""

    __slots__ = ()
    __match_args__ = ()

    kind: Final[Literal["none"]] = "none"

    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Nothing is immutable")

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __copy__(self) -> Nothing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Nothing:
        return self

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Final[Nothing] = Nothing()

type Option[T] = Some[T] | Nothing


def some(value: T) -> Some[T]:
    """Wrap *value*; ``None`` is a valid payload too."""
    return Some(value)


def none() -> Nothing:
    """Return the shared :data:`NOTHING` instance."""
    return NOTHING


__all__ = ["NOTHING", "Nothing", "Option", "Some", "none", "some"]
