"""Optional values consumed by the native sequence module.

The sequence functions only ever use three capabilities of this type:
constructing a present value (:func:`just`), the absent constant
(:data:`NOTHING`) and the presence test (:func:`is_just`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Just:
    """Present variant carrying a single value."""

    value: Any

    def __repr__(self) -> str:  # pragma: no cover - representation helper
        return f"Just({self.value!r})"


class Nothing:
    """Absent variant. Only one instance, :data:`NOTHING`, ever exists."""

    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:  # pragma: no cover - representation helper
        return "Nothing"


NOTHING = Nothing()


def just(value: Any) -> Just:
    return Just(value)


def is_just(m: Any) -> bool:
    return isinstance(m, Just)


def is_nothing(m: Any) -> bool:
    return isinstance(m, Nothing)


def with_default(default: Any) -> Callable[[Any], Any]:
    """Return the wrapped value of a ``Just`` or ``default`` for ``NOTHING``."""

    def _extract(m: Any) -> Any:
        return m.value if is_just(m) else default

    return _extract


__all__ = [
    "Just",
    "NOTHING",
    "Nothing",
    "is_just",
    "is_nothing",
    "just",
    "with_default",
]
