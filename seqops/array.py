"""Native helpers for working directly against immutable sequences.

Every function here is curried, never mutates its arguments, never raises for
a recoverable condition and never returns ``None`` as an absent result.
Lookups that may fail return a :class:`~seqops.maybe.Just` or
:data:`~seqops.maybe.NOTHING`. Inputs may be any finite sequence; results are
always fresh tuples.

Several exports share their name with a Python builtin (``map``, ``filter``,
``sum``, ``range`` ...). Inside this module the builtins are reached through
:mod:`builtins`.
"""

from __future__ import annotations

import builtins
import math
import operator
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Callable, Sequence

from .maybe import NOTHING, is_just, just

Seq = Sequence[Any]


def _clamp(value: int, upper: int) -> int:
    return min(max(value, 0), upper)


def _float_text(value: float) -> str:
    """Shortest round-tripping text of a finite float.

    Plain decimal notation for magnitudes in ``[1e-6, 1e21)``, otherwise a
    mantissa with an explicitly signed, unpadded exponent (``1e-7``, ``1e+21``).
    """

    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return sign + text


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _float_text(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(_to_text(item) for item in value)
    return str(value)


def length(seq: Seq) -> int:
    """Number of elements in ``seq``."""

    return len(seq)


def find(pred: Callable[[Any], bool]) -> Callable[[Seq], Any]:
    """First element satisfying ``pred`` wrapped in ``Just``, else ``NOTHING``."""

    def _find(seq: Seq) -> Any:
        for item in seq:
            if pred(item):
                return just(item)
        return NOTHING

    return _find


def find_map(f: Callable[[Any], Any]) -> Callable[[Seq], Any]:
    """Locate a mapped element.

    ``f`` returns a Maybe for every element; the first ``Just`` produced, in
    index order, is returned as is. Elements after it are never visited.
    """

    def _find_map(seq: Seq) -> Any:
        for item in seq:
            result = f(item)
            if is_just(result):
                return result
        return NOTHING

    return _find_map


def map(f: Callable[[Any], Any]) -> Callable[[Seq], tuple]:
    def _map(seq: Seq) -> tuple:
        return tuple(f(item) for item in seq)

    return _map


def indexed_map(f: Callable[[int], Callable[[Any], Any]]) -> Callable[[Seq], tuple]:
    """Like :func:`map` but ``f`` receives the zero-based index first."""

    def _indexed_map(seq: Seq) -> tuple:
        return tuple(f(index)(item) for index, item in enumerate(seq))

    return _indexed_map


def append(item: Any) -> Callable[[Seq], tuple]:
    def _append(seq: Seq) -> tuple:
        return (*seq, item)

    return _append


def prepend(item: Any) -> Callable[[Seq], tuple]:
    def _prepend(seq: Seq) -> tuple:
        return (item, *seq)

    return _prepend


def slice(start: int) -> Callable[[int], Callable[[Seq], tuple]]:
    """Elements from ``start`` up to, but excluding, ``end``.

    Both bounds are clamped into ``[0, length]``. Negative bounds clamp to the
    front of the sequence instead of counting from the tail, and an empty
    tuple comes back whenever the clamped start is not before the clamped end.
    """

    start = operator.index(start)

    def _with_end(end: int) -> Callable[[Seq], tuple]:
        end_index = operator.index(end)

        def _slice(seq: Seq) -> tuple:
            size = len(seq)
            lower = _clamp(start, size)
            upper = _clamp(end_index, size)
            if lower >= upper:
                return ()
            return tuple(seq[lower:upper])

        return _slice

    return _with_end


def range(lower: int) -> Callable[[int], tuple]:
    """Integers from ``lower`` towards, but not including, ``upper``.

    The range descends when ``lower`` is larger than ``upper``.
    """

    lower = operator.index(lower)

    def _range(upper: int) -> tuple:
        upper = operator.index(upper)
        if lower < upper:
            return tuple(builtins.range(lower, upper))
        return tuple(builtins.range(lower, upper, -1))

    return _range


def concat(first: Seq) -> Callable[[Seq], tuple]:
    def _concat(second: Seq) -> tuple:
        return (*first, *second)

    return _concat


def reduce(
    on_empty: Callable[[], Any],
) -> Callable[[Callable[[Any], Callable[[tuple], Any]]], Callable[[Seq], Any]]:
    """Treat the sequence as a cons list.

    ``on_empty()`` is called for an empty sequence, otherwise
    ``on_non_empty(head)(tail)``.
    """

    def _with_cons(on_non_empty):
        def _reduce(seq: Seq) -> Any:
            if len(seq) == 0:
                return on_empty()
            return on_non_empty(seq[0])(tuple(seq[1:]))

        return _reduce

    return _with_cons


def flatten(seqs: Sequence[Seq]) -> tuple:
    """Concatenate nested sequences; an empty outer sequence gives ``()``."""

    return tuple(item for inner in seqs for item in inner)


def zip_with(
    f: Callable[[Any], Callable[[Any], Any]],
) -> Callable[[Seq], Callable[[Seq], tuple]]:
    """Combine elements at equal indices, discarding the longer tail."""

    def _with_first(first: Seq) -> Callable[[Seq], tuple]:
        def _zip_with(second: Seq) -> tuple:
            return tuple(f(a)(b) for a, b in zip(first, second))

        return _zip_with

    return _with_first


def join(sep: str) -> Callable[[Seq], str]:
    """Render every element as text and interleave ``sep``."""

    def _join(seq: Seq) -> str:
        return sep.join(_to_text(item) for item in seq)

    return _join


def filter(pred: Callable[[Any], bool]) -> Callable[[Seq], tuple]:
    def _filter(seq: Seq) -> tuple:
        return tuple(item for item in seq if pred(item))

    return _filter


def sort(compare: Callable[[Any], Callable[[Any], int]]) -> Callable[[Seq], tuple]:
    """Stable sort driven by a curried comparator.

    * ``compare(a)(b) < 0`` sorts ``a`` before ``b``.
    * ``compare(a)(b) == 0`` keeps ``a`` and ``b`` in their original order.
    * ``compare(a)(b) > 0`` sorts ``b`` before ``a``.

    An inconsistent comparator leaves the resulting order unspecified.
    """

    key = cmp_to_key(lambda a, b: compare(a)(b))

    def _sort(seq: Seq) -> tuple:
        return tuple(sorted(seq, key=key))

    return _sort


def fold_l(seed: Any) -> Callable[[Callable], Callable[[Seq], Any]]:
    """Fold from the left with ``f(acc)(item)``."""

    def _with_f(f):
        def _fold_l(seq: Seq) -> Any:
            result = seed
            for item in seq:
                result = f(result)(item)
            return result

        return _fold_l

    return _with_f


def fold_r(seed: Any) -> Callable[[Callable], Callable[[Seq], Any]]:
    """Fold from the right with ``f(item)(acc)``."""

    def _with_f(f):
        def _fold_r(seq: Seq) -> Any:
            result = seed
            for item in reversed(seq):
                result = f(item)(result)
            return result

        return _fold_r

    return _with_f


def sum(seq: Sequence[Any]) -> Any:
    return fold_l(0)(lambda acc: lambda item: acc + item)(seq)


def drop(n: int) -> Callable[[Seq], tuple]:
    """Remove the first ``n`` elements."""

    n = operator.index(n)

    def _drop(seq: Seq) -> tuple:
        return slice(n)(length(seq))(seq)

    return _drop


def at(index: int) -> Callable[[Seq], Any]:
    """Safe indexed read returning ``Just`` or ``NOTHING``."""

    index = operator.index(index)

    def _at(seq: Seq) -> Any:
        if index < 0 or index >= len(seq):
            return NOTHING
        return just(seq[index])

    return _at


def set(index: int) -> Callable[[Any], Callable[[Seq], tuple]]:
    """Copy of the sequence with the element at ``index`` replaced.

    An index outside ``[0, length)`` hands back the elements unchanged.
    """

    index = operator.index(index)

    def _with_value(value: Any) -> Callable[[Seq], tuple]:
        def _set(seq: Seq) -> tuple:
            if index < 0 or index >= length(seq):
                return tuple(seq)
            head = append(value)(slice(0)(index)(seq))
            return concat(head)(drop(index + 1)(seq))

        return _set

    return _with_value


def any(pred: Callable[[Any], bool]) -> Callable[[Seq], bool]:
    def _any(seq: Seq) -> bool:
        return builtins.any(pred(item) for item in seq)

    return _any


def all(pred: Callable[[Any], bool]) -> Callable[[Seq], bool]:
    # ``and`` stops consulting pred once the accumulator turns false.
    def _all(seq: Seq) -> bool:
        return fold_l(True)(lambda acc: lambda item: acc and bool(pred(item)))(seq)

    return _all


__all__ = [
    "length",
    "find",
    "find_map",
    "map",
    "indexed_map",
    "append",
    "prepend",
    "slice",
    "range",
    "concat",
    "reduce",
    "flatten",
    "zip_with",
    "join",
    "filter",
    "sort",
    "fold_l",
    "fold_r",
    "sum",
    "drop",
    "at",
    "set",
    "any",
    "all",
]
