from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, List

from .errors import ArrayArgumentError, ArrayErrorCode


# str/bytes are sequences too, but never count as arrays here
_SCALAR_SEQUENCES = (str, bytes, bytearray)


def is_array_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def ensure_arrays(arrays: Sequence[Any], code: ArrayErrorCode) -> None:
    """
    Fail fast before any work is done: every argument must be array-like.
    """
    for index, value in enumerate(arrays):
        if not is_array_like(value):
            raise ArrayArgumentError(code, argument_index=index, argument=value)


def dedupe(items: Iterable[Any]) -> List[Any]:
    """
    Return items in order, dropping later duplicates (compared with ==).

    Hashable items go through a set; unhashable ones (dicts, lists) fall back
    to a linear scan.
    """
    seen = set()
    seen_unhashable: List[Any] = []
    out: List[Any] = []

    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        out.append(item)

    return out


def intersection(base: Iterable[Any], *arrays: Sequence[Any]) -> List[Any]:
    """Distinct items of `base` that are also in every one of `arrays`."""
    ensure_arrays(arrays, ArrayErrorCode.INTERSECTION_INVALID_ARGUMENT)

    result = dedupe(base)
    for array in arrays:
        result = [item for item in result if item in array]
    return result


def xor(base: Sequence[Any], *arrays: Sequence[Any]) -> List[Any]:
    """
    Items that appear in exactly one of `base` and `arrays`.

    Order is first-seen order, walking `base` first and then `arrays` in turn.
    """
    ensure_arrays(arrays, ArrayErrorCode.XOR_INVALID_ARGUMENT)

    sequences = [base, *arrays]
    accumulated: List[Any] = []

    for i, current in enumerate(sequences):
        others = [s for j, s in enumerate(sequences) if j != i]
        kept = [item for item in accumulated if item not in current]
        added = [
            item for item in current
            if item not in accumulated and not any(item in other for other in others)
        ]
        accumulated = kept + added

    return dedupe(accumulated)


def union(base: Iterable[Any], *arrays: Sequence[Any]) -> List[Any]:
    """
    Distinct items of `base` followed by unseen items of each array.

    Array-like elements of the arrays are spread as well (two levels); the
    elements of `base` are taken as they are.
    """
    ensure_arrays(arrays, ArrayErrorCode.UNIQUE_INVALID_ARGUMENT)

    flat = list(base)
    for array in arrays:
        for item in array:
            if is_array_like(item):
                flat.extend(item)
            else:
                flat.append(item)
    return dedupe(flat)
