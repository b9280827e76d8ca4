"""Error-accumulating results and the reducers that merge them.

Each shredding stage returns either ``Valid(value)`` or
``Invalid(errors)``. Independent results are merged with :func:`combine`
(lists from separate branches) or :func:`sequence` (per-item results within
one branch); both keep going after a failure so the merged ``Invalid``
carries every error, in input order.

Examples
--------
>>> combine([Valid([1]), Valid([]), Valid([2, 3])])
Valid(value=[1, 2, 3])

"""

from __future__ import annotations

import dataclasses
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .errors import ShredError


@dataclasses.dataclass(frozen=True, slots=True)
class Valid[T]:
    """A successful stage result."""

    value: T

    @property
    def is_valid(self) -> bool:
        """Return True."""
        return True


@dataclasses.dataclass(frozen=True, slots=True)
class Invalid:
    """A failed stage result carrying one or more errors."""

    errors: tuple[ShredError, ...]

    def __post_init__(self) -> None:
        """Reject an empty error tuple."""
        if not self.errors:
            msg = "Invalid requires at least one error"
            raise ValueError(msg)

    @classmethod
    def of(cls, error: ShredError, *more: ShredError) -> Invalid:
        """Build from one or more errors."""
        return cls((error, *more))

    @property
    def is_valid(self) -> bool:
        """Return False."""
        return False


type Validated[T] = Valid[T] | Invalid


def combine[T](results: cabc.Iterable[Validated[list[T]]]) -> Validated[list[T]]:
    """Concatenate list results, accumulating errors from every failure.

    Parameters
    ----------
    results
        Results in the order their values (or errors) should appear.

    Returns
    -------
    Validated[list[T]]
        ``Valid`` with all values concatenated when every input is valid,
        otherwise ``Invalid`` with all errors concatenated.

    """
    values: list[T] = []
    errors: list[ShredError] = []
    for result in results:
        match result:
            case Valid(value=value):
                values.extend(value)
            case Invalid(errors=failed):
                errors.extend(failed)
    if errors:
        return Invalid(tuple(errors))
    return Valid(values)


def sequence[T](results: cabc.Iterable[Validated[T]]) -> Validated[list[T]]:
    """Collect single-value results into one list result.

    Every input is inspected; errors are accumulated rather than stopping
    at the first failure.
    """
    return combine(_as_list(result) for result in results)


def _as_list[T](result: Validated[T]) -> Validated[list[T]]:
    match result:
        case Valid(value=value):
            return Valid([value])
        case Invalid():
            return result
