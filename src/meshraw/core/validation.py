"""
Array set validation.

Checks that an ArraySet can be concatenated column-wise and derives the shape
of the output matrix.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from meshraw.core.arrays import ArraySet, NamedArray
from meshraw.core.errors import EmptyInputError, InconsistentTupleCountError, MissingArrayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArraySummary:
    """Diagnostic record emitted for each validated array."""
    index: int
    component_count: int
    tuple_count: int
    name: str


@dataclass(frozen=True, eq=False)
class ValidatedSet:
    """Arrays that passed validation, with the derived output shape."""
    arrays: Tuple[NamedArray, ...]
    total_components: int
    row_count: int

    @property
    def array_count(self) -> int:
        return len(self.arrays)


def validate(array_set: ArraySet,
             on_array: Optional[Callable[[ArraySummary], None]] = None) -> ValidatedSet:
    """Validate an array set for concatenation.

    The tuple count of array 0 is authoritative: every other array is compared
    against it, not against its neighbour.

    Args:
        array_set: Arrays to validate
        on_array: Optional callback receiving an ArraySummary per array

    Returns:
        ValidatedSet with total component count and row count

    Raises:
        EmptyInputError: If the set has no arrays
        MissingArrayError: If any slot of the set is None
        InconsistentTupleCountError: If a tuple count differs from array 0's
    """
    if len(array_set) == 0:
        raise EmptyInputError("DataSet has no point data arrays")

    for index, array in enumerate(array_set):
        if array is None:
            logger.error(f"Array {index} is missing")
            raise MissingArrayError(index)

    arrays = []
    total_components = 0
    row_count = 0

    for index, array in enumerate(array_set):
        if index == 0:
            row_count = array.tuple_count
        elif array.tuple_count != row_count:
            raise InconsistentTupleCountError(index, array.name, row_count, array.tuple_count)

        total_components += array.component_count
        arrays.append(array)

        summary = ArraySummary(index, array.component_count, array.tuple_count, array.name)
        logger.info(
            f"Array: {summary.index}, NumberOfComponents: {summary.component_count}, "
            f"NumberOfTuples: {summary.tuple_count}, ArrayName: {summary.name}"
        )
        if on_array is not None:
            on_array(summary)

    return ValidatedSet(tuple(arrays), total_components, row_count)
