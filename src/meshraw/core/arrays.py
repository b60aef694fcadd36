"""
Point data containers.

A NamedArray holds one per-point data array as a dense (tuples, components)
float64 matrix. An ArraySet keeps the arrays of one dataset in the order the
source file lists them, which is also the column order of the output.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class NamedArray:
    """A named point data array.

    Attributes:
        name: Array name as found in the source file (may be empty or repeated)
        data: Values with shape (tuple_count, component_count)
    """

    name: str
    data: np.ndarray

    def __post_init__(self) -> None:
        if self.data.ndim != 2:
            raise ValueError(f"Array '{self.name}' must be 2-D, got shape {self.data.shape}")
        if self.data.shape[1] < 1:
            raise ValueError(f"Array '{self.name}' must have at least one component")

    @classmethod
    def from_values(cls, name: str, values: Any) -> "NamedArray":
        """Build an array from any array-like of per-tuple values.

        1-D input becomes a single component array. Trailing dimensions are
        flattened in C order, so a (n, 3, 3) tensor array has 9 components.

        Args:
            name: Array name
            values: Array-like whose first axis indexes tuples

        Returns:
            NamedArray with float64 data

        Raises:
            ValueError: If the values are scalar or have no components
        """
        data = np.asarray(values, dtype=np.float64)

        if data.ndim == 0:
            raise ValueError(f"Array '{name}' must have a tuple axis, got a scalar")
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        elif data.ndim > 2:
            data = data.reshape(data.shape[0], -1)

        return cls(name=name if name is not None else "", data=np.ascontiguousarray(data))

    @property
    def component_count(self) -> int:
        return int(self.data.shape[1])

    @property
    def tuple_count(self) -> int:
        return int(self.data.shape[0])

    def component(self, tuple_index: int, component_index: int) -> float:
        """Return one value of the array."""
        return float(self.data[tuple_index, component_index])


class ArraySet:
    """Ordered collection of point data arrays.

    A slot may hold None when the reader could not provide the array; the
    validator rejects such sets.
    """

    def __init__(self, arrays: Optional[Iterable[Optional[NamedArray]]] = None):
        self._arrays: List[Optional[NamedArray]] = list(arrays) if arrays is not None else []

    def append(self, array: Optional[NamedArray]) -> None:
        self._arrays.append(array)

    @property
    def names(self) -> List[str]:
        return [array.name if array is not None else "" for array in self._arrays]

    def __len__(self) -> int:
        return len(self._arrays)

    def __iter__(self) -> Iterator[Optional[NamedArray]]:
        return iter(self._arrays)

    def __getitem__(self, index: int) -> Optional[NamedArray]:
        return self._arrays[index]

    def __repr__(self) -> str:
        return f"ArraySet({self.names!r})"
