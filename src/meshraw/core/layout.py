"""Column layout of the concatenated output matrix."""

from dataclasses import dataclass
from typing import Iterator, Tuple

from meshraw.core.validation import ValidatedSet


@dataclass(frozen=True)
class ColumnBlock:
    """Columns occupied by one array in the output matrix."""
    array_index: int
    start_column: int
    component_count: int

    @property
    def stop_column(self) -> int:
        return self.start_column + self.component_count


class ColumnLayout:
    """Sequence of column blocks in array order.

    Both serializers address columns through this layout, so text and binary
    output always agree on the field order.
    """

    def __init__(self, blocks: Tuple[ColumnBlock, ...]):
        self.blocks = blocks

    @property
    def total_columns(self) -> int:
        return self.blocks[-1].stop_column if self.blocks else 0

    def column_slice(self, array_index: int) -> slice:
        block = self.blocks[array_index]
        return slice(block.start_column, block.stop_column)

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[ColumnBlock]:
        return iter(self.blocks)

    def __repr__(self) -> str:
        return f"ColumnLayout({list(self.blocks)!r})"


def plan(validated: ValidatedSet) -> ColumnLayout:
    """Compute the start column of every array as a prefix sum of component counts."""
    blocks = []
    start = 0
    for index, array in enumerate(validated.arrays):
        blocks.append(ColumnBlock(index, start, array.component_count))
        start += array.component_count
    return ColumnLayout(tuple(blocks))
