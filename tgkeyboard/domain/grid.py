"""Button grid accumulator and the transforms that reshape it.

A grid is a jagged list of rows, each row a list of buttons. Buttons are
opaque here: nothing in this module looks inside them, so the same code
serves reply keyboards, inline keyboards and any other payload type.

Every transform allocates new row lists. Mutating a result never changes
the grid it was computed from.
"""

import logging
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Type,
    TypeVar,
)

from .errors import InvalidColumnCount

logger = logging.getLogger(__name__)

B = TypeVar("B")

GridT = TypeVar("GridT", bound="ButtonGrid[Any]")


def copy_grid(grid: Iterable[Iterable[B]]) -> List[List[B]]:
    """Copy every row of a grid. Button references are shared."""
    return [list(row) for row in grid]


def transpose(grid: Sequence[Sequence[B]]) -> List[List[B]]:
    """Swap the row and column index of every button.

    The button at ``(r, c)`` ends up at ``(c, r)``. Output rows are created
    as column indices are first seen, so ragged input gives ragged output::

        [[a], [b, c, d]]  ->  [[a, b], [c], [d]]

    Transposing that result again does not restore the input. Only
    rectangular grids survive a round trip.
    """
    transposed: List[List[B]] = []
    for row in grid:
        for col, button in enumerate(row):
            if col == len(transposed):
                transposed.append([])
            transposed[col].append(button)
    return transposed


def reflow(
    grid: Sequence[Sequence[B]], columns: int, fill_last_row: bool = False
) -> List[List[B]]:
    """Re-chunk all buttons into rows of ``columns`` buttons.

    Buttons are read in row-major order, ignoring the original row
    boundaries. By default the last row holds whatever is left over. With
    ``fill_last_row`` the first row takes the remainder instead so that the
    last row is full::

        [a b c d]        [a b c]            [a]
        [e f g h]  ~>    [d e f]    or      [b c d]
        [i j]            [g h i]            [e f g]
                         [j]                [h i j]

    Args:
        grid: Rows of buttons to reflow
        columns: Target row width, must be a positive integer
        fill_last_row: Put the short row first instead of last

    Returns:
        A new grid. An empty input gives an empty list of rows.

    Raises:
        InvalidColumnCount: If ``columns`` is not a positive integer
    """
    if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
        raise InvalidColumnCount(columns)

    buttons = [button for row in grid for button in row]
    first = len(buttons) % columns if fill_last_row else columns
    if first == 0:
        # Evenly divisible: no short row at all
        first = columns

    reflowed: List[List[B]] = []
    if buttons:
        reflowed.append(buttons[:first])
        for start in range(first, len(buttons), columns):
            reflowed.append(buttons[start : start + columns])

    logger.debug(
        "Reflowed %d buttons into %d rows of %d (fill_last_row=%s)",
        len(buttons),
        len(reflowed),
        columns,
        fill_last_row,
    )
    return reflowed


class ButtonGrid(Generic[B]):
    """Mutable builder holding a two-dimensional grid of buttons.

    ``add`` appends to the current (last) row and ``row`` starts a new one.
    Both return the builder so calls can be chained::

        grid = ButtonGrid().add(a, b).row().add(c)
        grid.build()  # [[a, b], [c]]

    Subclasses may carry extra options; they override ``_copy_options`` so
    that ``clone`` and the transforms keep them.
    """

    def __init__(self, rows: Optional[Iterable[Iterable[B]]] = None) -> None:
        self.rows: List[List[B]] = [[]] if rows is None else copy_grid(rows)

    def __iter__(self) -> Iterator[List[B]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows!r})"

    def add(self: GridT, *buttons: B) -> GridT:
        """Append buttons to the last row."""
        if not self.rows:
            self.rows.append([])
        self.rows[-1].extend(buttons)
        return self

    def row(self: GridT, *buttons: B) -> GridT:
        """Start a new row, optionally seeded with ``buttons``.

        Buttons added afterwards go into this new row.
        """
        self.rows.append(list(buttons))
        return self

    def clone(self: GridT, rows: Optional[Iterable[Iterable[B]]] = None) -> GridT:
        """Return an independent copy of this builder.

        Args:
            rows: Replacement grid for the copy. Options are copied either way.
        """
        clone = type(self)(self.rows if rows is None else rows)
        self._copy_options(clone)
        return clone

    def _copy_options(self, clone: "ButtonGrid[B]") -> None:
        """Copy builder options onto ``clone``. The base grid has none."""

    def append(self: GridT, *sources: Any) -> GridT:
        """Append the rows of other builders or 2D sequences, in order.

        Rows are copied, and rows from different sources stay separate.
        """
        for source in sources:
            other = self.from_(source)
            self.rows.extend(other.rows)
        return self

    def transpose(self: GridT) -> GridT:
        """Return a copy of this builder with its grid transposed."""
        return self.clone(transpose(self.rows))

    def to_flowed(self: GridT, columns: int, fill_last_row: bool = False) -> GridT:
        """Return a copy of this builder with its buttons reflowed.

        See :func:`reflow` for the layout rules.
        """
        return self.clone(reflow(self.rows, columns, fill_last_row=fill_last_row))

    def build(self) -> List[List[B]]:
        """Return the finished grid as a list of row lists."""
        return copy_grid(self.rows)

    @classmethod
    def from_(cls: Type[GridT], source: Any) -> GridT:
        """Create a builder from another builder or a 2D sequence.

        Builders of this type are cloned. Anything else is read row by row
        with every cell passed through :meth:`_to_button`.
        """
        if isinstance(source, cls):
            return source.clone()
        return cls([[cls._to_button(cell) for cell in row] for row in source])

    @staticmethod
    def _to_button(cell: Any) -> Any:
        return cell
