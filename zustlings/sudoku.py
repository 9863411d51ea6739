"""Sudoku boards and a check that a full solution completes a puzzle."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

GRID_SIZE = 9
SUBGRID_SIZE = 3

SOLVED_EXAMPLE = (
    (5, 3, 4, 6, 7, 8, 9, 1, 2),
    (6, 7, 2, 1, 9, 5, 3, 4, 8),
    (1, 9, 8, 3, 4, 2, 5, 6, 7),
    (8, 5, 9, 7, 6, 1, 4, 2, 3),
    (4, 2, 6, 8, 5, 3, 7, 9, 1),
    (7, 1, 3, 9, 2, 4, 8, 5, 6),
    (9, 6, 1, 5, 3, 7, 2, 8, 4),
    (2, 8, 7, 4, 1, 9, 6, 3, 5),
    (3, 4, 5, 2, 8, 6, 1, 7, 9),
)

PARTIAL_EXAMPLE = (
    (5, 3, 4, 0, 7, 0, 9, 0, 2),
    (0, 0, 2, 1, 0, 5, 0, 4, 8),
    (1, 9, 8, 3, 4, 2, 5, 6, 0),
    (8, 5, 0, 7, 0, 1, 0, 2, 3),
    (4, 2, 6, 8, 5, 3, 7, 9, 1),
    (7, 1, 3, 9, 0, 4, 8, 0, 6),
    (0, 0, 1, 5, 3, 7, 2, 8, 0),
    (2, 8, 0, 4, 0, 9, 6, 3, 5),
    (3, 4, 5, 2, 8, 6, 1, 7, 0),
)


def _check_value(value: int) -> int:
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"cell values must be non-negative integers, got {value!r}")
    return value


class Sudoku:
    """A 9x9 grid; zero marks an empty cell."""

    def __init__(self, grid: Iterable[Iterable[int]]) -> None:
        rows = [[_check_value(v) for v in row] for row in grid]
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError(f"a sudoku grid must be {GRID_SIZE}x{GRID_SIZE}")
        self._grid = rows

    @classmethod
    def filled(cls) -> "Sudoku":
        """A grid with every cell set to one."""
        return cls([[1] * GRID_SIZE for _ in range(GRID_SIZE)])

    @property
    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._grid]

    def get(self, row: int, col: int) -> int:
        return self._grid[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        self._grid[row][col] = _check_value(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sudoku):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"Sudoku({self._grid!r})"

    def is_valid(self) -> bool:
        """Whether every row, column and 3x3 box holds 1 to 9 exactly once.

        Raises ValueError if a cell holds a value outside 1 to 9.
        """
        return all(self._unit_ok(unit) for unit in self._units())

    def is_subset(self, sub_sudoku: "Sudoku") -> bool:
        """Whether every filled cell of ``sub_sudoku`` agrees with this grid."""
        return all(
            sub == mine
            for sub_row, my_row in zip(sub_sudoku._grid, self._grid)
            for sub, mine in zip(sub_row, my_row)
            if sub != 0
        )

    def _units(self):
        yield from self._grid
        yield from ([row[c] for row in self._grid] for c in range(GRID_SIZE))
        for top in range(0, GRID_SIZE, SUBGRID_SIZE):
            for left in range(0, GRID_SIZE, SUBGRID_SIZE):
                yield [
                    self._grid[r][c]
                    for r in range(top, top + SUBGRID_SIZE)
                    for c in range(left, left + SUBGRID_SIZE)
                ]

    @staticmethod
    def _unit_ok(values: Sequence[int]) -> bool:
        seen: set[int] = set()
        for value in values:
            if not 1 <= value <= GRID_SIZE:
                raise ValueError(f"cell value {value} is outside 1..{GRID_SIZE}")
            if value in seen:
                return False
            seen.add(value)
        return True


def check_solution(solved: Sudoku, partial: Sudoku) -> None:
    """Raise ValueError unless ``solved`` is valid and completes ``partial``."""
    if not solved.is_valid():
        raise ValueError("Not solved correctly")
    if not solved.is_subset(partial):
        raise ValueError("Not part of the subset")


def main(argv: Sequence[str] | None = None) -> int:
    """Check the built-in example solution against its puzzle."""
    solved = Sudoku(SOLVED_EXAMPLE)
    partial = Sudoku(PARTIAL_EXAMPLE)
    try:
        check_solution(solved, partial)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(
        "I know the sudoku combination that solves "
        f"{[list(row) for row in PARTIAL_EXAMPLE]}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())