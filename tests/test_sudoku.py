import pytest

from zustlings.sudoku import (
    PARTIAL_EXAMPLE,
    SOLVED_EXAMPLE,
    Sudoku,
    check_solution,
    main,
)


def test_example_solution_is_valid():
    assert Sudoku(SOLVED_EXAMPLE).is_valid() is True


def test_example_partial_is_subset():
    assert Sudoku(SOLVED_EXAMPLE).is_subset(Sudoku(PARTIAL_EXAMPLE)) is True


def test_filled_grid_is_invalid():
    board = Sudoku.filled()
    assert board.get(4, 4) == 1
    assert board.is_valid() is False


def test_set_then_get():
    board = Sudoku(PARTIAL_EXAMPLE)
    board.set(0, 3, 6)
    assert board.get(0, 3) == 6


def test_changed_cell_breaks_subset():
    partial = Sudoku(PARTIAL_EXAMPLE)
    partial.set(0, 0, 3)
    assert Sudoku(SOLVED_EXAMPLE).is_subset(partial) is False


def test_swapped_cells_break_validity():
    board = Sudoku(SOLVED_EXAMPLE)
    first, second = board.get(0, 0), board.get(0, 1)
    board.set(0, 0, second)
    board.set(0, 1, first)
    assert board.is_valid() is False


def test_empty_grid_is_subset_of_anything():
    empty = Sudoku([[0] * 9 for _ in range(9)])
    assert Sudoku.filled().is_subset(empty) is True


def test_zero_cell_makes_validity_check_fail():
    board = Sudoku(SOLVED_EXAMPLE)
    board.set(3, 3, 0)
    with pytest.raises(ValueError):
        board.is_valid()


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Sudoku([[1] * 9 for _ in range(8)])


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        Sudoku.filled().set(0, 0, -1)


def test_check_solution_rejects_invalid():
    with pytest.raises(ValueError, match="Not solved correctly"):
        check_solution(Sudoku.filled(), Sudoku(PARTIAL_EXAMPLE))


def test_check_solution_rejects_non_subset():
    partial = Sudoku(PARTIAL_EXAMPLE)
    partial.set(0, 0, 3)
    with pytest.raises(ValueError, match="Not part of the subset"):
        check_solution(Sudoku(SOLVED_EXAMPLE), partial)


def test_check_solution_accepts_example():
    solved = Sudoku(SOLVED_EXAMPLE)
    check_solution(solved, Sudoku(PARTIAL_EXAMPLE))
    assert solved == Sudoku(SOLVED_EXAMPLE)


def test_main_prints_claim(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("I know the sudoku combination that solves [[5, 3, 4, 0")