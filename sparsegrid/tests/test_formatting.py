import pytest

import sparsegrid as sg
from sparsegrid import Matrix, formatting
from sparsegrid.formatting import format_matrix, format_value

from .conftest import sequential


def test_inspect():
    matrix = Matrix.from_dense([[1, 2], [3, 4]], 2, 2)
    assert repr(matrix) == (
        "#Matrix<(2×2)\n"
        "┌                 ┐\n"
        "│       1,       2│\n"
        "│       3,       4│\n"
        "└                 ┘\n"
        ">\n"
    )
    assert str(matrix) == repr(matrix)
    assert format_matrix(matrix) == repr(matrix)


def test_identity_matrix():
    assert repr(Matrix.identity_matrix(3)) == (
        "#Matrix<(3×3)\n"
        "┌                          ┐\n"
        "│       1,       0,       0│\n"
        "│       0,       1,       0│\n"
        "│       0,       0,       1│\n"
        "└                          ┘\n"
        ">\n"
    )


def test_product():
    m1 = Matrix.from_dense([[2, 3, 4], [1, 0, 0]], 2, 3)
    m2 = Matrix.from_dense([[0, 1000], [1, 100], [0, 10]], 3, 2)
    assert repr(m1.product(m2)) == (
        "#Matrix<(2×2)\n"
        "┌                 ┐\n"
        "│       3,    2340│\n"
        "│       0,    1000│\n"
        "└                 ┘\n"
        ">\n"
    )


def test_chess():
    board_as_list = [
        ["♜", "♞", "♝", "♛", "♚", "♝", "♞", "♜"],
        ["♟", "♟", "♟", "♟", "♟", "♟", "♟", "♟"],
        [" ", " ", " ", " ", " ", " ", " ", " "],
        [" ", " ", " ", " ", " ", " ", " ", " "],
        [" ", " ", " ", " ", " ", " ", " ", " "],
        [" ", " ", " ", " ", " ", " ", " ", " "],
        ["♙", "♙", "♙", "♙", "♙", "♙", "♙", "♙"],
        ["♖", "♘", "♗", "♕", "♔", "♗", "♘", "♖"],
    ]
    matrix = Matrix.from_dense(board_as_list, 8, 8)
    assert repr(matrix) == (
        "#Matrix<(8×8)\n"
        "┌                                                                       ┐\n"
        '│     "♜",     "♞",     "♝",     "♛",     "♚",     "♝",     "♞",     "♜"│\n'
        '│     "♟",     "♟",     "♟",     "♟",     "♟",     "♟",     "♟",     "♟"│\n'
        '│     " ",     " ",     " ",     " ",     " ",     " ",     " ",     " "│\n'
        '│     " ",     " ",     " ",     " ",     " ",     " ",     " ",     " "│\n'
        '│     " ",     " ",     " ",     " ",     " ",     " ",     " ",     " "│\n'
        '│     " ",     " ",     " ",     " ",     " ",     " ",     " ",     " "│\n'
        '│     "♙",     "♙",     "♙",     "♙",     "♙",     "♙",     "♙",     "♙"│\n'
        '│     "♖",     "♘",     "♗",     "♕",     "♔",     "♗",     "♘",     "♖"│\n'
        "└                                                                       ┘\n"
        ">\n"
    )


def test_defaults_are_rendered():
    matrix = Matrix.from_dense([[3, 2], [2, 2]], 2, 2, 2)
    assert matrix.nvals == 1
    assert repr(matrix) == (
        "#Matrix<(2×2)\n"
        "┌                 ┐\n"
        "│       3,       2│\n"
        "│       2,       2│\n"
        "└                 ┘\n"
        ">\n"
    )


def test_wide_values_grow_their_column():
    matrix = Matrix.from_dense([[123456789, 1], [2, 3]])
    assert repr(matrix) == (
        "#Matrix<(2×2)\n"
        "┌                  ┐\n"
        "│123456789,       1│\n"
        "│        2,       3│\n"
        "└                  ┘\n"
        ">\n"
    )


def test_empty_shapes():
    assert repr(Matrix(0, 0)) == "#Matrix<(0×0)\n┌┐\n└┘\n>\n"
    assert repr(Matrix(2, 0)) == "#Matrix<(2×0)\n┌┐\n││\n││\n└┘\n>\n"
    assert repr(Matrix(0, 1)) == "#Matrix<(0×1)\n┌        ┐\n└        ┘\n>\n"


def test_cell_width_config():
    matrix = sequential(1, 2)
    with sg.config.set({"formatting.cell_width": 3}):
        assert repr(matrix) == "#Matrix<(1×2)\n┌       ┐\n│  1,  2│\n└       ┘\n>\n"
    assert format_matrix(matrix, cell_width=1) == "#Matrix<(1×2)\n┌   ┐\n│1,2│\n└   ┘\n>\n"


def test_format_value():
    assert format_value(5) == "5"
    assert format_value(-1.5) == "-1.5"
    assert format_value("a") == '"a"'
    assert format_value('say "hi"') == '"say \\"hi\\""'
    assert format_value(None) == "None"


def test_format_value_register():
    class Money:
        def __init__(self, cents):
            self.cents = cents

    format_value.register(Money, lambda val: f"${val.cents / 100:.2f}")

    matrix = Matrix.from_scalar(Money(150), 1, 1)
    assert repr(matrix) == "#Matrix<(1×1)\n┌        ┐\n│   $1.50│\n└        ┘\n>\n"


def test_formatting_module_is_exported():
    assert sg.formatting is formatting
    assert formatting.format_matrix is format_matrix


@pytest.mark.parametrize("shape", [(1, 1), (3, 5), (4, 2)])
def test_border_width(shape):
    nrows, ncols = shape
    lines = repr(sequential(nrows, ncols)).splitlines()
    assert len(lines) == nrows + 4
    width = 8 * ncols + (ncols - 1)
    assert lines[1] == "┌" + " " * width + "┐"
    assert lines[-2] == "└" + " " * width + "┘"
    assert all(len(line) == width + 2 for line in lines[2:-2])
