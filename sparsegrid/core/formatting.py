from functools import singledispatch

from .. import config

TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
SIDE = "│"


@singledispatch
def format_value(val):
    """Text of a single cell before padding.

    Register an implementation for a custom scalar type to change how it renders.
    """
    return str(val)


@format_value.register
def _(val: str):
    escaped = val.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_matrix(matrix, *, cell_width=None):
    """Render ``matrix`` as an aligned, boxed grid.

    Every cell is right-aligned to ``cell_width`` characters (``formatting.cell_width``
    from the config by default).  A column grows when one of its values is wider.

    Examples
    --------
    >>> print(format_matrix(Matrix.from_dense([[1, 2], [3, 4]])), end="")
    #Matrix<(2×2)
    ┌                 ┐
    │       1,       2│
    │       3,       4│
    └                 ┘
    >

    """
    if cell_width is None:
        cell_width = config.get("formatting.cell_width")
    nrows, ncols = matrix.shape
    cells = [[format_value(val) for val in row] for row in matrix.to_list()]
    widths = [cell_width] * ncols
    for row in cells:
        for j, text in enumerate(row):
            if len(text) > widths[j]:
                widths[j] = len(text)
    interior = sum(widths) + max(ncols - 1, 0)
    lines = [f"#Matrix<({nrows}×{ncols})"]
    lines.append(f"{TOP_LEFT}{' ' * interior}{TOP_RIGHT}")
    for row in cells:
        body = ",".join(text.rjust(width) for text, width in zip(row, widths, strict=True))
        lines.append(f"{SIDE}{body}{SIDE}")
    lines.append(f"{BOTTOM_LEFT}{' ' * interior}{BOTTOM_RIGHT}")
    lines.append(">")
    return "\n".join(lines) + "\n"
