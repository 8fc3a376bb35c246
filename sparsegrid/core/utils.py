from operator import index

from ..exceptions import IndexOutOfBound


def maybe_integral(val):
    """Ensure ``val`` is an integer or return None if it's not."""
    try:
        return index(val)
    except TypeError:
        pass
    if isinstance(val, float) and val.is_integer():
        return int(val)
    return None


def normalize_index(val, size, *, name):
    """Resolve a possibly negative index against ``size``.

    Examples
    --------
    >>> normalize_index(-1, 3, name="row")
    2

    """
    try:
        i = index(val)
    except TypeError:
        raise TypeError(f"{name} index must be an integer; got bad type: {type(val)}") from None
    if i < 0:
        i += size
    if not 0 <= i < size:
        raise IndexOutOfBound(f"{name} index out of range: {val} (size is {size})")
    return i


def get_order(order):
    val = order.lower()
    if val in {"c", "row", "rows", "rowwise"}:
        return "rowwise"
    if val in {"f", "col", "cols", "column", "columns", "colwise", "columnwise"}:
        return "columnwise"
    raise ValueError(
        f"Bad value for order: {order!r}.  "
        'Expected "rowwise", "columnwise", "rows", "columns", "C", or "F"'
    )
