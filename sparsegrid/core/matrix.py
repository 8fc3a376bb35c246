import itertools
from collections.abc import Sequence

import numpy as np

from ..exceptions import (
    BUILD_MISMATCH,
    POWER_NON_SQUARE,
    PRODUCT_MISMATCH,
    TRACE_NON_SQUARE,
    DimensionMismatch,
    IndexOutOfBound,
    InvalidValue,
)
from .base import BaseType, _expect_type, call
from .store import SparseStore
from .utils import get_order, maybe_integral, normalize_index


# Custom recipes
def _check_square(A, message, **extra):
    if not A.is_square:
        raise DimensionMismatch(message, height=A._nrows, width=A._ncols, **extra)


def _check_dimensions(nrows, ncols):
    if (nr := maybe_integral(nrows)) is None or (nc := maybe_integral(ncols)) is None:
        raise TypeError(f"nrows and ncols must be integers; got {nrows!r} and {ncols!r}")
    if nr < 0 or nc < 0:
        raise InvalidValue(f"nrows and ncols must be nonnegative; got {nr} and {nc}")
    return nr, nc


def _check_bounds(store, nrows, ncols):
    for row, col in store:
        if not (0 <= row < nrows and 0 <= col < ncols):
            raise IndexOutOfBound(
                f"Index ({row}, {col}) is outside of Matrix with shape {(nrows, ncols)}"
            )


def _new(nrows, ncols, default, *, name=None):
    nrows, ncols = _check_dimensions(nrows, ncols)
    return Matrix._from_store(SparseStore(default=default), nrows, ncols, name=name)


def _from_dense(values, nrows, ncols, default, *, name=None):
    nrows, ncols = _check_dimensions(nrows, ncols)
    entries = {}
    if len(values) != nrows:
        raise DimensionMismatch(
            BUILD_MISMATCH, height=nrows, width=ncols, row="-", length=len(values)
        )
    for i, row in enumerate(values):
        if len(row) != ncols:
            raise DimensionMismatch(
                BUILD_MISMATCH, height=nrows, width=ncols, row=i, length=len(row)
            )
        for j, val in enumerate(row):
            entries[i, j] = val
    return Matrix._from_store(SparseStore(entries, default), nrows, ncols, name=name)


def _from_coo(rows, columns, values, nrows, ncols, default, *, name=None):
    rows = list(rows)
    columns = list(columns)
    if isinstance(values, np.ndarray):
        values = values.tolist()
    if not isinstance(values, Sequence) or isinstance(values, str):
        values = list(itertools.repeat(values, len(rows)))
    if not len(rows) == len(columns) == len(values):
        raise InvalidValue(
            "rows, columns, and values must have the same length; "
            f"got {len(rows)}, {len(columns)}, and {len(values)}"
        )
    entries = {}
    for row, col, val in zip(rows, columns, values, strict=True):
        key = (int(row), int(col))
        if key in entries:
            raise InvalidValue(f"Duplicate index found: {key}")
        entries[key] = val
    if nrows is None:
        if not entries:
            raise ValueError("No row indices provided. Unable to infer nrows.")
        nrows = max(row for row, _ in entries) + 1
    if ncols is None:
        if not entries:
            raise ValueError("No column indices provided. Unable to infer ncols.")
        ncols = max(col for _, col in entries) + 1
    nrows, ncols = _check_dimensions(nrows, ncols)
    store = SparseStore(entries, default)
    _check_bounds(store, nrows, ncols)
    return Matrix._from_store(store, nrows, ncols, name=name)


def _from_store(store, nrows, ncols, *, name=None):
    nrows, ncols = _check_dimensions(nrows, ncols)
    _check_bounds(store, nrows, ncols)
    return Matrix._from_store(store, nrows, ncols, name=name)


def _from_scalar(value, nrows, ncols, *, name=None):
    return _new(nrows, ncols, value, name=name)


def _from_diagonal(values, *, name=None):
    n = len(values)
    store = SparseStore({(i, i): val for i, val in enumerate(values)}, 0)
    return Matrix._from_store(store, n, n, name=name)


def _identity(n, *, name=None):
    return _from_diagonal([1] * n, name=name)


def _remap(A, func, nrows, ncols):
    return Matrix._from_store(A._store.remap(func), nrows, ncols)


def _transpose(A):
    return _remap(A, lambda i, j: (j, i), A._ncols, A._nrows)


def _flip_vertical(A):
    last = A._nrows - 1
    return _remap(A, lambda i, j: (last - i, j), A._nrows, A._ncols)


def _flip_horizontal(A):
    last = A._ncols - 1
    return _remap(A, lambda i, j: (i, last - j), A._nrows, A._ncols)


def _rotate_clockwise(A):
    last = A._nrows - 1
    return _remap(A, lambda i, j: (j, last - i), A._ncols, A._nrows)


def _rotate_counterclockwise(A):
    last = A._ncols - 1
    return _remap(A, lambda i, j: (last - j, i), A._ncols, A._nrows)


def _apply(A, func):
    return Matrix._from_store(A._store.apply(func), A._nrows, A._ncols)


def _add(A, scalar):
    return _apply(A, lambda val: val + scalar)


def _sub(A, scalar):
    return _apply(A, lambda val: val - scalar)


def _mult(A, scalar):
    return _apply(A, lambda val: val * scalar)


def _div(A, scalar):
    return _apply(A, lambda val: val / scalar)


def _trace(A):
    _check_square(A, TRACE_NON_SQUARE)
    return sum(A._store.get(i, i) for i in range(A._nrows))


def _power(A, n):
    _check_square(A, POWER_NON_SQUARE, exponent=n)
    if (N := maybe_integral(n)) is None:
        raise TypeError(f"n must be a nonnegative integer; got bad type: {type(n)}")
    if N < 0:
        raise ValueError(f"n must be a nonnegative integer; got: {N}")
    # A^k == A @ A^(k-1), evaluated exactly in that order so that
    # floating point results agree with the recursive definition.
    result = _identity(A._nrows)
    for _ in range(N):
        result = _product(A, result)
    return result


def _product(A, B):
    if A._ncols != B._nrows:
        raise DimensionMismatch(
            PRODUCT_MISMATCH,
            height_a=A._nrows,
            width_a=A._ncols,
            height_b=B._nrows,
            width_b=B._ncols,
        )
    a_store = A._store
    b_store = B._store
    if a_store.default == 0 and b_store.default == 0:
        return _sparse_product(A, B)
    # Every term may be non-zero; sum all of them
    entries = {}
    for i in range(A._nrows):
        for j in range(B._ncols):
            val = 0
            for k in range(A._ncols):
                val = val + a_store.get(i, k) * b_store.get(k, j)
            entries[i, j] = val
    return Matrix._from_store(SparseStore(entries, 0), A._nrows, B._ncols)


def _sparse_product(A, B):
    # Terms with an implicit zero factor vanish, so only stored pairs are multiplied.
    # Iterating ``k`` in increasing order keeps the summation order of the dense path.
    a_rows = {}
    for i, k, val in A._store.entries():
        a_rows.setdefault(i, []).append((k, val))
    b_rows = {}
    for k, j, val in B._store.entries():
        b_rows.setdefault(k, []).append((j, val))
    entries = {}
    for i, row in a_rows.items():
        acc = {}
        for k, a_val in row:
            for j, b_val in b_rows.get(k, ()):
                acc[j] = acc.get(j, 0) + a_val * b_val
        for j, val in acc.items():
            entries[i, j] = val
    return Matrix._from_store(SparseStore(entries, 0), A._nrows, B._ncols)


class Matrix(BaseType):
    """Create a new sparse Matrix.

    Parameters
    ----------
    nrows : int
        Number of rows.
    ncols : int
        Number of columns.
    default :
        Value of every cell that is not explicitly stored.
    name : str, optional
        Name to give the Matrix.  This is used by :class:`~sparsegrid.Recorder`.

    """

    __slots__ = "_nrows", "_ncols", "_store"
    _name_counter = itertools.count()

    def __new__(cls, nrows=0, ncols=0, *, default=0, name=None):
        return call("new", _new, [nrows, ncols, default], name=name)

    @classmethod
    def _from_store(cls, store, nrows, ncols, *, name=None):
        self = object.__new__(cls)
        self.name = f"M_{next(Matrix._name_counter)}" if name is None else name
        self._store = store
        self._nrows = nrows
        self._ncols = ncols
        return self

    def __repr__(self):
        from .formatting import format_matrix

        return format_matrix(self)

    __str__ = __repr__

    def __reduce__(self):
        pieces = (list(self._store.entries()), self._store.default, self._nrows, self._ncols)
        return self._deserialize, (pieces, self.name)

    @staticmethod
    def _deserialize(pieces, name):
        entries, default, nrows, ncols = pieces
        store = SparseStore({(row, col): val for row, col, val in entries}, default)
        return Matrix._from_store(store, nrows, ncols, name=name)

    @property
    def nrows(self):
        """Number of rows in the Matrix."""
        return self._nrows

    @property
    def ncols(self):
        """Number of columns in the Matrix."""
        return self._ncols

    @property
    def shape(self):
        """A tuple of ``(nrows, ncols)``."""
        return (self._nrows, self._ncols)

    @property
    def nvals(self):
        """Number of explicitly stored values in the Matrix."""
        return len(self._store)

    @property
    def default(self):
        """Value of every cell that is not explicitly stored."""
        return self._store.default

    @property
    def is_square(self):
        return self._nrows == self._ncols

    @property
    def T(self):
        """The transpose of the Matrix; same as :meth:`transpose`."""
        return self.transpose()

    def __getitem__(self, keys):
        """Get the element at a ``(row, col)`` index.

        Examples
        --------
        .. code-block:: python

            val = M[1, 2]

        """
        if type(keys) is not tuple or len(keys) != 2:
            raise TypeError(
                f"Invalid index to Matrix: {keys!r}.  A 2-tuple of ints is expected."
            )
        return self.get(*keys)

    def __contains__(self, index):
        """Indicates whether the (row, col) index has a value stored.

        Examples
        --------
        .. code-block:: python

            (10, 15) in M

        """
        if type(index) is not tuple or len(index) != 2:
            raise TypeError(
                f"Invalid index to Matrix contains: {index!r}.  A 2-tuple of ints is expected.  "
                "Doing `(i, j) in my_matrix` checks whether a value is stored at that index."
            )
        row, col = index
        row = normalize_index(row, self._nrows, name="row")
        col = normalize_index(col, self._ncols, name="column")
        return (row, col) in self._store

    def __iter__(self):
        """Iterate over (row, col) indices which are stored in the matrix."""
        return iter(self._store)

    def get(self, row, col):
        """Get the element at (``row``, ``col``) indices.

        Cells that are not stored return :attr:`default`.  Negative indices
        count from the end.

        Raises
        ------
        IndexOutOfBound
            If the index lies outside the dimensions of the Matrix.

        """
        row = normalize_index(row, self._nrows, name="row")
        col = normalize_index(col, self._ncols, name="column")
        return self._store.get(row, col)

    def row(self, index):
        """Dense list of the values in row ``index``."""
        i = normalize_index(index, self._nrows, name="row")
        get = self._store.get
        return [get(i, j) for j in range(self._ncols)]

    def column(self, index):
        """Dense list of the values in column ``index``."""
        j = normalize_index(index, self._ncols, name="column")
        get = self._store.get
        return [get(i, j) for i in range(self._nrows)]

    def diagonal(self):
        """Dense list of the values on the main diagonal."""
        get = self._store.get
        return [get(i, i) for i in range(min(self._nrows, self._ncols))]

    def to_list(self):
        """Dense row-major list of lists of every value, defaults included."""
        get = self._store.get
        return [[get(i, j) for j in range(self._ncols)] for i in range(self._nrows)]

    def to_coo(self):
        """Extract the stored indices and values as a 3-tuple of lists.

        Values are sorted row-major.

        Returns
        -------
        list
            Rows
        list
            Columns
        list
            Values

        """
        rows = []
        cols = []
        vals = []
        for row, col, val in self._store.entries():
            rows.append(row)
            cols.append(col)
            vals.append(val)
        return rows, cols, vals

    def to_dicts(self, order="rowwise"):
        """Return Matrix as doubly-nested dicts of stored values.

        Parameters
        ----------
        order : str, default="rowwise"
            "rowwise" returns dict of dicts as ``{row: {col: val}}``.
            "columnwise" returns dict of dicts as ``{col: {row: val}}``.
            The default is "rowwise".

        Returns
        -------
        dict

        """
        order = get_order(order)
        rv = {}
        for row, col, val in self._store.entries():
            if order == "rowwise":
                rv.setdefault(row, {})[col] = val
            else:
                rv.setdefault(col, {})[row] = val
        return rv

    def to_dense(self, dtype=None):
        """Convert Matrix to NumPy array of the same shape, defaults included.

        .. warning::
            This can create very large arrays that require a lot of memory; please use caution.

        Parameters
        ----------
        dtype : numpy dtype, optional
            Requested dtype for the output values array.

        Returns
        -------
        np.ndarray

        """
        if self._nrows == 0 or self._ncols == 0:
            return np.empty((self._nrows, self._ncols), dtype=dtype)
        return np.array(self.to_list(), dtype=dtype)

    def dup(self, *, name=None):
        """Create a duplicate of the Matrix.

        Stores are never mutated, so the duplicate shares the values of the original.
        """
        return Matrix._from_store(self._store, self._nrows, self._ncols, name=name)

    def isequal(self, other):
        """Check for equality of every observable value (same size, same values).

        Whether a cell is stored or implied by the default does not matter.

        Parameters
        ----------
        other : Matrix
            The matrix to compare against

        Returns
        -------
        bool

        """
        other = self._expect_type(other, Matrix, within="isequal", argname="other")
        if self._nrows != other._nrows:
            return False
        if self._ncols != other._ncols:
            return False
        return self._store.isequal(other._store, self.shape)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.isequal(other)

    __hash__ = None

    @classmethod
    def from_dense(cls, values, nrows=None, ncols=None, default=0, *, name=None):
        """Create a Matrix from a list of lists or a 2d NumPy array.

        Parameters
        ----------
        values : list or np.ndarray
            Row-major values.
        nrows : int, optional
            Number of rows; taken from ``values`` if not provided.
        ncols : int, optional
            Number of columns; taken from the first row if not provided.
        default :
            Value of every cell that is not stored; values equal to it are dropped.
        name : str, optional
            Name to give the Matrix.

        Raises
        ------
        DimensionMismatch
            If the shape of ``values`` does not match ``nrows`` and ``ncols``.

        See Also
        --------
        from_coo
        to_list
        to_dense

        Returns
        -------
        Matrix

        """
        if isinstance(values, np.ndarray):
            if values.ndim != 2:
                raise ValueError(f"values array must be 2d to create a Matrix; got {values.ndim}d")
            values = values.tolist()
        if nrows is None:
            nrows = len(values)
        if ncols is None:
            ncols = len(values[0]) if len(values) > 0 else 0
        return call("from_dense", _from_dense, [values, nrows, ncols, default], name=name)

    @classmethod
    def from_coo(cls, rows, columns, values, nrows=None, ncols=None, *, default=0, name=None):
        """Create a new Matrix from row and column indices and values.

        Parameters
        ----------
        rows : list or np.ndarray
            Row indices.
        columns : list or np.ndarray
            Column indices.
        values : list or np.ndarray or scalar
            List of values.  If a scalar is provided, all values will be set to this single value.
        nrows : int, optional
            Number of rows in the Matrix. If not provided, ``nrows`` is computed
            from the maximum row index found in ``rows``.
        ncols : int, optional
            Number of columns in the Matrix. If not provided, ``ncols`` is computed
            from the maximum column index found in ``columns``.
        default :
            Value of every cell that is not given.
        name : str, optional
            Name to give the Matrix.

        See Also
        --------
        from_dense
        to_coo

        Returns
        -------
        Matrix

        """
        return call(
            "from_coo",
            _from_coo,
            [rows, columns, values, nrows, ncols, default],
            name=name,
        )

    @classmethod
    def from_store(cls, store, nrows, ncols, *, name=None):
        """Create a Matrix of the given shape backed by ``store``.

        Raises
        ------
        IndexOutOfBound
            If ``store`` holds a value outside of ``nrows`` x ``ncols``.

        """
        store = _expect_type(cls, store, SparseStore, within="from_store", argname="store")
        return call("from_store", _from_store, [store, nrows, ncols], name=name)

    @classmethod
    def from_scalar(cls, value, nrows, ncols, *, name=None):
        """Create a Matrix whose every cell equals ``value``.

        Nothing is stored; ``value`` becomes the default.
        """
        return call("from_scalar", _from_scalar, [value, nrows, ncols], name=name)

    @classmethod
    def identity_matrix(cls, n, *, name=None):
        """Create an ``n`` x ``n`` Matrix with 1 on the main diagonal and 0 elsewhere."""
        if (N := maybe_integral(n)) is None:
            raise TypeError(f"n must be a nonnegative integer; got bad type: {type(n)}")
        if N < 0:
            raise InvalidValue(f"n must be a nonnegative integer; got: {N}")
        return call("identity_matrix", _identity, [N], name=name)

    @classmethod
    def from_diagonal(cls, values, *, name=None):
        """Create a square Matrix with ``values`` on the main diagonal and 0 elsewhere."""
        return call("from_diagonal", _from_diagonal, [list(values)], name=name)

    def transpose(self):
        """Swap rows and columns: ``A.transpose()[i, j] == A[j, i]``."""
        return call("transpose", _transpose, [self])

    def flip_vertical(self):
        """Reverse the order of the rows."""
        return call("flip_vertical", _flip_vertical, [self])

    def flip_horizontal(self):
        """Reverse the order of the columns."""
        return call("flip_horizontal", _flip_horizontal, [self])

    def rotate_clockwise(self):
        """Rotate a quarter turn clockwise; the first column becomes the first row reversed."""
        return call("rotate_clockwise", _rotate_clockwise, [self])

    def rotate_counterclockwise(self):
        """Rotate a quarter turn counterclockwise."""
        return call("rotate_counterclockwise", _rotate_counterclockwise, [self])

    def apply(self, func):
        """Apply ``func`` to every cell, defaults included.

        Parameters
        ----------
        func : callable
            Function of one value.

        Returns
        -------
        Matrix

        """
        if not callable(func):
            raise TypeError(f"func must be callable; got bad type: {type(func)}")
        return call("apply", _apply, [self, func])

    def add(self, scalar):
        """Add ``scalar`` to every cell (defaults included)."""
        return call("add", _add, [self, scalar])

    def sub(self, scalar):
        """Subtract ``scalar`` from every cell (defaults included)."""
        return call("sub", _sub, [self, scalar])

    def mult(self, scalar):
        """Multiply every cell (defaults included) by ``scalar``."""
        return call("mult", _mult, [self, scalar])

    def div(self, scalar):
        """Divide every cell (defaults included) by ``scalar``."""
        return call("div", _div, [self, scalar])

    def trace(self):
        """Sum of the main diagonal of a square Matrix.

        Raises
        ------
        DimensionMismatch
            If the Matrix is not square.

        """
        return call("trace", _trace, [self])

    def power(self, n):
        """Raise a square Matrix to the (nonnegative integer) power ``n``.

        ``A.power(0)`` is the identity matrix, and ``A.power(k)`` is
        ``A.product(A.power(k - 1))``.

        Parameters
        ----------
        n : int
            The exponent must be a nonnegative integer.

        Raises
        ------
        DimensionMismatch
            If the Matrix is not square.

        Returns
        -------
        Matrix

        """
        return call("power", _power, [self, n])

    def product(self, other):
        """Matrix-matrix multiplication.

        ``C[i, j]`` is the sum over ``k`` of ``A[i, k] * B[k, j]``.

        Parameters
        ----------
        other : Matrix
            The right-hand matrix; its height must equal the width of this Matrix.

        Raises
        ------
        DimensionMismatch
            If ``self.ncols != other.nrows``.

        Returns
        -------
        Matrix

        """
        other = self._expect_type(other, Matrix, within="product", argname="other")
        return call("product", _product, [self, other])

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.product(other)

    def __pow__(self, n):
        return self.power(n)

    def __add__(self, other):
        if isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return NotImplemented
        return self.mult(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Matrix):
            return NotImplemented
        return self.div(other)
