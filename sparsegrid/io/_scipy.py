import numpy as np

from ..core.matrix import Matrix


def from_scipy_sparse(A, *, name=None):
    """Create a Matrix from a scipy.sparse array or matrix.

    Implicit zeros of ``A`` become the default (0) of the Matrix.  Duplicate
    entries in "coo" format are summed, as scipy does.

    Parameters
    ----------
    A : scipy.sparse
        Scipy sparse array or matrix
    name : str, optional
        Name of resulting Matrix

    Returns
    -------
    :class:`~sparsegrid.Matrix`

    """
    nrows, ncols = A.shape
    A = A.tocoo(copy=True)
    A.sum_duplicates()
    return Matrix.from_coo(
        A.row.tolist(), A.col.tolist(), A.data.tolist(), nrows=nrows, ncols=ncols, name=name
    )


def to_scipy_sparse(A, format="csr"):
    """Create a scipy.sparse array from a Matrix.

    scipy.sparse can only leave zeros implicit, so a Matrix whose default is not 0
    is converted with every value stored.

    Parameters
    ----------
    A : Matrix
        Matrix to be converted
    format : str
        {'bsr', 'csr', 'csc', 'coo', 'lil', 'dia', 'dok'}

    Returns
    -------
    scipy.sparse array

    """
    import scipy.sparse as ss

    format = format.lower()
    if format not in {"bsr", "csr", "csc", "coo", "lil", "dia", "dok"}:
        raise ValueError(f"Invalid format: {format}")
    if A.default != 0:
        rv = ss.coo_array(A.to_dense())
    else:
        rows, cols, data = A.to_coo()
        rows = np.array(rows, dtype=np.int64)
        cols = np.array(cols, dtype=np.int64)
        rv = ss.coo_array((data, (rows, cols)), shape=A.shape)
    if format == "coo":
        return rv
    return rv.asformat(format)
