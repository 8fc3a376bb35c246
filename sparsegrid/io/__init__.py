from ._scipy import from_scipy_sparse, to_scipy_sparse
