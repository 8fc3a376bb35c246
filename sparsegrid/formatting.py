from .core.formatting import format_matrix, format_value  # noqa: F401
