class SparsegridException(Exception):
    pass


class InvalidValue(SparsegridException, ValueError):
    """An argument has the right type but an unusable value (e.g. negative dimensions)."""


class IndexOutOfBound(SparsegridException, IndexError):
    """A provided index falls outside the dimensions of the Matrix."""


class DimensionMismatch(SparsegridException, ArithmeticError):
    """The input dimensions (i.e. shape) are not compatible with the operation.

    The structured payload is kept on the exception; the human-readable
    ``message`` is rendered from it by :func:`format_error_message`.

    Attributes
    ----------
    operation_message : str
        Headline describing which operation failed and why.
    fields : dict
        Offending dimensions and parameters, in display order.
    message : str
        The fully rendered multi-line report (also ``str(exc)``).

    """

    def __init__(self, operation_message, **fields):
        self.operation_message = operation_message
        self.fields = fields
        self.message = format_error_message(operation_message, fields)
        super().__init__(self.message)

    def __reduce__(self):
        return _rebuild_dimension_mismatch, (self.operation_message, self.fields)


def _rebuild_dimension_mismatch(operation_message, fields):
    return DimensionMismatch(operation_message, **fields)


def format_error_message(operation_message, fields):
    """Render a headline and its ``name: value`` fields as a multi-line report.

    >>> print(format_error_message("Oops!", {"height": 2, "width": 3}), end="")
    Oops!
    <BLANKLINE>
    height: 2
    width: 3

    """
    lines = [operation_message, ""]
    lines.extend(f"{key}: {val}" for key, val in fields.items())
    return "\n".join(lines) + "\n"


# Headlines of the dimension checks; these are user-facing and compared literally.
TRACE_NON_SQUARE = "Matrix.trace/1 is not defined for non-square matrices!"
POWER_NON_SQUARE = "Cannot compute Matrix.power with non-square matrices!"
PRODUCT_MISMATCH = (
    "Cannot compute Matrix.product if the width of matrix `a` "
    "does not match the height of matrix `b`!"
)
BUILD_MISMATCH = (
    "Cannot build Matrix from values whose shape does not match the given dimensions!"
)
