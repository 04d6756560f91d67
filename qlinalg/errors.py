# qlinalg/errors.py


class LinAlgError(Exception):
    """Base class for precondition failures raised by qlinalg."""


class InvalidArgumentError(LinAlgError, ValueError):
    """Bad construction or mismatched shapes/dimensions between operands."""


class IndexOutOfRangeError(LinAlgError, IndexError):
    """Indexed access outside the valid bounds."""


class InvalidOperationError(LinAlgError, ArithmeticError):
    """Operation not defined for this value (trace of a non-square matrix, ...)."""
