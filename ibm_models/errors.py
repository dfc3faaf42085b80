class AlignmentError(Exception):
    """Base class for every error raised by ibm_models."""


class WarmStartUnavailable(AlignmentError, RuntimeError):
    """The persisted lexical table needed to warm-start Model 2 could not be loaded."""


class NumericDegeneracy(AlignmentError, ArithmeticError):
    """A probability or count table was handed a negative or NaN value."""
