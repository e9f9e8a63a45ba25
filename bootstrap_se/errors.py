"""
Error types raised by the numeric core

All errors derive from ValueError so callers that already catch ValueError
keep working.
"""


class BootstrapSEError(ValueError):
    """Base class for input validation errors of the core"""


class InvalidParameterError(BootstrapSEError):
    """Non-positive size or count, negative standard deviation"""


class EmptyInputError(BootstrapSEError):
    """Operation on a zero-length sequence"""


class InsufficientDataError(BootstrapSEError):
    """Fewer than 2 observations where a variance is required"""
