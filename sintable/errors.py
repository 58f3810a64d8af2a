class SinTableError(Exception):
    """Base class for every error that ends a generation run."""


class ResourceLimitError(SinTableError):
    """The requested table would not fit in any reasonable block RAM."""


class PreconditionError(SinTableError):
    """The configuration cannot describe a valid lookup module."""
