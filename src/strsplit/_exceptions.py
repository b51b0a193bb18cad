class StrSplitError(Exception):
    """Base class for exceptions related to strsplit."""


class DelimiterError(StrSplitError, ValueError):
    """Raised when a delimiter is invalid or reports an unusable match."""


class DelimiterTypeError(StrSplitError, TypeError):
    """Raised when an object that is not a delimiter is used as one."""
