"""Exceptions for the code collection plugin."""


class GroupStructureError(ValueError):
    """Raised when structural group tokens are not in the order the
    rewriter produces them.
    """
