"""
Exceptions raised by the quick search.

An ambiguous query is not an error: it resolves deterministically, see
``resolver.find_exact``. There is no malformed query either, every string is
matched as literal text.
"""


class SearchError(Exception):
    """Base class for quick search failures."""
    pass


class SearchNotFoundError(SearchError):
    """
    Raised when an exact search matches no name or display name anywhere in
    the reachable tree.

    The message never contains the query.
    """

    def __init__(self, message: str = "No item matches the search query"):
        super().__init__(message)
