"""Exceptions raised by command lookup backends."""


class AdvisorError(Exception):
    """Base class for command advisor errors."""


class FinderError(AdvisorError):
    """
    Lookup backend failure.

    Raised by a finder when it cannot answer a query, for example because
    the index is unreadable or the remote service returned an error.
    """


class FinderNotImplementedError(FinderError):
    """Raised by finders that have no backing index at all."""
