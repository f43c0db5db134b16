"""Exceptions raised by the taxonomy core."""


class IndexConsistencyError(LookupError):
    """
    An id is missing from an index lookup that must contain it.

    Raised when a caller passes ids that do not belong to the given index, or when an
    index was built from a taxonomy that skipped validation (orphans, cycles).
    """
