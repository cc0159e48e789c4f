"""Exceptions raised by the routing core."""


class MalformedInputError(ValueError):
    """The station catalog or graph violates a structural precondition.

    Raised for edges pointing at unknown stations, station IDs colliding
    with the reserved virtual IDs, and graphs lacking adjacency entries
    for the virtual origin/destination.
    """


class NumericAnomalyError(RuntimeError):
    """An effective edge cost came out negative or NaN."""
