class InvalidInput(ValueError):
    """Coordinate sequences (or max_depth) cannot be turned into an index."""


class InvalidArgument(ValueError):
    """A query argument is out of range, e.g. k <= 0."""
