class MapParseError(ValueError):
    """Raised when cave map text cannot be compiled."""
