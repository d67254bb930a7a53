class InvalidStructureError(ValueError):
    """Raised when an archive holds no usable 'raw/' client/server fragment pairs."""
