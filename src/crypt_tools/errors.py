class InvalidArgument(ValueError):
    """Raised when a key, stride or character argument cannot be used."""
