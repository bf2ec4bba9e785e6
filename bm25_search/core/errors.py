class ConfigurationError(ValueError):
    """Raised when an index or one of its collaborators cannot be configured."""
