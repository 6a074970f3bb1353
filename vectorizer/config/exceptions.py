class ConfigurationError(Exception):
    """Raised when required configuration is missing before a run starts."""
