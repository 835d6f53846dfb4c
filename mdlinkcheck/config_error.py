"""Exception raised for unusable configuration."""


class ConfigError(ValueError):
    """The configuration file is unreadable, malformed or has invalid values."""
