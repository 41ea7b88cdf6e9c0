"""Errors and warnings raised while loading authority configuration."""


class AuthorityConfigError(Exception):
    """An authority configuration document could not be loaded."""


class AuthorityConfigNotFoundError(AuthorityConfigError, FileNotFoundError):
    """No configuration document exists for the requested authority."""


class ConfigurationWarning(UserWarning):
    """A configuration field was malformed and has been treated as absent."""
