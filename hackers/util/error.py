"""Errors raised while wiring the application."""


class UtilError(Exception):
    """Base error for the util layer."""


class DependencyInjectionError(UtilError):
    """A provider could not be resolved for a component."""
