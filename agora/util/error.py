"""Errors raised by the util layer (scheduling, DI wiring)."""


class UtilError(Exception):
    pass


class SchedulingError(UtilError):
    """A deferred vote sync could not be scheduled."""


class DependencyInjectionError(UtilError):
    """No provider matches the requested component or mock flag."""
