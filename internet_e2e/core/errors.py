# core/errors.py


class E2EError(Exception):
    """Base class for errors raised by the suite."""


class NotFoundError(E2EError):
    """Action attempted on an element that is not in the DOM."""


class WaitTimeoutError(E2EError, TimeoutError):
    """A wait did not reach its condition before the timeout."""


class InteractionError(E2EError):
    """Element exists but cannot be interacted with."""


class AssertionFailure(E2EError, AssertionError):
    """A matcher saw a different state than expected."""


class SessionError(E2EError):
    """No browser session is bound."""


class ConfigurationError(E2EError):
    """Profile or capability settings cannot be used."""
