class PasswordGenError(Exception):
    """Base error for everything raised by passgen."""


class InvalidConfig(PasswordGenError, ValueError):
    """
    The generation config cannot produce a valid password
    (no classes enabled, length too small, ...).
    The caller should let the user fix the input, it's never fatal.
    """


class EnhancementError(PasswordGenError):
    """The remote enhancement service could not be reached or answered garbage."""
