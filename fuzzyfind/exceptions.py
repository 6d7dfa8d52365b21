"""Exceptions raised by the fuzzy search library."""


class FuzzyFindError(Exception):
    """Base class for all library errors."""


class InvalidConfigurationError(FuzzyFindError, ValueError):
    """Raised when options or candidates cannot be used together.

    Typical causes are a non-string candidate searched without a
    ``key_selector``, a ``key_selector`` that does not return strings, or a
    per-call override of an option that the ``Searcher`` cache was built with.
    """
