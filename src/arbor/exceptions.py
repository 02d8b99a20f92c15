"""Hard failures raised by arbor.

Malformed source never raises; it is reported through ``ParseResult.errors``.
These exceptions cover the cases where no parse can happen at all.
"""


class ArborError(Exception):
    """Base class for arbor failures."""


class GrammarLoadError(ArborError):
    """Raised when the grammar engine cannot be set up for a language."""


class UnsupportedLanguageError(ArborError):
    """Raised when no grammar is available for a language tag."""
