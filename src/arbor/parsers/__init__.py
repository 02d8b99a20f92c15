from arbor.config import ParserConfig
from arbor.models import SupportedLanguage
from arbor.parsers.base import BaseParser
from arbor.parsers.python_parser import PythonParser


def get_parser(
    language: SupportedLanguage | str,
    config: ParserConfig | None = None
) -> BaseParser | None:
    """Get the parser for a language tag.

    Args:
        language: Tag from the language identification service
        config: Parser configuration (defaults if None)

    Returns:
        A parser instance, or None if the language has no grammar
    """
    try:
        language = SupportedLanguage(language)
    except ValueError:
        return None

    if language is SupportedLanguage.PYTHON:
        return PythonParser(config)

    return None
