"""Tree-sitter grammar adapter.

Wraps the grammar engine for a single language and hands back raw concrete
syntax trees. Parsing never fails on bad input: tree-sitter always returns a
best-effort tree and marks the broken regions with ERROR nodes.
"""

import logging

import tree_sitter_python
from tree_sitter import Language, Parser, Tree

from arbor.exceptions import GrammarLoadError, UnsupportedLanguageError
from arbor.models import SupportedLanguage

logger = logging.getLogger(__name__)

# Languages with a grammar package installed
GRAMMAR_LANGUAGES = frozenset({SupportedLanguage.PYTHON})


def _load_language(language: SupportedLanguage) -> Language:
    if language is SupportedLanguage.PYTHON:
        return Language(tree_sitter_python.language())
    raise UnsupportedLanguageError(f"No grammar available for language: {language.value}")


class GrammarAdapter:
    """Owns a tree-sitter parser configured for one language."""

    def __init__(self, language: SupportedLanguage):
        self.language = language
        try:
            self.grammar = _load_language(language)
            self.parser = Parser(self.grammar)
        except UnsupportedLanguageError:
            raise
        except Exception as e:
            logger.error(f"Failed to load {language.value} grammar: {e}")
            raise GrammarLoadError(f"Could not set up {language.value} grammar: {e}") from e
        logger.debug(f"Created tree-sitter {language.value} parser")

    def parse(self, source: str) -> Tree:
        """Parse source text into a raw concrete syntax tree.

        Args:
            source: Decoded source text of one file.

        Returns:
            The tree-sitter Tree. ``tree.root_node.has_error`` tells whether
            any part of it is malformed.
        """
        return self.parse_bytes(source.encode("utf8"))

    def parse_bytes(self, source_bytes: bytes) -> Tree:
        """Parse UTF-8 encoded source.

        Node byte offsets of the returned tree index into ``source_bytes``.
        """
        tree = self.parser.parse(source_bytes)

        if tree.root_node.has_error:
            logger.warning("Parsed tree contains syntax errors")

        logger.debug(f"Parsed {len(source_bytes)} bytes of {self.language.value} code")
        return tree
