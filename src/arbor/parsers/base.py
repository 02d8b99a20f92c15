from abc import ABC, abstractmethod

from arbor.models import ClassEntity, FunctionEntity, ImportEntity, ParsedNode, ParseResult


class BaseParser(ABC):
    """Abstract base class for language-specific parsers."""

    @abstractmethod
    def parse(self, source_code: str) -> ParseResult:
        """Parse one file's source code into a normalized tree with diagnostics.

        Args:
            source_code: The decoded source code to parse

        Returns:
            ParseResult holding the tree, diagnostics and the source
        """
        pass

    @abstractmethod
    def extract_functions(self, tree: ParsedNode) -> list[FunctionEntity]:
        """Extract function definitions from a normalized tree."""
        pass

    @abstractmethod
    def extract_classes(self, tree: ParsedNode) -> list[ClassEntity]:
        """Extract class definitions from a normalized tree."""
        pass

    @abstractmethod
    def extract_imports(self, tree: ParsedNode) -> list[ImportEntity]:
        """Extract import statements from a normalized tree."""
        pass
