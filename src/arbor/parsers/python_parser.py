import logging

from arbor import extractors
from arbor.config import ParserConfig
from arbor.diagnostics import collect_errors
from arbor.models import (
    ClassEntity,
    FunctionEntity,
    ImportEntity,
    ParameterEntity,
    ParsedNode,
    ParseResult,
    SupportedLanguage,
)
from arbor.normalizer import normalize_tree
from arbor.parsers.base import BaseParser
from arbor.parsers.grammar import GrammarAdapter

logger = logging.getLogger(__name__)


class PythonParser(BaseParser):
    """Parser for Python source code using tree-sitter."""

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.grammar = GrammarAdapter(SupportedLanguage.PYTHON)

    def parse(self, source_code: str) -> ParseResult:
        """Parse Python source code into a normalized tree.

        Syntax errors never raise; they are listed in ``ParseResult.errors``.

        Args:
            source_code: Python source code to parse

        Returns:
            ParseResult with the normalized root, diagnostics and the source
        """
        source_bytes = bytes(source_code, "utf8")
        tree = self.grammar.parse_bytes(source_bytes)
        root = normalize_tree(tree.root_node, source_bytes)

        errors = []
        if tree.root_node.has_error:
            errors = collect_errors(
                tree.root_node,
                report_missing=self.config.report_missing_nodes
            )
            logger.debug(f"Collected {len(errors)} diagnostics")

        return ParseResult(
            root=root,
            language=SupportedLanguage.PYTHON,
            errors=tuple(errors),
            source=source_code,
        )

    def find_nodes_by_kind(self, tree: ParsedNode, kind: str) -> list[ParsedNode]:
        """Find all nodes of a given kind."""
        return extractors.find_by_kind(tree, kind)

    def extract_functions(self, tree: ParsedNode) -> list[FunctionEntity]:
        return extractors.extract_functions(tree, self.config)

    def extract_classes(self, tree: ParsedNode) -> list[ClassEntity]:
        return extractors.extract_classes(tree, self.config)

    def extract_imports(self, tree: ParsedNode) -> list[ImportEntity]:
        return extractors.extract_imports(tree)

    def extract_parameters(self, node: ParsedNode | None) -> list[ParameterEntity]:
        return extractors.extract_parameters(node, self.config)

    def extract_decorators(self, node: ParsedNode) -> list[str]:
        return extractors.extract_decorators(node, self.config.max_decorator_depth)
