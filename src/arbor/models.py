from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class SupportedLanguage(str, Enum):
    """Language tags produced by the language identification service."""
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JAVA = "java"
    CSHARP = "csharp"
    CPP = "cpp"
    GO = "go"


class Severity(str, Enum):
    """Diagnostic classification. Only ERROR is produced by default."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Position:
    """A zero-based location in the source text."""
    row: int
    column: int


@dataclass(frozen=True)
class Span:
    """Start and end positions covered by a node."""
    start: Position
    end: Position


@dataclass(eq=False)
class ParsedNode:
    """A node of the normalized tree.

    Children are owned by the node and kept in source order. ``parent`` is a
    lookup reference only, assigned after the parent itself has been built;
    it is left out of repr so printing a node never recurses upward.
    Nodes compare by identity.
    """
    kind: str
    span: Span
    text: str
    children: list["ParsedNode"] = field(default_factory=list)
    parent: "ParsedNode | None" = field(default=None, repr=False)

    @property
    def start(self) -> Position:
        return self.span.start

    @property
    def end(self) -> Position:
        return self.span.end

    @property
    def is_error(self) -> bool:
        """Whether this node is the grammar's dedicated error marker."""
        return self.kind == "ERROR"

    def walk(self) -> Iterator["ParsedNode"]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def ancestors(self) -> Iterator["ParsedNode"]:
        """Yield parents from the closest one up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent


@dataclass(frozen=True)
class ParseError:
    """A syntax diagnostic found in the parsed tree."""
    message: str
    position: Position
    severity: Severity = Severity.ERROR


@dataclass(frozen=True)
class ParseResult:
    """Output of parsing one file: the tree plus diagnostics."""
    root: ParsedNode
    language: SupportedLanguage
    errors: tuple[ParseError, ...]
    source: str

    @property
    def has_errors(self) -> bool:
        return any(error.severity == Severity.ERROR for error in self.errors)


@dataclass(frozen=True)
class ParameterEntity:
    """A function parameter."""
    name: str
    type: str | None = None  # None if no type annotation
    default_value: str | None = None  # None if no default value


@dataclass(frozen=True)
class FunctionEntity:
    """A function or method definition."""
    name: str
    parameters: list[ParameterEntity]
    body: str
    start_line: int
    end_line: int
    is_async: bool = False
    decorators: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ClassEntity:
    """A class definition with its methods."""
    name: str
    superclasses: list[str]
    methods: list[FunctionEntity]
    start_line: int
    end_line: int
    decorators: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImportName:
    """One imported name, optionally renamed with ``as``."""
    name: str
    alias: str | None = None


@dataclass(frozen=True)
class ImportEntity:
    """An ``import`` ("direct") or ``from ... import`` ("from") statement."""
    kind: str
    module: str
    names: list[ImportName]
    alias: str | None
    start_line: int
