"""Entity extraction over the normalized ParsedNode tree.

None of these routines raise on odd input. Missing structure degrades to a
default ("unknown", an empty string or list, or None), so partial or broken
source still gives a best-effort summary. Entities copy out strings and line
numbers and keep no reference to the tree.
"""

from arbor.config import ParserConfig
from arbor.models import (
    ClassEntity,
    FunctionEntity,
    ImportEntity,
    ImportName,
    ParameterEntity,
    ParsedNode,
)

UNKNOWN_NAME = "unknown"

FUNCTION_KIND = "function_definition"
CLASS_KIND = "class_definition"
DECORATED_KIND = "decorated_definition"
DECORATOR_KIND = "decorator"
IMPORT_KIND = "import_statement"
FROM_IMPORT_KIND = "import_from_statement"

DEFAULT_CONFIG = ParserConfig()


def child_of_kind(node: ParsedNode | None, *kinds: str) -> ParsedNode | None:
    """Return the first immediate child whose kind is one of ``kinds``."""
    if node is None:
        return None
    for child in node.children:
        if child.kind in kinds:
            return child
    return None


def text_of(node: ParsedNode | None, default: str | None = "") -> str | None:
    """Return the node's text, or ``default`` when the node is absent."""
    if node is None:
        return default
    return node.text


def find_by_kind(tree: ParsedNode, kind: str) -> list[ParsedNode]:
    """Collect every node of the given kind, in pre-order."""
    return [node for node in tree.walk() if node.kind == kind]


def extract_functions(tree: ParsedNode, config: ParserConfig | None = None) -> list[FunctionEntity]:
    """Extract every function definition found anywhere under ``tree``.

    Nested definitions are not filtered out: on a whole-file tree this
    includes methods and inner functions.
    """
    config = config or DEFAULT_CONFIG
    functions = []

    for node in find_by_kind(tree, FUNCTION_KIND):
        functions.append(FunctionEntity(
            name=text_of(child_of_kind(node, "identifier"), UNKNOWN_NAME),
            parameters=extract_parameters(child_of_kind(node, "parameters"), config),
            body=text_of(child_of_kind(node, "block")),
            start_line=node.start.row,
            end_line=node.end.row,
            is_async=any(child.text == "async" for child in node.children),
            decorators=extract_decorators(node, config.max_decorator_depth),
        ))

    return functions


def extract_parameters(
    node: ParsedNode | None,
    config: ParserConfig | None = None
) -> list[ParameterEntity]:
    """Extract parameters from a ``parameters`` node.

    Recognized shapes are a bare identifier, ``x=5`` (default_parameter) and
    ``x: int`` (typed_parameter). ``x: int = 5`` is only recognized when
    ``config.typed_default_parameters`` is set. Everything else (punctuation,
    ``*args``, ``**kwargs``, ``/``, ``*``) is skipped.

    Args:
        node: The parameters node, or None
        config: Parser configuration

    Returns:
        List of ParameterEntity objects in declaration order
    """
    if node is None:
        return []
    config = config or DEFAULT_CONFIG
    parameters = []

    for child in node.children:
        if child.kind == "identifier":
            parameters.append(ParameterEntity(name=child.text))

        elif child.kind == "default_parameter":
            # Structure: identifier, =, value (value is always last)
            parameters.append(ParameterEntity(
                name=text_of(child_of_kind(child, "identifier"), UNKNOWN_NAME),
                default_value=text_of(child.children[-1] if child.children else None, None),
            ))

        elif child.kind == "typed_parameter":
            # Structure: identifier, :, type
            parameters.append(ParameterEntity(
                name=text_of(child_of_kind(child, "identifier"), UNKNOWN_NAME),
                type=text_of(child_of_kind(child, "type"), None),
            ))

        elif child.kind == "typed_default_parameter" and config.typed_default_parameters:
            # Structure: identifier, :, type, =, value
            parameters.append(ParameterEntity(
                name=text_of(child_of_kind(child, "identifier"), UNKNOWN_NAME),
                type=text_of(child_of_kind(child, "type"), None),
                default_value=text_of(child.children[-1] if child.children else None, None),
            ))

    return parameters


def extract_decorators(node: ParsedNode, max_depth: int = DEFAULT_CONFIG.max_decorator_depth) -> list[str]:
    """Collect decorators by climbing decorated_definition wrappers.

    Decorators of the closest wrapper come first, each wrapper's in source
    order. At most ``max_depth`` wrappers are climbed.
    """
    decorators = []
    current = node.parent
    depth = 0

    while current is not None and current.kind == DECORATED_KIND and depth < max_depth:
        decorators.extend(
            child.text for child in current.children if child.kind == DECORATOR_KIND
        )
        current = current.parent
        depth += 1

    return decorators


def extract_superclasses(node: ParsedNode | None) -> list[str]:
    """Return base class expressions from a class's ``argument_list``.

    Keyword arguments such as ``metaclass=ABCMeta`` are skipped.
    """
    if node is None:
        return []
    return [
        child.text for child in node.children
        if child.kind in ("identifier", "attribute")
    ]


def extract_classes(tree: ParsedNode, config: ParserConfig | None = None) -> list[ClassEntity]:
    """Extract every class definition found anywhere under ``tree``.

    Unlike extract_functions on a whole file, methods are looked up only in
    the class's own body.
    """
    config = config or DEFAULT_CONFIG
    classes = []

    for node in find_by_kind(tree, CLASS_KIND):
        body = child_of_kind(node, "block")
        classes.append(ClassEntity(
            name=text_of(child_of_kind(node, "identifier"), UNKNOWN_NAME),
            superclasses=extract_superclasses(child_of_kind(node, "argument_list")),
            methods=extract_functions(body, config) if body is not None else [],
            start_line=node.start.row,
            end_line=node.end.row,
            decorators=extract_decorators(node, config.max_decorator_depth),
        ))

    return classes


def import_list_of(node: ParsedNode) -> list[ParsedNode]:
    """Return the items of an import statement's name list.

    Uses the ``import_list`` child when the grammar produces one. The Python
    grammar inlines the list instead, so otherwise the children following
    the ``import`` keyword are used.
    """
    import_list = child_of_kind(node, "import_list")
    if import_list is not None:
        return import_list.children

    for index, child in enumerate(node.children):
        if child.kind == "import":
            return node.children[index + 1:]
    return []


def extract_import_names(items: list[ParsedNode]) -> list[ImportName]:
    """Convert import list items into ImportName objects.

    ``a`` and ``a.b`` become plain names, ``a as b`` keeps its alias and
    ``*`` is reported as the name "*". Punctuation is skipped.
    """
    names = []

    for child in items:
        if child.kind in ("identifier", "dotted_name"):
            names.append(ImportName(name=child.text))
        elif child.kind == "aliased_import":
            # Structure: name, as, alias
            name_node = child.children[0] if child.children else None
            alias_node = child.children[2] if len(child.children) > 2 else None
            names.append(ImportName(
                name=text_of(name_node),
                alias=text_of(alias_node, None),
            ))
        elif child.kind == "wildcard_import":
            names.append(ImportName(name="*"))

    return names


def extract_imports(tree: ParsedNode) -> list[ImportEntity]:
    """Extract ``import`` and ``from ... import`` statements.

    Direct imports are listed first, then from-imports, each group in source
    order. For a direct import naming several modules, ``module`` and
    ``alias`` describe only the first one; the full list is in ``names``.
    """
    imports = []
    nodes = find_by_kind(tree, IMPORT_KIND) + find_by_kind(tree, FROM_IMPORT_KIND)

    for node in nodes:
        names = extract_import_names(import_list_of(node))

        if node.kind == FROM_IMPORT_KIND:
            module_node = child_of_kind(node, "dotted_name", "relative_import")
            imports.append(ImportEntity(
                kind="from",
                module=text_of(module_node),
                names=names,
                alias=None,
                start_line=node.start.row,
            ))
        else:
            first = names[0] if names else None
            imports.append(ImportEntity(
                kind="direct",
                module=first.name if first else "",
                names=names,
                alias=first.alias if first else None,
                start_line=node.start.row,
            ))

    return imports
