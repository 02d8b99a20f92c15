"""Collection of syntax diagnostics from a raw tree-sitter tree."""

from tree_sitter import Node

from arbor.models import ParseError, Position, Severity

ERROR_KIND = "ERROR"


def _position_of(node: Node) -> Position:
    return Position(row=node.start_point[0], column=node.start_point[1])


def collect_errors(root: Node, report_missing: bool = False) -> list[ParseError]:
    """Collect syntax errors from every error-flagged subtree.

    Only subtrees whose node reports ``has_error`` are descended into. Inside
    them all children are visited, so separate ERROR nodes in one broken
    region are each reported. Results are in source order.

    Args:
        root: Root of the raw tree.
        report_missing: Also report nodes the grammar inserted to recover
            (e.g. a missing closing parenthesis) as warnings.

    Returns:
        List of ParseError objects, empty for well-formed source.
    """
    errors: list[ParseError] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if not node.has_error:
            continue

        position = _position_of(node)
        if node.type == ERROR_KIND:
            errors.append(ParseError(
                message=f"Syntax error at {position.row}:{position.column}",
                position=position,
                severity=Severity.ERROR,
            ))
        elif report_missing and node.is_missing:
            errors.append(ParseError(
                message=f"Missing {node.type} at {position.row}:{position.column}",
                position=position,
                severity=Severity.WARNING,
            ))

        stack.extend(reversed(node.children))

    return errors
