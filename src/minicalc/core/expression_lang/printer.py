"""
Text rendering of syntax trees.

Draws one line per node with box-drawing markers, e.g. for ``1+2``::

    └──BinaryExpression
       ├──NumberExpression
       │  └──NumberToken 1
       ├──PlusToken
       └──NumberExpression
          └──NumberToken 2

Every level indents by three columns, the width of a marker, under both
last and middle children. Older renderings used five columns after a
``│``, which skewed deeper levels.
"""

from __future__ import annotations

from minicalc.core.ir.syntax import SyntaxNode, SyntaxToken

_LAST_MARKER = "└──"
_MIDDLE_MARKER = "├──"
_LAST_INDENT = "   "
_MIDDLE_INDENT = "│  "


def pretty_print(node: SyntaxNode) -> str:
    """Render a node and all of its descendants."""
    lines: list[str] = []
    # (node, indent, is_last), walked depth-first without recursion
    pending: list[tuple[SyntaxNode, str, bool]] = [(node, "", True)]

    while pending:
        current, indent, is_last = pending.pop()

        marker = _LAST_MARKER if is_last else _MIDDLE_MARKER
        line = f"{indent}{marker}{current.kind}"
        if isinstance(current, SyntaxToken) and current.value is not None:
            line += f" {current.value}"
        lines.append(line)

        child_indent = indent + (_LAST_INDENT if is_last else _MIDDLE_INDENT)
        children = current.get_children()
        for i in reversed(range(len(children))):
            pending.append((children[i], child_indent, i == len(children) - 1))

    return "\n".join(lines)
