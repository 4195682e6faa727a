"""Tree printer for parsed nodes.

Renders nodes as nested s-expressions::

    (list
      (declRt names: 'x', 'y', 'z' type: 'f32')
      (declRt names: 'w' type: 'f64'))

List items go on their own lines, indented two spaces per level. Declaration
fields are written inline in the fixed order ``names``, ``type``, ``values``;
a field with nothing in it is left out. Nodes inside a declaration field are
rendered as if at the first level.
"""

from __future__ import annotations

from declparse.ast_nodes import (
    ConstDecl,
    ExprList,
    Identifier,
    Invalid,
    Node,
    RuntimeDecl,
)


class TreePrinter:
    """Renders nodes to the s-expression text shown above."""

    def render(self, node: Node, level: int = 1) -> str:
        if isinstance(node, Invalid):
            return "(inv)"
        if isinstance(node, Identifier):
            return f"'{node.token}'"
        if isinstance(node, ExprList):
            indent = "  " * level
            items = "".join(
                f"\n{indent}{self.render(item, level + 1)}" for item in node.items
            )
            return f"(list{items})"
        if isinstance(node, (ConstDecl, RuntimeDecl)):
            name = "declCt" if isinstance(node, ConstDecl) else "declRt"
            fields = [
                ("names", node.names),
                ("type", [node.type] if node.type is not None else []),
                ("values", node.values),
            ]
            out = f"({name}"
            for key, values in fields:
                if values:
                    out += f" {key}: " + ", ".join(self.render(v) for v in values)
            return out + ")"
        raise TypeError(f"cannot render {type(node).__name__}")

    def render_all(self, nodes: list[Node]) -> str:
        """Render top-level nodes, one per line."""
        return "\n".join(self.render(node) for node in nodes)
