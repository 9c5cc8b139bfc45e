"""README example: an expression AST stored in an arena.

Run with: python examples/readme_example.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from idarena import Arena, Id


@dataclass(frozen=True, slots=True)
class Const:
    value: int


@dataclass(frozen=True, slots=True)
class Var:
    name: str


@dataclass(frozen=True, slots=True)
class Add:
    lhs: Id
    rhs: Id


@dataclass(frozen=True, slots=True)
class Mul:
    lhs: Id
    rhs: Id


AstNode = Const | Var | Add | Mul


def render(nodes: Arena[AstNode], node_id: Id) -> str:
    node = nodes[node_id]
    if isinstance(node, Const):
        return str(node.value)
    if isinstance(node, Var):
        return node.name
    symbol = "+" if isinstance(node, Add) else "*"
    return f"({render(nodes, node.lhs)} {symbol} {render(nodes, node.rhs)})"


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    ast_nodes: Arena[AstNode] = Arena()

    # Create the AST for `a * (b + 3)`.
    three = ast_nodes.alloc(Const(3))
    b = ast_nodes.alloc(Var("b"))
    b_plus_three = ast_nodes.alloc(Add(lhs=b, rhs=three))
    a = ast_nodes.alloc(Var("a"))
    root = ast_nodes.alloc(Mul(lhs=a, rhs=b_plus_three))

    print(render(ast_nodes, root))

    # Parallel pass over every node, results in index order
    kinds = ast_nodes.par_iter().map(lambda ident, node: type(node).__name__)
    for (ident, _), kind in zip(ast_nodes, kinds):
        print(f"{ident.index}: {kind}")


if __name__ == "__main__":
    main()
