"""End-to-end workflows: ids as edges of AST and graph structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from idarena import Arena, Id, SharedIdSpace


@dataclass(frozen=True, slots=True)
class Const:
    value: int


@dataclass(frozen=True, slots=True)
class Var:
    name: str


@dataclass(frozen=True, slots=True)
class BinOp:
    op: str
    lhs: Id
    rhs: Id


def evaluate(nodes: Arena, root: Id, env: dict[str, int]) -> int:
    node = nodes[root]
    if isinstance(node, Const):
        return node.value
    if isinstance(node, Var):
        return env[node.name]
    lhs = evaluate(nodes, node.lhs, env)
    rhs = evaluate(nodes, node.rhs, env)
    return lhs * rhs if node.op == "*" else lhs + rhs


def test_expression_tree_by_id():
    """Build `a * (b + 3)` with ids as child links and evaluate it."""
    nodes: Arena = Arena()

    three = nodes.alloc(Const(3))
    b = nodes.alloc(Var("b"))
    b_plus_three = nodes.alloc(BinOp("+", lhs=b, rhs=three))
    a = nodes.alloc(Var("a"))
    root = nodes.alloc(BinOp("*", lhs=a, rhs=b_plus_three))

    assert nodes[three] == Const(3)
    assert evaluate(nodes, root, {"a": 2, "b": 4}) == 14
    assert len(nodes) == 5


@dataclass
class GraphNode:
    label: str
    me: Id
    edges: list[Id] = field(default_factory=list)


def test_cyclic_graph_with_self_ids():
    graph: Arena[GraphNode] = Arena()

    first = graph.alloc_with_id(lambda me: GraphNode("first", me))
    second = graph.alloc_with_id(lambda me: GraphNode("second", me, edges=[first]))
    graph[first].edges.append(second)

    assert graph[first].me == first
    assert graph[graph[first].edges[0]].label == "second"
    assert graph[graph[second].edges[0]].label == "first"


def test_two_arenas_same_contents_distinct_ids():
    arena_a: Arena[str] = Arena()
    arena_b: Arena[str] = Arena()

    id_a = arena_a.alloc("x")
    id_b = arena_b.alloc("x")

    assert id_a.index == id_b.index == 0
    assert id_a != id_b
    assert arena_a == arena_b


def test_shared_namespace_across_element_types():
    """Functions and blocks draw ids from one namespace, so a flat symbol
    table keyed by raw index never collides."""
    space = SharedIdSpace()
    functions: Arena[str] = Arena(behavior=space)
    blocks: Arena[list[str]] = Arena(behavior=space)

    symbols: dict[int, str] = {}
    for name in ("main", "helper"):
        fn = functions.alloc(name)
        symbols[fn.index] = f"fn {name}"
        block = blocks.alloc([f"{name}.entry"])
        symbols[block.index] = f"block of {name}"

    assert len(symbols) == 4
    assert sorted(symbols) == [0, 1, 2, 3]
