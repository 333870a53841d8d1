import pytest

from ..parser import Document, LiteralNode, RepeatNode, parse_flat, parse_recursive
from ..walk import ASTWalker, WalkContext, length_of

def test_length_of_nodes():
    assert length_of(LiteralNode("ABC")) == 3
    assert length_of(RepeatNode(4, Document((LiteralNode("AB"), LiteralNode("C"))))) == 12
    assert length_of(Document()) == 0

def test_length_is_repeatable():
    document = parse_recursive("(25x3)(3x3)ABC(2x3)XY(5x2)PQRSTX(18x9)(3x2)TWO(5x7)SEVEN")
    assert length_of(document) == length_of(document) == 445

def test_walker_visits_children_first():
    visited = []
    walker = ASTWalker()

    @walker.default()
    def record(walker, node, ctx: WalkContext):
        visited.append((node.type, ctx.level))
        return None

    walker.walk(parse_recursive("A(6x2)(1x3)B"))
    assert visited == [
        ("Literal", 1),
        ("Literal", 5),
        ("Document", 4),
        ("Repeat", 3),
        ("Document", 2),
        ("Repeat", 1),
        ("Document", 0),
    ]

def test_walker_passes_parent():
    parents = []
    walker = ASTWalker()

    @walker.for_node("Literal")
    def literal(walker, node, ctx):
        parents.append(ctx.parent.type)

    @walker.default()
    def other(walker, node, ctx):
        return None

    walker.walk(parse_flat("A(1x2)B"))
    assert parents == ["Document", "Document"]

def test_walker_without_handler():
    with pytest.raises(ValueError):
        ASTWalker().walk(LiteralNode("A"))

def test_ast():
    assert parse_flat("A(1x5)BC").ast() == {
        "type": "Document",
        "name": "Document",
        "value": [
            {"type": "Literal", "name": "Literal", "value": "A"},
            {
                "type": "Repeat",
                "name": "Repeat",
                "count": 5,
                "value": [{"type": "Literal", "name": "Literal", "value": "B"}],
            },
            {"type": "Literal", "name": "Literal", "value": "C"},
        ],
    }
