from typing import Dict, Any, List, Callable, Optional, Tuple
from dataclasses import dataclass, field

@dataclass
class WalkContext:
    """Context information for node traversal"""
    parent: Optional[Any] = None
    level: int = 0
    processed: List[Any] = field(default_factory=list)

NodeHandler = Callable[['ASTWalker', Any, WalkContext], Any]

class ASTWalker:
    """
    A post-order walker that applies handlers to the nodes of a parsed document.

    Children are handled before their parent; a parent's handler finds the
    children's results in `ctx.processed`. The traversal keeps its own stack,
    so arbitrarily deep documents can be walked.
    """
    def __init__(self):
        self.handlers: Dict[str, NodeHandler] = {}
        self.default_handler: Optional[NodeHandler] = None

    def for_node(self, node_type: str) -> Callable[[NodeHandler], NodeHandler]:
        """
        Register a handler for a specific node type.

        Args:
            node_type: The `type` of the nodes to handle
        """
        def decorator(handler: NodeHandler) -> NodeHandler:
            self.handlers[node_type] = handler
            return handler
        return decorator

    def default(self) -> Callable[[NodeHandler], NodeHandler]:
        """Register a default handler for unrecognized node types."""
        def decorator(handler: NodeHandler) -> NodeHandler:
            self.default_handler = handler
            return handler
        return decorator

    def walk(self, root: Any) -> Any:
        """
        Walk the document rooted at `root` and return the root handler's result.
        """
        results: List[Any] = []
        stack: List[Tuple[Any, WalkContext, bool]] = [(root, WalkContext(), False)]

        while stack:
            node, ctx, expanded = stack.pop()
            children = node.children()

            if not expanded:
                stack.append((node, ctx, True))
                for child in reversed(children):
                    stack.append((child, WalkContext(parent=node, level=ctx.level + 1), False))
                continue

            if children:
                ctx.processed = results[-len(children):]
                del results[-len(children):]
            results.append(self._dispatch(node, ctx))

        return results.pop()

    def _dispatch(self, node: Any, ctx: WalkContext) -> Any:
        handler = self.handlers.get(node.type, self.default_handler)
        if handler is None:
            raise ValueError(f"No handler for node type: {node.type}")
        return handler(self, node, ctx)


length_walker = ASTWalker()

@length_walker.for_node("Literal")
def _literal_length(walker: ASTWalker, node: Any, ctx: WalkContext) -> int:
    return len(node.text)

@length_walker.for_node("Repeat")
def _repeat_length(walker: ASTWalker, node: Any, ctx: WalkContext) -> int:
    return node.count * sum(ctx.processed)

@length_walker.for_node("Document")
def _document_length(walker: ASTWalker, node: Any, ctx: WalkContext) -> int:
    return sum(ctx.processed)

def length_of(document: Any) -> int:
    """
    Decompressed length of a document, folded without expanding any text.

    Repeat counts only multiply, so the cost depends on the number of nodes,
    never on the size of the output.
    """
    return length_walker.walk(document)


dict_walker = ASTWalker()

@dict_walker.for_node("Literal")
def _literal_dict(walker: ASTWalker, node: Any, ctx: WalkContext) -> Dict[str, Any]:
    return {"type": node.type, "name": node.type, "value": node.text}

@dict_walker.for_node("Repeat")
def _repeat_dict(walker: ASTWalker, node: Any, ctx: WalkContext) -> Dict[str, Any]:
    return {"type": node.type, "name": node.type, "count": node.count, "value": ctx.processed[0]["value"]}

@dict_walker.default()
def _nodes_dict(walker: ASTWalker, node: Any, ctx: WalkContext) -> Dict[str, Any]:
    return {"type": node.type, "name": node.type, "value": list(ctx.processed)}

def to_dict(node: Any) -> Dict[str, Any]:
    return dict_walker.walk(node)
