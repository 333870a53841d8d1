import logging
from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Any, Optional as OptionalType, Type

from .abstract import Grammar, NodeTypeEnum
from .errors import OverrunPayload, TruncatedPayload
from .grammars import FlatGrammar, RecursiveGrammar
from .lexer import Lexer, MarkerHeader

logger = logging.getLogger("ezip.parser")

class ASTNode:
    type: str = ""

    def children(self) -> Tuple['ASTNode', ...]:
        return ()

    def ast(self) -> Dict[str, Any]:
        """
        Convert the ASTNode to an AST (dictionary) representation, with child ASTNodes being also converted.
        """
        from .walk import to_dict
        return to_dict(self)

@dataclass(frozen=True)
class LiteralNode(ASTNode):
    """Uncompressed text, its length is its own."""
    text: str
    type = NodeTypeEnum.LITERAL.value

@dataclass(frozen=True)
class Document(ASTNode):
    """Ordered nodes; their order is the decompression order."""
    nodes: Tuple[ASTNode, ...] = ()
    type = NodeTypeEnum.DOCUMENT.value

    def children(self) -> Tuple[ASTNode, ...]:
        return self.nodes

@dataclass(frozen=True)
class RepeatNode(ASTNode):
    """`body` repeated `count` times."""
    count: int
    body: Document
    type = NodeTypeEnum.REPEAT.value

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.body,)

class ParseResult:
    def __init__(self, value: Document) -> None:
        self.value: Document = value

    def ast(self) -> Dict[str, Any]:
        return self.value.ast()

@dataclass
class _Window:
    """A marker payload whose nodes are still being collected."""
    header: OptionalType[MarkerHeader]
    end: int
    nodes: List[ASTNode] = field(default_factory=list)

class Parser:
    def __init__(self, grammar_class: Type[Grammar]) -> None:
        self.grammar_class: Type[Grammar] = grammar_class
        self.grammar_instance: Grammar = grammar_class(grammar_class.name)

    def parse(self, text: str) -> ParseResult:
        """
        Parse the input text into a Document.

        Open marker payloads are kept on an explicit stack of windows, so
        nesting is bounded by the input rather than by the interpreter's
        recursion limit. Raises a ParseError subclass on malformed input.
        """
        lexer = Lexer(text, self.grammar_instance)
        root = _Window(None, len(text))
        windows: List[_Window] = [root]
        pos = 0

        while True:
            window = windows[-1]
            if pos == window.end:
                if window is root:
                    break
                windows.pop()
                windows[-1].nodes.append(RepeatNode(window.header.repeat, Document(tuple(window.nodes))))
                continue

            token = lexer.next_token(pos, window.end)
            if isinstance(token.value, tuple):
                header = MarkerHeader.from_token(token)
                self._check_payload(header, window, root)
                logger.debug(f"Marker {header.length}x{header.repeat} at {header.start}, depth {len(windows) - 1}")

                if self.grammar_instance.nested_payload:
                    windows.append(_Window(header, header.payload_stop))
                    pos = header.stop
                else:
                    payload = LiteralNode(text[header.stop:header.payload_stop])
                    window.nodes.append(RepeatNode(header.repeat, Document((payload,))))
                    pos = header.payload_stop
            else:
                window.nodes.extend(self._literal(token.value))
                pos = token.stop

        return ParseResult(Document(tuple(root.nodes)))

    def _literal(self, run: str) -> List[LiteralNode]:
        if self.grammar_instance.trim_literals:
            run = run.rstrip()
        return [LiteralNode(run)] if run else []

    def _check_payload(self, header: MarkerHeader, window: _Window, root: _Window) -> None:
        if header.payload_stop <= window.end:
            return
        if window is root:
            raise TruncatedPayload(
                f"Marker declares {header.length} characters, only {window.end - header.stop} remain",
                header.start
            )
        raise OverrunPayload(
            f"Marker payload ends at {header.payload_stop}, past the enclosing payload end {window.end}",
            header.start
        )

def parse_flat(text: str) -> Document:
    """Parse version 1 text: marker payloads are literal."""
    return Parser(FlatGrammar).parse(text).value

def parse_recursive(text: str) -> Document:
    """Parse version 2 text: marker payloads are parsed again."""
    return Parser(RecursiveGrammar).parse(text).value
