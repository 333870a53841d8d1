import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .abstract import Conjoined, Grammar, Number, Or, Run, Symbol, TokenAbstract
from .errors import MalformedMarker

@dataclass(frozen=True)
class Token:
    """A lexeme found by the Lexer; `stop` is the offset just past it."""
    name: str
    value: Any
    start: int
    stop: int

@dataclass(frozen=True)
class MarkerHeader:
    """The two numeric fields of one `(LxR)` marker and where it sits."""
    length: int
    repeat: int
    start: int
    stop: int

    @classmethod
    def from_token(cls, token: Token) -> 'MarkerHeader':
        fields: Dict[str, Any] = {part.name: part.value for part in token.value}
        return cls(fields["length"], fields["repeat"], token.start, token.stop)

    @property
    def payload_stop(self) -> int:
        return self.stop + self.length

class Lexer:
    """
    Scans an immutable text with an explicit cursor.

    Every method takes the cursor `pos` and a bound `end`; nothing past
    `end` is ever looked at, so a caller can lex a window of the text.
    """
    def __init__(self, text: str, grammar_instance: Grammar) -> None:
        self.text: str = text
        self.grammar_instance: Grammar = grammar_instance
        self.ignore_rules: Tuple[Any, ...] = grammar_instance.ignore()
        self.root: TokenAbstract = type(grammar_instance).lexical_rule_root
        self._patterns: Dict[str, re.Pattern] = {}

    def next_token(self, pos: int, end: int) -> Token:
        """
        Return the literal run or marker header starting at `pos`.
        """
        token = self._apply_rule(pos, end, self.root)
        if token is None:
            raise MalformedMarker(f"Malformed marker {self.text[pos:end]!r}", pos)
        return token

    def read_header(self, pos: int, end: int) -> MarkerHeader:
        token = self.next_token(pos, end)
        if not isinstance(token.value, tuple):
            raise MalformedMarker(f"Expected a marker, found {token.value!r}", pos)
        return MarkerHeader.from_token(token)

    def _apply_rule(self, pos: int, end: int, rule: TokenAbstract) -> Optional[Token]:
        if isinstance(rule, (Symbol, Number, Run)):
            return self._lex_pattern(pos, end, rule)
        elif isinstance(rule, Or):
            return self._lex_or(pos, end, rule)
        elif isinstance(rule, Conjoined):
            return self._lex_conjoined(pos, end, rule)
        else:
            raise ValueError(f"Unsupported rule type: {type(rule)}")

    def _lex_or(self, pos: int, end: int, rule: Or) -> Optional[Token]:
        for sub_rule in rule.rules:
            token = self._apply_rule(pos, end, sub_rule)
            if token:
                return token
        return None

    def _lex_conjoined(self, pos: int, end: int, rule: Conjoined) -> Optional[Token]:
        start = pos
        parts: List[Token] = []

        for index, sub_rule in enumerate(rule.rules):
            if index:
                pos = self._skip_ignored(pos, end)
            token = self._apply_rule(pos, end, sub_rule)
            if token is None:
                return None
            parts.append(token)
            pos = token.stop

        return Token(rule.get_node_name(), tuple(parts), start, pos)

    def _lex_pattern(self, pos: int, end: int, rule: TokenAbstract) -> Optional[Token]:
        pattern = self._compiled(rule.to_tokens()[0])
        match = pattern.match(self.text, pos, end)
        if not match:
            return None
        return Token(rule.get_node_name(), rule.generate_value(match.group(0)), pos, match.end())

    def _skip_ignored(self, pos: int, end: int) -> int:
        while pos < end and any(rule.match(self.text[pos]) for rule in self.ignore_rules):
            pos += 1
        return pos

    def _compiled(self, pattern: str) -> re.Pattern:
        if pattern not in self._patterns:
            self._patterns[pattern] = re.compile(pattern)
        return self._patterns[pattern]
