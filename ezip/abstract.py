from typing import List, Dict, Tuple, Union, TypeVar, Callable, Any, Type
from enum import Enum
import re

class TokenAbstract:
    def __init__(self) -> None:
        raise NotImplementedError("Subclasses must implement this method")

    def match(self, text: str) -> bool:
        raise NotImplementedError("Subclasses must implement this method")

    def generate_value(self, text: str) -> Union[str, int]:
        raise NotImplementedError("Subclasses must implement this method")

    def to_tokens(self) -> List[Any]:
        raise NotImplementedError("Subclasses must implement this method")

    def ast(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement this method")

    def node_type(self) -> str:
        return self.__class__.__name__

    def with_name(self, custom_name: str) -> 'TokenAbstract':
        self._custom_name = custom_name
        return self

    def get_node_name(self) -> str:
        return getattr(self, '_custom_name', None) or self.node_type()

class Grammar:
    """
    Base class for a marker-compression dialect.

    The class attributes select how a marker's payload is treated and
    whether literal runs lose their trailing whitespace.
    """
    name: str = "Grammar"
    trim_literals: bool = False
    nested_payload: bool = False

    def __init__(self, name: str) -> None:
        self.name: str = name

    def ignore(self) -> Tuple[Any, ...]:
        return tuple()

class Symbol(TokenAbstract):
    def __init__(self, value: str) -> None:
        self.value: str = value
        self.name: str = "Symbol"

    def match(self, text: str) -> bool:
        return text == self.value

    def generate_value(self, text: str) -> str:
        return text

    def to_tokens(self) -> List[str]:
        return [re.escape(self.value)]

    def ast(self) -> Dict[str, str]:
        custom_name = getattr(self, '_custom_name', None)
        return {
            "type": self.name,
            "name": custom_name or self.name,
            "value": self.value
        }

class Number(TokenAbstract):
    """ASCII decimal digits only; no sign."""
    def __init__(self) -> None:
        self.name: str = "Number"

    def match(self, text: str) -> bool:
        return bool(text) and all('0' <= c <= '9' for c in text)

    def generate_value(self, text: str) -> int:
        return int(text)

    def to_tokens(self) -> List[str]:
        return [r'[0-9]+']

    def ast(self) -> Dict[str, Any]:
        custom_name = getattr(self, '_custom_name', None)
        return {
            "type": self.name,
            "name": custom_name or self.name,
            "value": None
        }

class Run(TokenAbstract):
    """
    A maximal span of characters that does not contain `stop`.
    """
    def __init__(self, stop: str) -> None:
        self.stop: str = stop
        self.name: str = "Run"

    def match(self, text: str) -> bool:
        return bool(text) and self.stop not in text

    def generate_value(self, text: str) -> str:
        return text

    def to_tokens(self) -> List[str]:
        return [f'[^{re.escape(self.stop)}]+']

    def ast(self) -> Dict[str, Any]:
        custom_name = getattr(self, '_custom_name', None)
        return {
            "type": self.name,
            "name": custom_name or self.name,
            "stop": self.stop
        }

T = TypeVar('T')
def grammar(lexical_rule: TokenAbstract) -> Callable[[Type[T]], Type[T]]:
    """
    Define a grammar for a class.
    """
    def decorator(cls: Type[T]) -> Type[T]:
        cls.lexical_rule_root = lexical_rule
        return cls
    return decorator

class Or(TokenAbstract):
    def __init__(self, *rules: TokenAbstract) -> None:
        self.rules: Tuple[TokenAbstract, ...] = rules

    def match(self, text: str) -> bool:
        return any(rule.match(text) for rule in self.rules)

    def to_tokens(self) -> List[List[Any]]:
        return [rule.to_tokens() for rule in self.rules]

    def ast(self) -> Dict[str, Any]:
        custom_name = getattr(self, '_custom_name', None)
        return {
            "type": "Or",
            "name": custom_name or "Or",
            "rules": [rule.ast() for rule in self.rules]
        }

def either(*rules: TokenAbstract) -> Or:
    """
    Matches any of the provided rules.
    """
    return Or(*rules)

class Conjoined(TokenAbstract):
    def __init__(self, *rules: TokenAbstract) -> None:
        self.rules: Tuple[TokenAbstract, ...] = rules

    def to_tokens(self) -> List[List[Any]]:
        return [rule.to_tokens() for rule in self.rules]

    def ast(self) -> Dict[str, Any]:
        custom_name = getattr(self, '_custom_name', None)
        return {
            "type": "Conjoined",
            "name": custom_name or "Conjoined",
            "rules": [rule.ast() for rule in self.rules]
        }

def joined(*rules: TokenAbstract) -> Conjoined:
    """
    Matches a sequence of rules.
    """
    return Conjoined(*rules)

class NodeTypeEnum(Enum):
    """
    Node types of a parsed document.
    """
    LITERAL: str = "Literal"
    REPEAT: str = "Repeat"
    DOCUMENT: str = "Document"
