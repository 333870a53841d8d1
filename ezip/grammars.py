from typing import Tuple

from .abstract import Grammar, grammar, either, joined, Symbol, Number, Run

OPENER = "("

marker = joined(
    Symbol(OPENER),
    Number().with_name("length"),
    Symbol("x"),
    Number().with_name("repeat"),
    Symbol(")")
).with_name("Marker")

literal = Run(OPENER).with_name("Literal")


@grammar(either(marker, literal))
class FlatGrammar(Grammar):
    """
    Experimental compression format, version 1.

    A marker's payload is taken verbatim, markers inside it are plain text.
    """
    name = "FlatGrammar"
    trim_literals = True
    nested_payload = False

    def ignore(self) -> Tuple[Symbol, ...]:
        return (Symbol(" "),)


@grammar(either(marker, literal))
class RecursiveGrammar(Grammar):
    """
    Experimental compression format, version 2.

    A marker's payload is parsed again, so markers nest.
    """
    name = "RecursiveGrammar"
    trim_literals = False
    nested_payload = True

    def ignore(self) -> Tuple[Symbol, ...]:
        return (Symbol(" "),)
