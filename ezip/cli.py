import argparse
import logging
import sys
from typing import List, Optional, Sequence, Type

from .abstract import Grammar
from .errors import ParseError
from .grammars import FlatGrammar, RecursiveGrammar
from .parser import Parser
from .walk import length_of

logger = logging.getLogger("ezip.cli")

VERSIONS = {
    FlatGrammar: "v1",
    RecursiveGrammar: "v2",
}

def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog=prog,
        description=description + " Reads the compressed file from standard input.",
    )

def report(grammar_class: Type[Grammar], text: str) -> str:
    result = Parser(grammar_class).parse(text)
    return f"the decompressed length of the file ({VERSIONS[grammar_class]}) is {length_of(result.value)}."

def run(grammar_classes: List[Type[Grammar]], prog: str, description: str,
        argv: Optional[Sequence[str]] = None) -> int:
    build_parser(prog, description).parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    text = sys.stdin.read()
    try:
        lines = [report(grammar_class, text) for grammar_class in grammar_classes]
    except ParseError as e:
        logger.error(f"Invalid compressed input: {e}")
        return 1

    for line in lines:
        print(line)
    return 0

def main(argv: Optional[Sequence[str]] = None) -> int:
    return run([FlatGrammar, RecursiveGrammar], "ezip",
               "Print the decompressed length of the file in both format versions.", argv)

def main_flat(argv: Optional[Sequence[str]] = None) -> int:
    return run([FlatGrammar], "ezip-flat",
               "Print the decompressed length of the file (format version 1).", argv)

def main_recursive(argv: Optional[Sequence[str]] = None) -> int:
    return run([RecursiveGrammar], "ezip-recursive",
               "Print the decompressed length of the file (format version 2).", argv)
