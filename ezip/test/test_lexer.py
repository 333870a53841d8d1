import pytest

from ..abstract import Number, Run, Symbol, either
from ..errors import MalformedMarker
from ..grammars import FlatGrammar, RecursiveGrammar, marker, literal
from ..lexer import Lexer, MarkerHeader, Token

def lexer_for(text):
    return Lexer(text, FlatGrammar(FlatGrammar.name))

def test_literal_run():
    token = lexer_for("AB(2x3)CDE").next_token(0, 10)
    assert token == Token("Literal", "AB", 0, 2)

def test_literal_run_stops_at_bound():
    token = lexer_for("ABCDEF").next_token(1, 4)
    assert token.value == "BCD"
    assert token.stop == 4

def test_marker_header():
    header = lexer_for("AB(2x3)CDE").read_header(2, 10)
    assert header == MarkerHeader(length=2, repeat=3, start=2, stop=7)
    assert header.payload_stop == 9

def test_marker_header_with_spaces():
    header = lexer_for("(  12 x 4  )").read_header(0, 12)
    assert (header.length, header.repeat, header.stop) == (12, 4, 12)

def test_spaces_outside_header_are_text():
    token = lexer_for(" (1x1)A").next_token(0, 7)
    assert token.value == " "

def test_header_cut_by_bound():
    with pytest.raises(MalformedMarker):
        lexer_for("(12x4)").next_token(0, 4)

def test_read_header_on_text():
    with pytest.raises(MalformedMarker):
        lexer_for("ABC").read_header(0, 3)

@pytest.mark.parametrize("text", ["(1x)", "(ax1)", "(1*1)", "(1x1", "(1 1)"])
def test_malformed_headers(text):
    with pytest.raises(MalformedMarker) as info:
        lexer_for(text).next_token(0, len(text))
    assert info.value.position == 0

def test_atoms():
    assert Number().match("0042")
    assert not Number().match("4a")
    assert not Number().match("")
    assert Number().generate_value("0042") == 42
    assert Symbol("x").match("x")
    assert Run("(").match("abc)")
    assert not Run("(").match("a(b")
    assert either(Symbol("("), Number()).match("7")

def test_grammars_share_the_marker_rules():
    assert FlatGrammar.lexical_rule_root.rules == (marker, literal)
    assert RecursiveGrammar.lexical_rule_root.rules == (marker, literal)
    assert FlatGrammar.trim_literals and not FlatGrammar.nested_payload
    assert RecursiveGrammar.nested_payload and not RecursiveGrammar.trim_literals

def test_rule_description():
    description = marker.ast()
    assert description["name"] == "Marker"
    assert [rule["name"] for rule in description["rules"]] == ["Symbol", "length", "Symbol", "repeat", "Symbol"]
