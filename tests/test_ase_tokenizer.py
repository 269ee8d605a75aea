import pytest

from marica.ase_tokenizer import Token, Tokenizer, TokenType


def test_keys_and_values():
    tokens = Tokenizer("*MESH_NUMVERTEX 8\n").tokens
    assert tokens == (Token(TokenType.KEY, "MESH_NUMVERTEX"), Token(TokenType.VALUE, "8"))


def test_string_keeps_separators_and_braces():
    tokens = Tokenizer('*NODE_NAME "Box 01: a{b}*"\n').tokens
    assert tokens[1] == Token(TokenType.STRING, "Box 01: a{b}*")


def test_empty_string_token():
    tokens = Tokenizer('"" x\n').tokens
    assert tokens == (Token(TokenType.STRING, ""), Token(TokenType.VALUE, "x"))


def test_braces_split_adjacent_tokens():
    tokens = Tokenizer("*A{1}").tokens
    assert tokens == (
        Token(TokenType.KEY, "A"),
        Token(TokenType.BLOCK_START),
        Token(TokenType.VALUE, "1"),
        Token(TokenType.BLOCK_END),
    )


def test_colon_is_separator():
    tokens = Tokenizer("0: A:1\n").tokens
    assert [t.data for t in tokens] == ["0", "A", "1"]
    assert all(t.type is TokenType.VALUE for t in tokens)


def test_unterminated_last_token_is_dropped():
    assert Tokenizer("*A 1").tokens == (Token(TokenType.KEY, "A"),)


def test_carriage_return_is_not_separator():
    assert Tokenizer("7\r\n").tokens == (Token(TokenType.VALUE, "7\r"),)


def test_navigation_stops_on_last():
    tokenizer = Tokenizer("a b c\n")
    assert tokenizer.current().data == "a"
    assert not tokenizer.is_last()
    assert tokenizer.next_token().data == "b"
    assert tokenizer.next_token().data == "c"
    assert tokenizer.is_last()
    assert tokenizer.next_token().data == "c"


def test_empty_tokenizer():
    tokenizer = Tokenizer("")
    assert tokenizer.is_last()
    assert len(tokenizer) == 0
    with pytest.raises(IndexError):
        tokenizer.current()


def test_peek():
    tokenizer = Tokenizer("a b\n")
    assert tokenizer.peek(1) == Token(TokenType.VALUE, "b")
    assert tokenizer.peek(5) == Token()
    assert Token() == Token(TokenType.NONE, "")


def test_mark_skip_is_passed_over():
    tokenizer = Tokenizer("a b c\n")
    tokenizer.mark_skip(1)
    assert tokenizer.tokens[1].type is TokenType.SKIP
    assert tokenizer.peek(1).data == "c"
    assert tokenizer.next_token() == Token(TokenType.VALUE, "c")
    assert tokenizer.is_last()


def test_trailing_skip_makes_last():
    tokenizer = Tokenizer("a b\n")
    tokenizer.mark_skip(1)
    assert tokenizer.is_last()


def test_mark_skip_past_end():
    tokenizer = Tokenizer("a\n")
    with pytest.raises(IndexError):
        tokenizer.mark_skip(3)


def test_tokenize_appends_and_rewinds():
    tokenizer = Tokenizer("a\n")
    tokenizer.tokenize("b\n")
    assert len(tokenizer) == 2
    assert tokenizer.current().data == "a"
    assert tokenizer.next_token().data == "b"