"""Test brackets, command keywords, lexemes and line tracking."""

from minilogo.lexer import Lexer
from minilogo.tokens import Token, TokenType

from tests.conftest import assert_types


class TestBrackets:
    def test_bracket_pair(self, lex):
        tokens = lex("[]")
        assert_types(tokens, [TokenType.LBRACKET, TokenType.RBRACKET])

    def test_brackets_need_no_spaces(self, lex):
        tokens = lex("[fd 1]")
        assert_types(
            tokens,
            [TokenType.LBRACKET, TokenType.FORWARD, TokenType.NUMBER, TokenType.RBRACKET],
        )


class TestCommands:
    def test_left_then_number(self, lex):
        tokens = lex("left 10")
        assert tokens == [
            Token(TokenType.TURN_LEFT, None, "left", 1, 1),
            Token(TokenType.NUMBER, 10.0, "10", 1, 6),
        ]

    def test_short_forms(self, lex):
        tokens = lex("fd bk rt lt")
        assert_types(
            tokens,
            [TokenType.FORWARD, TokenType.BACKWARD, TokenType.TURN_RIGHT, TokenType.TURN_LEFT],
        )

    def test_long_forms(self, lex):
        tokens = lex("forward back right left color repeat")
        assert_types(
            tokens,
            [
                TokenType.FORWARD,
                TokenType.BACKWARD,
                TokenType.TURN_RIGHT,
                TokenType.TURN_LEFT,
                TokenType.SET_COLOR,
                TokenType.REPEAT,
            ],
        )

    def test_case_insensitive(self, lex):
        tokens = lex("RT 10 left FoRwArD")
        commands = [t.type for t in tokens if t.type != TokenType.NUMBER]
        assert commands == [TokenType.TURN_RIGHT, TokenType.TURN_LEFT, TokenType.FORWARD]

    def test_raw_keeps_source_spelling(self, lex):
        tokens = lex("FoRwArD")
        assert tokens[0].raw == "FoRwArD"


class TestLexemes:
    def test_turn_left_lexeme(self, lex):
        assert lex("left")[0].lexeme == "LT"

    def test_command_lexemes(self, lex):
        tokens = lex("repeat color forward back right left [ ]")
        assert [t.lexeme for t in tokens] == ["REPEAT", "COLOR", "FD", "BK", "RT", "LT", "[", "]"]

    def test_number_lexeme_is_source_text(self, lex):
        assert lex("0.30")[0].lexeme == "0.30"


class TestWhitespaceAndLines:
    def test_whitespace_only(self, lex):
        assert lex(" \t\r\n ") == []

    def test_empty_source(self, lex):
        assert lex("") == []

    def test_line_numbers(self, lex):
        tokens = lex("fd 1\n\nrt 90\r\n  bk 2")
        assert [t.line for t in tokens] == [1, 1, 3, 3, 4, 4]

    def test_columns(self, lex):
        tokens = lex("fd 1\n  rt 90")
        assert [t.column for t in tokens] == [1, 4, 3, 6]


class TestLaziness:
    def test_tokens_produced_one_at_a_time(self):
        lexer = Lexer("fd 1 rt 2")
        first = next(lexer)
        assert first.type == TokenType.FORWARD
        assert lexer._pos == 2

    def test_not_restartable(self):
        lexer = Lexer("fd 1")
        assert len(list(lexer)) == 2
        assert list(lexer) == []
