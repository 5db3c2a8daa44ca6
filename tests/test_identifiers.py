"""Test identifier scanning and unrecognized input."""

from minilogo.lexer import Lexer
from minilogo.tokens import TokenType

from tests.conftest import assert_types


class TestUnknownIdentifiers:
    def test_unknown_identifier_is_illegal(self, lex):
        tokens = lex("jump 10")
        assert_types(tokens, [TokenType.ILLEGAL, TokenType.NUMBER])
        assert tokens[0].raw == "jump"
        assert "`jump` does not match any keyword" in tokens[0].value

    def test_error_recorded(self):
        lexer = Lexer("jump")
        list(lexer)
        assert len(lexer.errors) == 1
        assert lexer.errors[0].line == 1

    def test_keyword_prefix_is_not_keyword(self, lex):
        tokens = lex("forwards")
        assert_types(tokens, [TokenType.ILLEGAL])

    def test_identifier_with_digits(self, lex):
        tokens = lex("fd2")
        assert_types(tokens, [TokenType.ILLEGAL])
        assert tokens[0].raw == "fd2"

    def test_underscore_starts_identifier(self, lex):
        tokens = lex("_fd")
        assert_types(tokens, [TokenType.ILLEGAL])
        assert tokens[0].raw == "_fd"

    def test_underscore_does_not_continue_identifier(self, lex):
        tokens = lex("fd_")
        assert_types(tokens, [TokenType.FORWARD, TokenType.ILLEGAL])


class TestUnexpectedCharacters:
    def test_symbol(self):
        lexer = Lexer("fd 10 ; comment")
        tokens = list(lexer)
        assert tokens[2].type == TokenType.ILLEGAL
        assert tokens[2].value == "Unexpected character: ;"
        assert lexer.errors[0].message == "Unexpected character: ;"

    def test_every_character_accounted_for(self, lex):
        tokens = lex("@!$")
        assert_types(tokens, [TokenType.ILLEGAL] * 3)

    def test_error_line(self):
        lexer = Lexer("fd 1\n\n  ?")
        list(lexer)
        assert lexer.errors[0].line == 3
        assert lexer.errors[0].column == 3

    def test_scanning_continues_after_illegal(self, lex):
        tokens = lex("? fd 1")
        assert_types(tokens, [TokenType.ILLEGAL, TokenType.FORWARD, TokenType.NUMBER])
