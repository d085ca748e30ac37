"""Statement level parser for letlang. Consumes a token stream with one token of lookahead and never backtracks.

Parse errors don't abort the parse: each failing statement leaves a ParseError on the Program, the parser skips ahead
to the next statement boundary and carries on. A Program therefore always holds every statement that did parse.
"""

from letlang.syntax.ast import Identifier, LetStatement, Placeholder, Program
from letlang.syntax.lexical import Lexer
from letlang.syntax.tokens import TokenType


class ParseError(Exception):
    """Recoverable syntax error. location is None only when the input ran out with no token to blame."""

    def __init__(self, message, location=None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location is None:
            return self.message
        return f"At line={self.location.line}, col={self.location.col}: {self.message}"

    def __eq__(self, other):
        return isinstance(other, ParseError) and (self.message, self.location) == (other.message, other.location)

    def __hash__(self):
        return hash((self.message, self.location))


class Parser:
    """Parser over any iterable of tokens (normally a Lexer). Holds one buffered token: peek looks at it, advance
    commits to it.
    """
    STATEMENT_STARTS = (TokenType.LET,)  # tokens that may begin a statement, used to resynchronize after errors

    def __init__(self, tokens):
        self.tokens = iter(tokens)
        self._buffer = None  # lookahead token, None if not yet pulled

    def peek(self):
        """Returns the next token without consuming it. Raises ParseError if the token source has run dry."""
        if self._buffer is None:
            try:
                self._buffer = next(self.tokens)
            except StopIteration:
                raise ParseError("unexpected end of input") from None
        return self._buffer

    def advance(self):
        """Consumes and returns the next token."""
        token = self.peek()
        self._buffer = None
        return token

    def check(self, *types):
        return self.peek().type in types

    def expect(self, type):
        """Consumes the next token if it's of the given type, otherwise raises ParseError (leaving it unconsumed)."""
        token = self.peek()
        if token.type is not type:
            raise ParseError(f"expected a '{type}' token but got '{token.type}'", token.location)
        return self.advance()

    def at_end(self):
        """Whether the EOF token is next, or the token source has nothing left at all."""
        try:
            return self.check(TokenType.EOF)
        except ParseError:
            return True

    def parse(self):
        """Drains the token source into a Program."""
        program = Program()

        while not self.at_end():
            try:
                program.statements.append(self.parse_statement())
            except ParseError as error:
                program.errors.append(error)
                self.synchronize()

        return program

    def parse_statement(self):
        token = self.peek()
        if token.type is TokenType.LET:
            return self.parse_let_statement()
        raise ParseError(f"unexpected token: {token.type}", token.location)

    def parse_let_statement(self):
        """let <identifier> = ... ;"""
        start = self.expect(TokenType.LET)
        name = self.expect(TokenType.IDENTIFIER)
        self.expect(TokenType.ASSIGN)

        # value expressions aren't parsed yet: skip through the terminating semicolon
        while not self.check(TokenType.SEMICOLON):
            if self.check(TokenType.EOF):
                raise ParseError("unexpected end of input")
            self.advance()
        self.advance()

        return LetStatement(start, Identifier(name, name.literal), Placeholder())

    def synchronize(self):
        """Discards tokens through the next semicolon, stopping early in front of a statement start or EOF."""
        while not self.at_end() and not self.check(*Parser.STATEMENT_STARTS):
            if self.advance().type is TokenType.SEMICOLON:
                return


def parse(source):
    """Tokenizes and parses source."""
    return Parser(Lexer(source)).parse()
