"""Token kinds and token values produced by the lexer.

Token kinds are a closed set. Each kind's value is its display name, which is what error messages and the shell show
(ex: `TokenType.EQUAL_EQUAL` is displayed as `EqualEqual`).
"""

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Every category of token the lexer can produce."""
    ILLEGAL = "Illegal"
    EOF = "EOF"

    # identifiers + literals
    IDENTIFIER = "Identifier"
    INT = "Int"
    FLOAT = "Float"

    # operators
    ASSIGN = "Assign"
    PLUS = "Plus"
    SUBTRACT = "Subtract"
    DIVIDE = "Divide"
    MULTIPLY = "Multiply"
    GREATER = "Greater"
    GREATER_EQUAL = "GreaterEqual"
    LESS = "Less"
    LESS_EQUAL = "LessEqual"
    NOT = "Not"
    EQUAL_EQUAL = "EqualEqual"
    NOT_EQUAL = "NotEqual"

    # delimiters
    COMMA = "Comma"
    SEMICOLON = "SemiColon"

    # brackets
    LPAREN = "LParen"
    RPAREN = "RParen"
    LBRACE = "LBrace"
    RBRACE = "RBrace"

    # keywords
    FUNCTION = "Function"
    LET = "Let"
    TRUE = "True"
    FALSE = "False"
    IF = "If"
    ELSE = "Else"
    RETURN = "Return"

    def __str__(self):
        return self.value


KEYWORDS = {
    "let": TokenType.LET,
    "fn": TokenType.FUNCTION,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

# operators that become a different operator when followed by "="
COMPARISONS = {
    "=": (TokenType.ASSIGN, TokenType.EQUAL_EQUAL),
    "!": (TokenType.NOT, TokenType.NOT_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
}

SYMBOLS = {
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "+": TokenType.PLUS,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def lookup_identifier(text):
    """Returns the keyword kind of text, or TokenType.IDENTIFIER if text isn't a keyword."""
    return KEYWORDS.get(text, TokenType.IDENTIFIER)


@dataclass(frozen=True)
class Location:
    """Position of a token's first character: 1-based line, 0-based column."""
    line: int
    col: int

    def __str__(self):
        return f"{self.line}:{self.col}"


@dataclass(frozen=True)
class Token:
    type: TokenType
    literal: str
    location: Location

    @property
    def line(self):
        return self.location.line

    @property
    def col(self):
        return self.location.col

    def __repr__(self):
        return f"Token({self.type}, {self.literal!r}, {self.location})"
