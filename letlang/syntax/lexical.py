"""Lexical analysis for letlang. Turns source text into a lazy stream of positioned tokens.

Loosely, the token grammar is

```
<token>      ::= <comparison> | <symbol> | <number> | <word>
<comparison> ::= ("=" | "!" | ">" | "<") ["="]      ; longest match: "==" is one token, never two "="
<symbol>     ::= "," | ";" | "+" | "-" | "*" | "/" | "{" | "}" | "(" | ")"
<number>     ::= (<digit> | ".")+                   ; at most one ".": Int without it, Float with it
<word>       ::= (<alnum> | "_")+                   ; keyword if in tokens.KEYWORDS, otherwise Identifier

<comment>    ::= "//" <char>*                       ; runs to end of line, never emitted
```

Anything that doesn't fit is emitted as an Illegal token rather than raised: the lexer never stops on bad input.
"""

from letlang.syntax.tokens import COMPARISONS, SYMBOLS, Location, Token, TokenType, lookup_identifier


class Lexer:
    """Single pass, forward only token stream over source. Iterating yields tokens up to and including exactly one EOF
    token; afterwards the lexer is exhausted for good (construct a new Lexer to re-scan).
    """
    NUL = "\0"                     # current character once the source is used up
    WHITESPACE = " \t\n\r\x0c"     # ASCII whitespace

    def __init__(self, source):
        self.source = source
        self.length = len(source)
        self.pos = 0

        self.line = 1  # line/col of the current character
        self.col = 0

        self.complete = False  # set once the EOF token has been produced

    @property
    def curr(self):
        return self.source[self.pos] if self.pos < self.length else Lexer.NUL

    def peek_char(self):
        """Character after curr, without consuming anything."""
        return self.source[self.pos + 1] if self.pos + 1 < self.length else Lexer.NUL

    def read_char(self):
        """Consumes curr, keeping line and col pointed at the new current character."""
        if self.pos >= self.length:
            return
        if self.source[self.pos] == "\n":
            self.line += 1
            self.col = 0
        else:
            self.col += 1
        self.pos += 1

    def at_end(self):
        return self.pos >= self.length

    def location(self):
        return Location(self.line, self.col)

    def skip_whitespace(self):
        while not self.at_end() and self.curr in Lexer.WHITESPACE:
            self.read_char()

    def skip_to_next_line(self):
        while not self.at_end() and self.curr != "\n":
            self.read_char()

    def next_token(self):
        """Scans and returns the next token. Location is taken before the literal is consumed, so it always points at
        the token's first character.
        """
        while True:
            self.skip_whitespace()
            if self.curr == "/" and self.peek_char() == "/":
                self.skip_to_next_line()
            else:
                break

        start = self.location()

        if self.at_end():
            self.complete = True
            return Token(TokenType.EOF, "", start)

        char = self.curr

        if char in COMPARISONS:
            single, double = COMPARISONS[char]
            self.read_char()
            if self.curr == "=":
                self.read_char()
                return Token(double, char + "=", start)
            return Token(single, char, start)

        if char in SYMBOLS:
            self.read_char()
            return Token(SYMBOLS[char], char, start)

        if Lexer.is_digit(char) or char == ".":
            return self.read_number(start)
        return self.read_identifier(start)

    def read_number(self, start):
        """Reads digits and at most one "." into an Int or Float. A second "." is consumed and turns everything read so
        far into an Illegal token; scanning then resumes right after it.
        """
        begin = self.pos
        has_point = False

        while Lexer.is_digit(self.curr) or self.curr == ".":
            if self.curr == ".":
                if has_point:
                    self.read_char()
                    return Token(TokenType.ILLEGAL, self.source[begin:self.pos], start)
                has_point = True
            self.read_char()

        literal = self.source[begin:self.pos]
        return Token(TokenType.FLOAT if has_point else TokenType.INT, literal, start)

    def read_identifier(self, start):
        """Reads an identifier or keyword. A character that can't start any token becomes a one character Illegal
        token.
        """
        begin = self.pos
        while not self.at_end() and Lexer.is_identifier_char(self.curr):
            self.read_char()

        if self.pos == begin:
            char = self.curr
            self.read_char()
            return Token(TokenType.ILLEGAL, char, start)

        literal = self.source[begin:self.pos]
        return Token(lookup_identifier(literal), literal, start)

    @staticmethod
    def is_digit(char):
        return "0" <= char <= "9"

    @staticmethod
    def is_identifier_char(char):
        return char.isalnum() or char == "_"

    def __iter__(self):
        return self

    def __next__(self):
        if self.complete:
            raise StopIteration
        return self.next_token()


def tokenize(source):
    """Returns every token in source, EOF token included."""
    return list(Lexer(source))
