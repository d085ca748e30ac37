"""Syntax tree for letlang programs.

A Program is a list of statements plus the parse errors met along the way. The only statement today is the let
statement:

```
<program>       ::= <statement>*
<let_statement> ::= "let" <identifier> "=" <expression> ";"
```

Expressions are modeled as separate node types from the start (literals, identifiers, prefix/infix operations and
calls) so an expression parser can fill in LetStatement.value without changing the statement shape. Until then every
value is a Placeholder.
"""

from dataclasses import dataclass, field


class Node:
    """Superclass of every syntax tree node."""

    def display(self, indents=0):
        """Single line display of this node at the given indentation. Overridden by nodes with children."""
        return f"{'    ' * indents}{type(self).__name__}({self})"


class Statement(Node):
    """A top-level syntactic unit."""


class Expression(Node):
    """Anything that can appear as a value."""


@dataclass(frozen=True)
class Placeholder(Expression):
    """Stands in for an expression that was skipped rather than parsed."""

    def __str__(self):
        return "..."


@dataclass(frozen=True)
class Identifier(Expression):
    token: object
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    token: object
    value: int

    def __str__(self):
        return self.token.literal


@dataclass(frozen=True)
class FloatLiteral(Expression):
    token: object
    value: float

    def __str__(self):
        return self.token.literal


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    token: object
    value: bool

    def __str__(self):
        return self.token.literal


@dataclass(frozen=True)
class PrefixExpression(Expression):
    token: object  # the operator token, ex: "!" or "-"
    right: Expression

    def __str__(self):
        return f"({self.token.literal}{self.right})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    token: object  # the operator token
    left: Expression
    right: Expression

    def __str__(self):
        return f"({self.left} {self.token.literal} {self.right})"


@dataclass(frozen=True)
class CallExpression(Expression):
    token: object  # the "(" token
    function: Expression
    arguments: tuple = ()

    def __str__(self):
        return f"{self.function}({', '.join(str(arg) for arg in self.arguments)})"


@dataclass(frozen=True)
class LetStatement(Statement):
    token: object  # the "let" token
    name: Identifier
    value: Expression = Placeholder()

    def __str__(self):
        return f"{self.token.literal} {self.name} = {self.value};"


@dataclass
class Program(Node):
    statements: list = field(default_factory=list)
    errors: list = field(default_factory=list)

    @property
    def ok(self):
        return not self.errors

    def display(self, indents=0):
        """Recursively displays the program with readable format.

        Format:
        Program(statements=[
            LetStatement(let x = ...;),
            ...
        ], errors=[
            At line=1, col=4: ...,
        ])
        """
        pad = "    " * indents
        result = f"{pad}Program(statements=["
        for stmt in self.statements:
            result += "\n" + stmt.display(indents + 1) + ","
        if self.statements:
            result = result[:-1] + f"\n{pad}"
        result += "], errors=["
        for error in self.errors:
            result += f"\n{pad}    {error},"
        if self.errors:
            result = result[:-1] + f"\n{pad}"
        return result + "])"

    def __str__(self):
        return "\n".join(str(stmt) for stmt in self.statements)
