import unittest

from letlang.syntax.ast import LetStatement, Placeholder
from letlang.syntax.lexical import Lexer
from letlang.syntax.parser import ParseError, Parser, parse
from letlang.syntax.tokens import Location, Token, TokenType


class ParserTestCase(unittest.TestCase):

    def assert_let_statements(self, program, names):
        self.assertEqual(len(names), len(program.statements))
        for stmt, name in zip(program.statements, names):
            self.assertIsInstance(stmt, LetStatement)
            self.assertEqual(TokenType.LET, stmt.token.type)
            self.assertEqual(name, stmt.name.value)
            self.assertEqual(name, stmt.name.token.literal)
            self.assertEqual(Placeholder(), stmt.value)

    def test_parse(self):
        program = Parser(Lexer("""
        let x = 5;
        let y = 10;
        let foobar = 838383;""")).parse()

        self.assertEqual([], program.errors)
        self.assert_let_statements(program, ["x", "y", "foobar"])

    def test_parse_let(self):
        cases = {
            "let x = 5;": ["x"],
            "let x = 5; let y = 10;": ["x", "y"],
            "let s = add(1, 2) * -3;": ["s"],
            "let z = 1 + 2 * 3;\n// done": ["z"],
            "": [],
            "// only a comment": [],
        }
        for case, names in cases.items():
            program = parse(case)
            self.assertEqual([], program.errors, case)
            self.assert_let_statements(program, names)

    def test_statement_locations(self):
        program = parse("let x = 5;\n  let y = 10;")
        self.assertEqual(Location(2, 2), program.statements[1].token.location)
        self.assertEqual(Location(2, 6), program.statements[1].name.token.location)

    def test_missing_identifier(self):
        program = parse("let = 5;")
        self.assertEqual([], program.statements)
        self.assertEqual([ParseError("expected a 'Identifier' token but got 'Assign'", Location(1, 4))],
                         program.errors)

    def test_errors(self):
        cases = {
            "let x 5;": ParseError("expected a 'Assign' token but got 'Int'", Location(1, 6)),
            "let 5 = 5;": ParseError("expected a 'Identifier' token but got 'Int'", Location(1, 4)),
            "5;": ParseError("unexpected token: Int", Location(1, 0)),
            "return x;": ParseError("unexpected token: Return", Location(1, 0)),
            "let x = 5": ParseError("unexpected end of input"),
            "let": ParseError("expected a 'Identifier' token but got 'EOF'", Location(1, 3)),
        }
        for case, error in cases.items():
            program = parse(case)
            self.assertEqual([], program.statements, case)
            self.assertEqual([error], program.errors, case)

    def test_recovers_at_statement_boundary(self):
        program = parse("let x = 1; let = 2; let y = 3;")
        self.assert_let_statements(program, ["x", "y"])
        self.assertEqual([ParseError("expected a 'Identifier' token but got 'Assign'", Location(1, 15))],
                         program.errors)

        program = parse("x + y; let z = 3;")
        self.assert_let_statements(program, ["z"])
        self.assertEqual([ParseError("unexpected token: Identifier", Location(1, 0))], program.errors)

        program = parse("let let x = 1;")  # stops in front of the second let instead of swallowing it
        self.assert_let_statements(program, ["x"])
        self.assertEqual([ParseError("expected a 'Identifier' token but got 'Let'", Location(1, 4))],
                         program.errors)

        program = parse("let ; let y = 2;")  # the offending ";" is the boundary itself
        self.assert_let_statements(program, ["y"])
        self.assertEqual(1, len(program.errors))

    def test_collects_every_error(self):
        program = parse("1; 2; let a = 1; }")
        self.assert_let_statements(program, ["a"])
        self.assertEqual([Location(1, 0), Location(1, 3), Location(1, 17)],
                         [error.location for error in program.errors])

    def test_malformed_never_raises(self):
        cases = ["1.2.3 @@ ;;; let", "let x == 5;", "}{)(", "let 1.2.3 = 4;", "let\nlet\nlet ="]
        for case in cases:
            program = parse(case)
            self.assertTrue(program.errors, case)

    def test_token_source_without_eof(self):
        tokens = [Token(TokenType.LET, "let", Location(1, 0)), Token(TokenType.IDENTIFIER, "x", Location(1, 4))]
        program = Parser(tokens).parse()
        self.assertEqual([], program.statements)
        self.assertEqual([ParseError("unexpected end of input")], program.errors)

    def test_parse_error_str(self):
        self.assertEqual("At line=1, col=4: oops", str(ParseError("oops", Location(1, 4))))
        self.assertEqual("unexpected end of input", str(ParseError("unexpected end of input")))


if __name__ == '__main__':
    unittest.main()
