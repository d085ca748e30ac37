"""letlang front end: lexer and parser for a small interpreted language.

Basic program flow:
    1. Lexer: scans source text into a lazy stream of tokens, each tagged with the line:col of its first character
        - For the token grammar, see letlang/syntax/lexical.py
    2. Parser: pulls tokens one at a time (single token of lookahead) and builds a Program
        - For the statement grammar, see letlang/syntax/ast.py
        - Parse errors are collected on the Program rather than raised
    3. Evaluation: not implemented (yet), so the shell just prints tokens and syntax trees

"""

__version__ = "0.1.0"
