"""Tokens, lexer, syntax tree and parser. Nothing in here prints or exits: see letlang/lang for that."""
