"""Session control for letlang: tokenizes/parses either a source file or lines typed at the shell, and reports parse
errors through the session's ErrorHandler.
"""

from letlang.lang.error import GenericException
from letlang.syntax.lexical import tokenize
from letlang.syntax.parser import parse


class Session:
    """Governs a letlang session. Nothing is carried over between sources: every call gets a fresh lexer/parser."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.source = ""          # contents of path (empty in command-line mode)

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    self.source = file.read()
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    def tokens(self, source=None):
        """Returns the tokens of source (defaults to this session's file), EOF token included."""
        return tokenize(self.source if source is None else source)

    def parse(self, source=None):
        """Parses source (defaults to this session's file) and reports every parse error. Returns the Program, which
        still holds whatever statements did parse.
        """
        if source is None:
            source = self.source

        program = parse(source)
        for error in program.errors:
            self.error_handler.report(self.path, source, error)
        return program
