"""Error reporting for letlang. Two kinds of problems reach the user:

1. Parse errors: ParseError values collected on a Program. They are reported (with the offending source line) but
   never end the program on their own.
2. GenericExceptions: anything else that stops a session from running (ex: unreadable file). If another type of
   error makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a letlang error."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        super().__init__(msg.format(*exprs))
        self.template = msg
        self.exprs = exprs
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal


class ErrorHandler:
    """Context manager that prints letlang errors instead of letting Python tracebacks through."""
    ERROR = "red"

    def __init__(self, fatal=True, color=True):
        self.fatal = fatal
        self.color = color
        self.errors = 0  # number of errors reported so far

    def paint(self, text, color=None, attrs=("bold",)):
        return colored(text, color, attrs=list(attrs), no_color=not self.color)

    def message(self, error):
        """Formats error's message, bolding the expr snippets it refers to."""
        return error.template.format(*(self.paint(expr) for expr in error.exprs))

    def diagnose(self, line, start, end):
        """Returns line with line[start:end] highlighted and underlined by carets."""
        end = max(end, start + 1)

        diagnosis = "  " + line[:start]
        diagnosis += self.paint(line[start:end], ErrorHandler.ERROR)
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += self.paint("^" + "~" * (end - start - 1), ErrorHandler.ERROR)

        return diagnosis

    def report(self, path, source, error):
        """Prints a ParseError found in source (read from path), along with the offending line if error is located.
        Not fatal: parse errors never stop the caller.
        """
        self.errors += 1
        location = error.location

        if location is None:
            print(self.paint(f"{path}: ") + self.paint("error: ", ErrorHandler.ERROR) + error.message)
            return

        print(self.paint(f"{path}:{location.line}:{location.col}: ") + self.paint("error: ", ErrorHandler.ERROR)
              + error.message)

        lines = source.splitlines()
        if location.line <= len(lines):
            line = lines[location.line - 1]
            end = location.col + 1
            while end < len(line) and not line[end].isspace():
                end += 1
            print(self.diagnose(line, location.col, end))

    def throw(self, error):
        """Prints error, a GenericException, and exits if this handler is fatal."""
        self.errors += 1
        error_msg = ""
        if error.internal:
            error_msg += self.paint("[internal] ", ErrorHandler.ERROR)

        error_msg += self.paint("error: ", ErrorHandler.ERROR) + self.message(error)
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(self.diagnose(error.expr, error.start, error.end))

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
