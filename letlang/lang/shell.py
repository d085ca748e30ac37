"""Handles interactive/command-line mode for letlang. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """letlang shell. Each line is tokenized on its own and its tokens are printed, one per line."""
    intro = "letlang :: Python backend\nType '?' or 'help' for more information."
    prompt = ">> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess
        self._raw_line = ""  # line as typed, cmd.Cmd strips it before dispatching

    def onecmd(self, line):
        self._raw_line = line
        return super().onecmd(line)

    def default(self, line):
        """Prints every token of the line as typed, illegal ones included."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            for token in self.sess.tokens(self._raw_line):
                print(repr(token), file=self.stdout)

    def do_parse(self, arg):
        """parse <source>: parses source and prints the resulting program. Errors are reported, not fatal."""
        with self.sess.error_handler:
            program = self.sess.parse(arg)
            print(program.display(), file=self.stdout)

    def do_help(self, arg):
        """Prints a short intro rather than per-command docs."""
        print("Welcome to the letlang shell!\n\n"
              "Every line you type is split into tokens, which are printed back one per line \n"
              "along with their line:col location. Try typing 'let x = 5;'.\n\n"
              "To see how a line parses instead, prefix it with 'parse', as in \n"
              "'parse let x = 5;'. Type 'exit' or press Ctrl-D to leave.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits shell."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits shell."""
        return True
