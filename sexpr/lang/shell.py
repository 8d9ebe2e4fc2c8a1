"""Handles interactive/command-line mode for the sexpr interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """S-expression interpreter shell."""
    intro = "S-expression interpreter :: Python backend\nType 'help' for more information, 'exit' to quit."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess
        self.line_num = 0

    def cmdloop(self, intro=None):
        """Same loop as cmd.Cmd.cmdloop, except that the end of input is reported as None rather than the line 'EOF',
        so that a typed EOF is evaluated like any other identifier.
        """
        if self.use_rawinput:
            try:
                import readline  # noqa: F401 (line editing and history for input)
            except ImportError:
                pass

        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self.stdout.write(str(self.intro) + "\n")

        stop = None
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.end_of_input()
            else:
                line = self.precmd(line)
                stop = self.onecmd(line)
                stop = self.postcmd(stop, line)
        self.postloop()

    def read_line(self):
        """Returns the next line without its line ending, or None at the end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None

        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def default(self, line):
        """Executes arbitrary sexpr line."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            value = self.sess.run(line.strip(), self.line_num)
            print(value)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        if arg:
            self.sess.error_handler.warn("help takes no arguments, ignoring '{}'", arg, diagnosis=False)
        print("Welcome to the sexpr interpreter!\n\n"
              "Every line is a sequence of s-expressions; the value of the last one is printed.\n"
              "Integers can be combined with +, -, * and /, for example '(+ 1 (* 2 3))'.\n\n"
              "Try binding a value with '(let x 5)', then type 'x' or '(* x x)'. Bindings\n"
              "last until the interpreter exits.\n\n"
              "A line that is just 'help' or 'exit', or that starts with '?', is a shell command and\n"
              "is not evaluated: read identifiers named help or exit inside a form, e.g. '(+ help)'.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def end_of_input(self):
        """Exits interpreter."""
        print()
        return True

    def do_exit(self, arg):
        """Exits interpreter. 'exit' followed by anything else is an ordinary line."""
        if arg:
            return self.default(f"exit {arg}")
        return True
