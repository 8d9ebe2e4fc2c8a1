import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from sexpr.lang.error import ErrorHandler
from sexpr.lang.session import Session
from sexpr.lang.shell import Shell
from sexpr.main import main


def run_shell(text):
    out = io.StringIO()
    shell = Shell(Session(ErrorHandler(fatal=False, color=False)), stdin=io.StringIO(text), stdout=out)
    shell.use_rawinput = False
    shell.intro = None
    with redirect_stdout(out):
        shell.cmdloop()
    return out.getvalue()


class ShellTestCase(unittest.TestCase):

    def test_results_are_printed(self):
        output = run_shell("(let x 5)\n(+ x 1)\n(* x 2)\n1.5\ntrue\nexit\n")
        self.assertEqual("> ()\n> 6\n> 10\n> 1.5\n> true\n> ", output)

    def test_session_survives_errors(self):
        output = run_shell("foo\n(+ 1 2)\n")
        self.assertIn("> error: unknown identifier 'foo'\n  foo\n  ^~~\n", output)
        self.assertIn("> 3\n", output)

    def test_exit(self):
        output = run_shell("(+ 1 1)\nexit\n(+ 2 2)\n")
        self.assertIn("> 2\n", output)
        self.assertNotIn("4", output)

    def test_exit_with_arguments_is_evaluated(self):
        output = run_shell("exit now\n(+ 2 2)\n")
        self.assertIn("unknown identifier 'exit'", output)
        self.assertIn("> 4\n", output)

    def test_end_of_input(self):
        self.assertEqual("> 7\n> \n", run_shell("7\n"))

    def test_blank_lines_are_ignored(self):
        self.assertEqual("> 1\n> > \n", run_shell("1\n\n"))

    def test_help(self):
        self.assertIn("Welcome to the sexpr interpreter!", run_shell("help\n"))

    def test_help_lists_shell_commands(self):
        output = run_shell("help\n")
        self.assertIn("'help' or 'exit'", output)
        self.assertIn("starts with '?'", output)

    def test_eof_is_an_identifier(self):
        self.assertEqual("> ()\n> 1\n> 4\n> \n", run_shell("(let EOF 1)\nEOF\n(+ 2 2)\n"))

    def test_unbound_eof(self):
        output = run_shell("EOF\n(+ 2 2)\n")
        self.assertIn("unknown identifier 'EOF'", output)
        self.assertIn("> 4\n", output)


class MainTestCase(unittest.TestCase):

    def run_main(self, argv, text):
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO(text)), redirect_stdout(out):
            main(argv)
        return out.getvalue()

    def test_end_of_input_at_prompt(self):
        self.assertEqual("> 3\n> \n", self.run_main(["-q", "--no-color"], "(+ 1 2)\n"))

    def test_eof_line(self):
        output = self.run_main(["-q", "--no-color"], "(let EOF 2)\n(* EOF EOF)\nEOF\n")
        self.assertIn("> 4\n", output)
        self.assertIn("> 2\n", output)

    def test_main(self):
        output = self.run_main(["--quiet", "--no-color"], "(let x 4)\n(* x x)\nexit\n")
        self.assertIn("16", output)
        self.assertNotIn("S-expression interpreter", output)

    def test_banner(self):
        self.assertIn("S-expression interpreter", self.run_main(["--no-color"], "exit\n"))

    def test_fatal(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main(["--fatal", "-q", "--no-color"], "(/ 1 0)\n(+ 1 2)\n")
        self.assertEqual(1, context.exception.code)


if __name__ == '__main__':
    unittest.main()
