"""Session control for the sexpr language: ties one Interpreter, and so one environment, to a sequence of source
lines.
"""

from types import MappingProxyType

from sexpr.runtime.interpreter import Interpreter
from sexpr.syntax.parser import Parser


class Session:
    """Governs a sexpr session. let bindings made by one line are visible to every later line."""
    SH_FILE = "<stdin>"  # command-line interpreter filename

    def __init__(self, error_handler, path=SH_FILE):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path  # used for error messages
        self.interpreter = Interpreter()

    @property
    def environment(self):
        """Read-only view of the current bindings."""
        return MappingProxyType(self.interpreter.environment)

    def run(self, line, line_num):
        """Parses and evaluates line, returning the resulting Value. Raises any errors that are encountered, leaving
        line registered with the error handler so that it can be diagnosed.
        """
        self.error_handler.register_line(self.path, line, line_num)  # in case error is raised

        exprs = Parser(line).parse()
        value = self.interpreter.evaluate(exprs)

        self.error_handler.remove_line(self.path)  # error was not raised
        return value
