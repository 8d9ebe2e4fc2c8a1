"""Error handling for the sexpr language. Only GenericExceptions should be encountered while a line is processed: if
another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Every error is fatal to the line being processed. Whether the session survives is decided by ErrorHandler.fatal.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a sexpr error. exprs are the snippets substituted
    into msg; exprs[0] should be the offending text, found at offset in the current source line (None if unknown).
    """

    def __init__(self, msg, exprs=None, offset=None, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.template = msg
        self.exprs = [str(expr) for expr in exprs]
        self.expr = self.exprs[0]  # exprs[0] should be the offending expr that caused the error

        self.offset = offset
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.format())

    def format(self, color=False):
        """Returns the message with exprs substituted in, bolded if color."""
        exprs = (colored(expr, attrs=["bold"]) if color else expr for expr in self.exprs)
        return self.template.format(*exprs)

    @property
    def msg(self):
        return self.format()


class LexError(GenericException):
    """Unrecognized character sequence in the source line."""


class ParseError(GenericException):
    """Structurally invalid input: unexpected token, malformed literal, unclosed form or malformed let."""


class EvalError(GenericException):
    """Failure while evaluating a well-formed expression."""


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report sexpr errors/warnings instead."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, color=True):
        self.fatal = fatal
        self.color = color
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called before a line is parsed."""
        self.traceback.pop(path, None)  # most recently registered path goes last
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after a line ran successfully."""
        self.traceback[path] = (None, None)

    def _colored(self, text, color=None, attrs=None):
        if not self.color:
            return text
        return colored(text, color, attrs=attrs)

    def _current_line(self):
        """Most recently registered source line, or None."""
        for line, __ in reversed(list(self.traceback.values())):
            if line is not None:
                return line
        return None

    def diagnose(self, error, line, warning=False):
        """Returns line with the offending part of error highlighted and underlined, or None if error cannot be located
        in line.
        """
        start = error.offset
        if start is None:
            start = line.find(error.expr) if error.expr else -1
        if start < 0 or start > len(line):
            return None

        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        end = max(start + len(error.expr), start + 1)

        diagnosis = "  " + line[:start]
        diagnosis += self._colored(line[start:end], color, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += self._colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _report(self, error, label, color, warning=False):
        line = self._current_line()

        error_msg = ""
        if error.internal:
            error_msg += self._colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += self._colored(f"{label}: ", color, attrs=["bold"]) + error.format(self.color)
        print(error_msg)

        if not error.internal and error.diagnosis and line is not None:
            diagnosis = self.diagnose(error, line, warning)
            if diagnosis:
                print(diagnosis)

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args. Never fatal."""
        self._report(GenericException(*args, **kwargs), "warning", ErrorHandler.WARNING, warning=True)

    def throw(self, error):
        """Reports error against the registered source line, then exits if fatal. error must be a GenericException."""
        self._report(error, "error", ErrorHandler.ERROR)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # error handled, forget offending lines

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            print()
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("expression nested too deeply, maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            reason = f"{exc_type.__name__}: {exc_val}".replace("{", "{{").replace("}", "}}")
            self.throw(GenericException(f"unknown error: '{reason}'", internal=True))
            do_exit = True

        return not do_exit
