"""Error handling for the loxite language. Only LoxErrors (and UsageErrors from the driver) should be encountered
during running: if another type of error makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Diagnostics render in a fixed format so that their output can be compared verbatim:

```
[line L] Error: <message>              ; LexError
[line L] Error at '<lexeme>': <message> ; ParseError (or "at end" on EOF)
[line L]: <message>                     ; LoxRuntimeError
```
"""

import sys

from termcolor import colored

from loxite.core.tokens import TokenKind


UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string"
EXPECTED_EXPRESSION = "Expected expression."
EXPECTED_RIGHT_PAREN = "Expected ')' after expression"
NUMBER_OPERANDS = "Operands must be numbers."
NUMBER_OR_STRING_OPERANDS = "Operands must be two numbers or two strings."

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70


class LoxError(Exception):
    """Base class of every diagnostic produced while lexing, parsing or evaluating."""
    exit_code = EX_DATAERR

    def __init__(self, line, message):
        super().__init__(message)
        self.line = line
        self.message = message

    def header(self):
        """Everything before the ': <message>' part of the rendered diagnostic."""
        return f"[line {self.line}] Error"

    def render(self):
        return f"{self.header()}: {self.message}"

    def __str__(self):
        return self.render()


class LexError(LoxError):
    """Unexpected character or unterminated string. Scanning continues after one of these."""


class ParseError(LoxError):
    """Unexpected or missing token. The first one aborts the parse."""

    def __init__(self, token, message):
        super().__init__(token.line, message)
        self.token = token

    def header(self):
        if self.token.kind is TokenKind.EOF:
            return f"[line {self.line}] Error at end"
        return f"[line {self.line}] Error at '{self.token.lexeme}'"


class LoxRuntimeError(LoxError):
    """Operands of the wrong runtime kind. Aborts evaluation of the current expression only."""
    exit_code = EX_SOFTWARE

    def __init__(self, token, message):
        super().__init__(token.line, message)
        self.token = token

    def header(self):
        return f"[line {self.line}]"


class UsageError(Exception):
    """Raised by the driver for problems outside of any lox source (e.g. unreadable script)."""
    exit_code = EX_USAGE


class ErrorHandler:
    """Context manager that reports lox diagnostics on stderr and remembers which kind of failure occurred, so that
    the driver can pick an exit code. If fatal, the first reported failure ends the process.
    """
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, color=True, stream=None):
        self.fatal = fatal
        self.color = color
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False

    @property
    def exit_code(self):
        if self.had_error:
            return EX_DATAERR
        if self.had_runtime_error:
            return EX_SOFTWARE
        return EX_OK

    def _stream(self):
        return self.stream if self.stream is not None else sys.stderr

    def _colored(self, text, color=None, attrs=None):
        stream = self._stream()
        if self.color and hasattr(stream, "isatty") and stream.isatty():
            return colored(text, color if color else ErrorHandler.ERROR, attrs=attrs)
        return text

    def format(self, error):
        """Returns the rendered diagnostic, with its header highlighted when writing to a terminal."""
        return self._colored(error.header(), attrs=["bold"]) + ": " + error.message

    def report(self, error):
        """Prints error and records its kind. Does not stop anything."""
        if isinstance(error, LoxRuntimeError):
            self.had_runtime_error = True
        else:
            self.had_error = True

        print(self.format(error), file=self._stream())

    def warn(self, msg):
        """Prints a warning that does not affect the exit code."""
        print(self._colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + msg, file=self._stream())

    def abort(self):
        """Exits with the current exit code if this handler is fatal and something has been reported."""
        if self.fatal and self.exit_code != EX_OK:
            sys.exit(self.exit_code)

    def throw(self, error):
        """Reports error, then aborts if fatal."""
        self.report(error)
        self.abort()

    def _throw_plain(self, msg, exit_code, internal=False):
        """Reports a failure that is not a lox diagnostic (usage problems, interrupts, internal errors)."""
        error_msg = ""
        if internal:
            error_msg += self._colored("[internal] ", attrs=["bold"])
        error_msg += self._colored("error: ", attrs=["bold"]) + msg
        print(error_msg, file=self._stream())

        if self.fatal:
            sys.exit(exit_code)

    def reset(self):
        """Forgets previous failures. Called between interactive lines."""
        self.had_error = False
        self.had_runtime_error = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False
        if issubclass(exc_type, SystemExit):
            return False

        if issubclass(exc_type, LoxError):
            self.throw(exc_val)
        elif issubclass(exc_type, UsageError):
            self._throw_plain(str(exc_val), exc_val.exit_code)
        elif issubclass(exc_type, KeyboardInterrupt):
            self._throw_plain("keyboard interrupt", EX_SOFTWARE)
        elif issubclass(exc_type, RecursionError):
            self._throw_plain("expression nested too deeply, maximum recursion depth exceeded", EX_SOFTWARE)
        else:
            self._throw_plain(f"unknown error: '{exc_type.__name__}: {exc_val}'", EX_SOFTWARE, internal=True)
        return True
