"""Session control for loxite. Runs the lexer -> parser -> evaluator pipeline over a source text, either a whole
script (file interpretation mode) or one line at a time (command-line mode).

Nothing is carried from one run to the next except the error flags on the session's ErrorHandler, which the driver
turns into an exit code.
"""

import logging
import sys

from loxite.core.evaluation import Interpreter, stringify
from loxite.core.lexical import scan
from loxite.core.printer import print_tree
from loxite.core.syntax import Parser
from loxite.lang.error import UsageError


logger = logging.getLogger("loxite.lang.session")

# every stage recurses once (or a few frames) per nesting level
RECURSION_LIMIT = 10000


class Session:
    """Governs a loxite session: reads the source (if any), runs it, and collects displayable results."""
    SH_FILE = "<in>"  # command-line interpreter filename

    EVALUATE = "evaluate"
    TOKENS = "tokens"
    AST = "ast"
    MODES = (EVALUATE, TOKENS, AST)

    def __init__(self, error_handler, path=SH_FILE, cmd_line=True, mode=EVALUATE):
        assert mode in Session.MODES, f"unknown session mode '{mode}'"

        self.error_handler = error_handler
        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.mode = mode          # what run produces: values, token dumps or trees

        self.interpreter = Interpreter()
        self.results = []  # display strings produced by run, oldest first
        self.source = ""

        if self.cmd_line:
            self.error_handler.fatal = False

        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    self.source = file.read()
            except OSError as exc:
                raise UsageError(f"'{path}' could not be opened: {exc.strerror}")

        elif not cmd_line:
            raise UsageError(f"'{Session.SH_FILE}' is a reserved filename")

    def run(self, source=None):
        """Runs source (defaults to the file's contents) through the pipeline and appends its display form to
        self.results. Diagnostics are handed to the error handler; returns whether the run succeeded.
        """
        if source is None:
            source = self.source
        logger.debug("running %d characters from %s", len(source), self.path)

        tokens, errors = scan(source)
        if errors:
            for error in errors:
                self.error_handler.report(error)
            self.error_handler.abort()
            return False

        if self.mode == Session.TOKENS:
            self.results.extend(str(token) for token in tokens)
            return True

        with self.error_handler:
            parser = Parser(tokens)
            expr = parser.parse()
            if not parser.is_at_end():
                self.error_handler.warn(f"ignoring input after the expression, starting at '{parser.peek().lexeme}'")

            if self.mode == Session.AST:
                self.results.append(print_tree(expr))
            else:
                self.results.append(stringify(self.interpreter.evaluate(expr)))
            return True
        return False

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)

    def reset(self):
        """Clears results and error state before the next command-line input."""
        self.results = []
        self.error_handler.reset()
