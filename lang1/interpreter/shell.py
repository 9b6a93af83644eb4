"""Interactive read-eval-print loop for lang1. Uses cmd as backend."""

import cmd
import logging

from termcolor import colored

from lang1 import config
from lang1.errors import Lang1Error
from lang1.interpreter import Interpreter
from lang1.printer import format_value

logger = logging.getLogger(__name__)


class Shell(cmd.Cmd):
    """One line in, one expression evaluated, one result out."""
    ERROR = "red"
    intro = None

    def __init__(self, interp=None, prompt_template=None, color=None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp if interp is not None else Interpreter()
        self.prompt_template = prompt_template if prompt_template is not None else config.get_prompt_template()
        self.color = color if color is not None else config.use_color()
        self.line_count = 0
        self.prompt = self._format_prompt()

    def _format_prompt(self):
        return self.prompt_template.format(n=self.line_count)

    def _write(self, text):
        self.stdout.write(text + "\n")

    def report(self, kind, message, internal=False):
        """Prints an error line; the session carries on with the next line."""
        label = "[internal] error:" if internal else "error:"
        if self.color:
            label = colored(label, Shell.ERROR, attrs=["bold"])
        self._write(f"{label} {kind}: {message}")

    def read_line(self):
        """One line of input, or None at end of stream."""
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

    def cmdloop(self, intro=None):
        """Reads lines until the stream ends.

        Unlike cmd.Cmd, a typed line reading EOF is an expression like any
        other; only the end of the stream calls do_EOF.
        """
        if self.use_rawinput:
            try:
                import readline  # noqa: F401  line editing for input()
            except ImportError:
                pass
        if intro is not None:
            self.intro = intro
        if self.intro:
            self._write(str(self.intro))
        self.preloop()
        stop = None
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.do_EOF("")
                continue
            line = self.precmd(line)
            stop = self.onecmd(line)
            stop = self.postcmd(stop, line)
        self.postloop()

    def onecmd(self, line):
        """Every line is an expression; there are no shell commands."""
        if not line.strip():
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Evaluates one expression and prints its value."""
        try:
            result = self.interp.eval(line)
        except Lang1Error as ex:
            self.report(ex.kind, ex)
        except RecursionError:
            self.report("RecursionError", "maximum recursion depth exceeded")
        except Exception as ex:
            logger.warning("Internal error evaluating %r", line, exc_info=True)
            self.report(type(ex).__name__, ex, internal=True)
        else:
            self._write(format_value(result))
        self.line_count += 1
        self.prompt = self._format_prompt()
        return False

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self._write("")
        return True
