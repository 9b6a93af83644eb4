from __future__ import annotations

import logging
from typing import Callable

from lang1 import SExpression, LispValue
from lang1.printer import dump
from lang1.reader.parser import parse
from lang1.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates one expression per call against a global Environment
    that persists across calls, so definitions survive from line to line.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
    ):
        if eval_fn is None:
            from lang1.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = Environment()

    def eval(self, line: str) -> LispValue:
        """Parse exactly one expression from `line` and evaluate it."""
        expr = parse(line)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Evaluating tree:\n%s", dump(expr).rstrip())
        return self.eval_fn(expr, self.env)
