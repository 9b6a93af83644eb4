"""Runs the lang1 interactive interpreter. Called from the lang1 console script."""

import logging
import sys

from lang1 import config
from lang1.interpreter.shell import Shell


def main():
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    try:
        Shell().cmdloop()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
