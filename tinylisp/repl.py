"""Interactive read-eval-print loop for tinylisp."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tinylisp.config import ReplConfig
from tinylisp.interpreter import Interpreter
from tinylisp.types.errors import TinyLispError

logger = logging.getLogger(__name__)


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        config: ReplConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.interp = interpreter or Interpreter()
        self.config = config or ReplConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        # print output joins the same transcript as results
        self.interp.env.out = self.stdout

    def read_line(self) -> str | None:
        self.stdout.write(self.config.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def step(self, line: str) -> None:
        """Evaluate one line and report the result or the error."""
        try:
            result = self.interp.run(line)
        except TinyLispError as e:
            logger.debug("turn failed: %s", type(e).__name__)
            print(f"{self.config.error_prefix}{e}", file=self.stderr)
            return
        print(result, file=self.stdout)

    def run(self) -> int:
        try:
            while (line := self.read_line()) is not None:
                self.step(line)
        except KeyboardInterrupt:
            pass
        return 0


def main() -> int:
    config = ReplConfig()
    logging.basicConfig(stream=sys.stderr, level=config.log_level)
    return Repl(config=config).run()
