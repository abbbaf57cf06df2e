"""Interactive read-evaluate-print loop for bitexpr."""

import logging
from typing import TextIO

from bitexpr.bitexpr import BitExpr


class BitExprRepl:
    """Reads expressions line by line and prints each result until an empty line is read."""

    PROMPT = "> "
    INVALID_MESSAGE = "Invalid expression!"

    def __init__(self, engine: BitExpr, input_stream: TextIO, output_stream: TextIO, signed: bool = False) -> None:
        """
        Initialize the loop.

        Args:
            engine: Configured calculator
            input_stream: Where expressions are read from
            output_stream: Where prompts and results are written
            signed: Show results as two's-complement signed values
        """
        self._engine = engine
        self._input = input_stream
        self._output = output_stream
        self._signed = signed
        self._logger = logging.getLogger("BitExprRepl")

    def format_value(self, value: int) -> str:
        """Render a result for display."""
        if self._signed and value >> (self._engine.width - 1):
            value -= 1 << self._engine.width

        return str(value)

    def evaluate_line(self, line: str) -> bool:
        """
        Evaluate one expression and print its result line.

        Returns:
            True if the expression was valid
        """
        success, value = self._engine.evaluate(self._engine.parse(line))
        if not success:
            self._logger.info("Invalid expression: %r", line)
            print(self.INVALID_MESSAGE, file=self._output)
            return False

        print(f"Result: {self.format_value(value)}", file=self._output)
        return True

    def run(self) -> int:
        """
        Run the loop until an empty line or end of input.

        Returns:
            Exit status
        """
        while True:
            self._output.write(self.PROMPT)
            self._output.flush()

            line = self._input.readline()
            expression = line.rstrip("\r\n")
            if not expression:
                break

            self.evaluate_line(expression)

        return 0
