from dataclasses import dataclass
from typing import TextIO

INVALID_NUMBER = "Invalid input. Please enter a number."


def parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_float(text: str) -> float | None:
    try:
        return float(text.strip())
    except ValueError:
        return None


@dataclass
class Prompt:
    stdin: TextIO
    stdout: TextIO

    def read_line(self, label: str) -> str:
        """Show label and read one line. Raises EOFError when input runs out."""
        if label is None:
            raise ValueError("Label cannot be None")

        self.stdout.write(label)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def read_int(self, label: str) -> int:
        while True:
            value = parse_int(self.read_line(label))
            if value is not None:
                return value
            self.stdout.write(INVALID_NUMBER + "\n")

    def read_float(self, label: str) -> float:
        while True:
            value = parse_float(self.read_line(label))
            if value is not None:
                return value
            self.stdout.write(INVALID_NUMBER + "\n")

    def read_text(self, label: str) -> str:
        # Blank lines are skipped, leading whitespace dropped
        while True:
            text = self.read_line(label).lstrip()
            if text:
                return text
