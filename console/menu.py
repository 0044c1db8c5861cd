import logging
from typing import Callable, Dict, Optional, TextIO

from .prompt import INVALID_NUMBER, Prompt, parse_int

logger = logging.getLogger(__name__)


class Menu:
    def __init__(self, stdin: TextIO, stdout: TextIO, title: str = "Employee Performance Tracker Menu"):
        self.title = title
        self.prompt = Prompt(stdin=stdin, stdout=stdout)
        self.stdout = stdout
        self.commands: Dict[int, tuple[str, Callable[[], None]]] = {}
        self._running = False

    def command(self, choice: int, label: str):
        """Decorator for registering menu command handlers"""
        def decorator(handler):
            self.commands[choice] = (label, handler)
            return handler
        return decorator

    def write(self, line: str = "") -> None:
        self.stdout.write(line + "\n")

    def render(self) -> None:
        self.write()
        self.write(f"--- {self.title} ---")
        for choice in sorted(self.commands):
            label, _ = self.commands[choice]
            self.write(f"{choice}. {label}")

    def read_choice(self) -> Optional[int]:
        choice = parse_int(self.prompt.read_line("Enter your choice: "))
        if choice is None:
            self.write(INVALID_NUMBER)
        return choice

    def handle(self, choice: int) -> None:
        """Dispatch a choice to its registered handler"""
        entry = self.commands.get(choice)
        if entry is None:
            low, high = min(self.commands), max(self.commands)
            self.write(f"Invalid choice. Please enter a number between {low} and {high}.")
            return

        label, handler = entry
        logger.debug(f"--> {choice} {label}")
        handler()

    def stop(self) -> None:
        self._running = False

    def run(self) -> None:
        """Show the menu and dispatch choices until a handler stops the loop or input ends"""
        self._running = True
        while self._running:
            self.render()
            try:
                choice = self.read_choice()
                if choice is None:
                    continue
                self.handle(choice)
            except EOFError:
                logger.info("Input closed, leaving menu")
                self._running = False
