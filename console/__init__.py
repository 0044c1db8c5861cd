from .commands import register_commands
from .menu import Menu
from .prompt import Prompt

__all__ = ["Menu", "Prompt", "register_commands"]
