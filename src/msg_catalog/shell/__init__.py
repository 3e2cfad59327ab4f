"""Text menu front end for the catalog."""

from .menu import MenuShell
from .prompts import EndOfInput, Prompter

__all__ = ["EndOfInput", "MenuShell", "Prompter"]
