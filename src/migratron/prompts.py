"""Operator prompts.

Every decision in a migration is taken by the operator. Prompts block until
answered; there is no timeout.
"""

from __future__ import annotations

from typing import Protocol

from .exceptions import PromptAbortedError

try:
    import readline
except ImportError:  # Windows has no readline, prompts lose pre-filled text
    readline = None


class Prompter(Protocol):
    """Protocol for asking the operator questions."""

    def confirm(self, label: str) -> bool:
        """Ask a yes/no question. Only an explicit "y" counts as yes."""
        ...

    def ask_text(self, label: str, default: str) -> str:
        """Ask for a line of text, offering default for editing."""
        ...


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError as e:
        msg = "Input was closed while waiting for an answer. Please run the command in an interactive session."
        raise PromptAbortedError(msg) from e


class ConsolePrompter:
    """Prompter reading answers from the terminal."""

    def confirm(self, label: str) -> bool:
        answer = _read_line(f"{label} [y/N]: ")
        return answer.strip() == "y"

    def ask_text(self, label: str, default: str) -> str:
        """Ask for a line of text, pre-filled with default where readline is available.

        An empty answer returns default, so clearing the pre-filled line keeps
        the original text rather than producing an empty one.
        """
        if readline is None:
            answer = _read_line(f"{label} [{default}]: ")
        else:
            readline.set_startup_hook(lambda: readline.insert_text(default))
            try:
                answer = _read_line(f"{label}: ")
            finally:
                readline.set_startup_hook()
        return answer or default
