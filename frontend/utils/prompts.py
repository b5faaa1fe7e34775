"""
Console prompts.

Input and output go through injectable callables so the menu can be driven
by scripted answers.
"""
from typing import Callable, Optional, Sequence

from frontend.utils.formatters import format_choice


class Prompter:
    """Asks questions on the console and re-asks until the answer is usable."""

    def __init__(
        self,
        ask: Callable[[str], str] = input,
        show: Callable[[str], None] = print,
    ):
        self.ask = ask
        self.show = show

    def text(self, message: str) -> str:
        """Ask for a non-empty answer."""
        while True:
            answer = self.ask(f"{message}: ").strip()
            if answer:
                return answer
            self.show("A value is required.")

    def number(self, message: str) -> float:
        """Ask for a number."""
        while True:
            answer = self.text(message).replace(",", "").lstrip("$")
            try:
                return float(answer)
            except ValueError:
                self.show(f"{answer!r} is not a number.")

    def select(self, message: str, labels: Sequence[str]) -> int:
        """
        Ask the user to pick one of `labels` by number.

        Returns:
            Index of the chosen label
        """
        self.show(message)
        for index, label in enumerate(labels, start=1):
            self.show(format_choice(index, label))
        while True:
            answer = self.ask("> ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(labels):
                return int(answer) - 1
            self.show(f"Enter a number between 1 and {len(labels)}.")

    def choose(
        self,
        message: str,
        choices: Sequence[tuple[int, str]],
        none_label: Optional[str] = None,
    ) -> Optional[int]:
        """
        Ask the user to pick a row by its label.

        Args:
            message: Question
            choices: (id, label) pairs
            none_label: If given, an extra last option that yields None

        Returns:
            The chosen id, or None for the extra option
        """
        labels = [label for _, label in choices]
        if none_label is not None:
            labels.append(none_label)
        index = self.select(message, labels)
        if index == len(choices):
            return None
        return choices[index][0]
