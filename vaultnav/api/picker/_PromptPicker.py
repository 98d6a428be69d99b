"""Interactive terminal picker built on rich."""

from typing import TextIO

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from .Picker import Picker


class _PromptPicker(Picker):
    """Shows a numbered table and asks for a number; 0 cancels."""

    def __init__(self, console: Console | None = None, stream: TextIO | None = None, title: str = "Pick a candidate"):
        self.console = console or Console(stderr=True)
        self.stream = stream
        self.title = title

    def _choose(self, candidates: list[str]) -> str | None:
        table = Table(title=self.title, show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Candidate")
        for number, candidate in enumerate(candidates, start=1):
            table.add_row(str(number), candidate)
        self.console.print(table)

        answer = Prompt.ask(
            "Choice (0 to cancel)",
            choices=[str(n) for n in range(len(candidates) + 1)],
            default="0",
            show_choices=False,
            console=self.console,
            stream=self.stream,
        )
        index = int(answer)
        if index == 0:
            return None
        return candidates[index - 1]
