from collections.abc import Sequence
from typing import Any, NamedTuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sequence_algorithms import Match


class Demonstration(NamedTuple):
    """One illustrated call with its result and, for mutating calls, the sequence afterwards."""

    title: str
    result: object
    sequence: list[Any] | None = None


def result_to_rich_text(result: object) -> Text:
    """Render a call result, coloring found/true in green and not-found/false in red."""
    if isinstance(result, Match):
        style = "green" if result.found else "red"
        return Text(f"index {result.index}, found {result.found}", style=style)
    if isinstance(result, bool):
        return Text(str(result), style="green" if result else "red")
    if isinstance(result, int) and result < 0:
        return Text(str(result), style="red")
    return Text(repr(result))


def demonstrations_to_table(demonstrations: Sequence[Demonstration]) -> Table:
    table = Table(title="Sequence algorithms")
    table.add_column("Call")
    table.add_column("Result")
    table.add_column("Sequence after", style="cyan")

    for demonstration in demonstrations:
        after = (
            Text(repr(demonstration.sequence))
            if demonstration.sequence is not None
            else Text("")
        )
        table.add_row(
            demonstration.title, result_to_rich_text(demonstration.result), after
        )
    return table


def display_demonstrations(
    demonstrations: Sequence[Demonstration], console: Console | None = None
):
    console = console or Console()
    console.print(demonstrations_to_table(demonstrations))
