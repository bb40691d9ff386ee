"""
Adapter: ConsoleHost
Implementuje port HostIO na terminalu (rich.Console).

Wbudowane polecenia REPL (nie trafiają do interpretera):
  :vars  - tabela zmiennych bieżącej sesji
  :quit  - koniec pętli (tak samo jak EOF / Ctrl-D)
"""
from __future__ import annotations

from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.presenter.messages import format_number, render_outcome
from contracts import EvalOutcome


class ConsoleHost:
    def __init__(
        self,
        console: Optional[Console] = None,
        prompt: str = ">>> ",
        variables: Optional[Callable[[], dict[str, float]]] = None,
        show_steps: bool = False,
    ) -> None:
        self._console = console or Console(highlight=False)
        self._prompt = prompt
        self._variables = variables
        self._show_steps = show_steps

    # -- HostIO protocol ---------------------------------------------------

    def read_input(self) -> Optional[str]:
        while True:
            try:
                line = self._console.input(self._prompt)
            except (EOFError, KeyboardInterrupt):
                self._console.print()
                return None
            command = line.strip()
            if command == ":quit":
                return None
            if command == ":vars":
                self.print_variables()
                continue
            return line

    def display(self, outcome: EvalOutcome) -> None:
        if outcome.ok and self._show_steps:
            for step in outcome.steps:
                self._console.print(f"  {step}", style="dim", markup=False)
        style = "bold green" if outcome.ok else "bold red"
        self._console.print(render_outcome(outcome), style=style, markup=False)

    # -- Pomocnicze ------------------------------------------------------

    def print_variables(self) -> None:
        env = self._variables() if self._variables else {}
        table = Table(title=f"Zmienne [{len(env)}]", box=box.ASCII, show_header=True)
        table.add_column("Nazwa", no_wrap=True, style="bold cyan")
        table.add_column("Wartość", justify="right")
        for name in sorted(env):
            table.add_row(name, format_number(env[name]))
        self._console.print(table)
