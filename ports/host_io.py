"""
Port: HostIO
Odpowiedzialność: warstwa prezentacji - skąd przychodzi linia i gdzie trafia wynik.
Rdzeń interpretera nigdy nie sięga po wejście/wyjście sam.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import EvalOutcome


@runtime_checkable
class HostIO(Protocol):
    def read_input(self) -> Optional[str]:
        """
        Returns the next line to evaluate, or None when input is exhausted.
        """
        ...

    def display(self, outcome: EvalOutcome) -> None:
        """
        Renders a successful value or an error message to the user.
        """
        ...
