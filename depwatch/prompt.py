"""
Interactive yes/no confirmation before installing a package.
"""
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from depwatch.utils.exceptions import ConfirmationAbortedError

OKAY_RESPONSES = {"y", "yes"}
NOKAY_RESPONSES = {"n", "no"}


class ConfirmationPrompt:
    """
    Blocking yes/no gate.

    "y"/"yes" and "n"/"no" are accepted in any letter case; anything else
    re-prompts until a valid answer arrives.
    """

    def __init__(self, console: Optional[Console] = None, input_func: Optional[Callable[[], str]] = None):
        self.console = console or Console()
        self._input = input_func or self.console.input

    def ask(self, package: str) -> bool:
        """
        Ask whether ``package`` should be installed.

        Returns:
            True for an affirmative answer, False for a negative one

        Raises:
            ConfirmationAbortedError: If input ends before a valid answer
        """
        self.console.print()
        self.console.print(
            f"Are you sure you wish to install [bold]{escape(package)}[/bold] "
            "and all above dependencies? \\[Y/N]"
        )

        while True:
            try:
                response = self._input()
            except EOFError:
                raise ConfirmationAbortedError()

            answer = response.strip().lower()
            if answer in OKAY_RESPONSES:
                return True
            if answer in NOKAY_RESPONSES:
                return False

            self.console.print("Please type yes or no and then press enter:")
