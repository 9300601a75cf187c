"""src/pathedit/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Give every command the same output display and exit-code contract.
"""

from abc import ABC, abstractmethod

from pathedit.ui.cli.display.listing import ListingDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    display: ListingDisplay

    def __init__(self, display: ListingDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            display: Output display; defaults to a stdout display.
        """
        self.display = display or ListingDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass
