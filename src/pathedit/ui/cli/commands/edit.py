"""Apply one path-list operation to one environment variable."""

from collections.abc import Mapping
import sys
from typing import final

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from pathedit.application.services.path_edit_service import (
    EditOutcome,
    EditRequest,
    PathEditService,
)
from pathedit.config.config import Config
from pathedit.features.pathlist import EditCommand
from pathedit.ui.cli.args.options import EditArgs
from pathedit.ui.cli.commands.executor import CommandExecutor
from pathedit.ui.cli.display.listing import ListingDisplay


@final
class EditCommandExecutor(CommandExecutor):
    """Run an edit and print its listing or ``export`` line."""

    args: EditArgs
    service: PathEditService

    def __init__(
        self,
        args: EditArgs,
        *,
        environ: Mapping[str, str] | None = None,
        service: PathEditService | None = None,
        display: ListingDisplay | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            args: Parsed edit arguments.
            environ: Environment to read the variable from; defaults to ``os.environ``.
            service: Prebuilt service, mainly for tests. Takes precedence over ``environ``.
            display: Output display.
        """
        super().__init__(display)
        self.args = args
        if service is None:
            configuration = Config.load()
            service = PathEditService(
                aliases=configuration.variable_aliases,
                environ=environ,
                delimiter=args.delimiter or configuration.delimiter,
                strict_indices=configuration.strict_indices,
            )
        self.service = service

    @override
    def execute(self) -> int:
        outcome = self.service.execute(
            EditRequest(
                varname=self.args.varname,
                command=self.args.command,
                arguments=self.args.arguments,
                real=self.args.real,
            )
        )
        self.display_outcome(outcome)
        return 0 if outcome.status else 1

    def display_outcome(self, outcome: EditOutcome) -> None:
        """Print the export line for mutations or the listing for show."""
        if self.args.command.mutates and outcome.value is not None:
            self.display.show_export(outcome.varname, outcome.value)
        elif self.args.command is EditCommand.SHOW:
            self.display.show_listing(outcome.varname, outcome.listing, shell=self.args.shell)
