"""Print the shell function that evaluates pathedit output."""

import sys
from typing import final

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from pathedit.ui.cli.args.options import InitArgs
from pathedit.ui.cli.commands.executor import CommandExecutor
from pathedit.ui.cli.display.listing import ListingDisplay
from pathedit.ui.cli.display.shell import render_init


@final
class InitCommand(CommandExecutor):
    """Emit the integration function for ``eval "$(pathedit --init)"``."""

    args: InitArgs

    def __init__(self, args: InitArgs, *, display: ListingDisplay | None = None) -> None:
        super().__init__(display)
        self.args = args

    @override
    def execute(self) -> int:
        script = render_init(self.args.shell, self.args.function_name)
        self.display.write_raw(script)
        return 0
