"""src/pathedit/ui/cli/display/shell.py
What: Render edit outcomes as shell code and print the integration function.
Why: A child process cannot change its parent's environment, so the shell evaluates our output.
"""

from __future__ import annotations

import re
import shlex
import textwrap
from collections.abc import Iterable
from typing import Final

from pathedit.config.aliases import VARIABLE_NAME_PATTERN
from pathedit.features.pathlist import InvalidArgumentError, InvalidVariableNameError

PROGRAM_NAME: Final[str] = "pathedit"

_FUNCTION_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")

_INIT_TEMPLATE: Final[str] = textwrap.dedent(
    """\
    {name}() {{
        case "${{1:-}}" in
            ""|-h|--help|--init)
                command {program} "$@"
                return $?
                ;;
        esac
        local __pathedit_out __pathedit_status
        __pathedit_out="$(command {program} --shell "$@")"
        __pathedit_status=$?
        if [ -n "$__pathedit_out" ]; then
            eval "$__pathedit_out"
        fi
        return $__pathedit_status
    }}
    """
)


def render_export(varname: str, value: str) -> str:
    """Return ``export VARNAME=<quoted value>``.

    Raises:
        InvalidVariableNameError: If ``varname`` is not a shell identifier.
    """
    if VARIABLE_NAME_PATTERN.fullmatch(varname) is None:
        raise InvalidVariableNameError(varname)
    return f"export {varname}={shlex.quote(value)}"


def render_lines(lines: Iterable[str]) -> str:
    """Return shell code that prints each line verbatim."""

    return "\n".join(f"printf '%s\\n' {shlex.quote(line)}" for line in lines)


def render_init(shell: str, function_name: str = "path", program: str = PROGRAM_NAME) -> str:
    """Return the integration function for ``shell``.

    bash and zsh share the same function body.
    """
    if shell not in ("bash", "zsh"):
        raise InvalidArgumentError(f"Unsupported shell '{shell}'")
    if _FUNCTION_NAME_PATTERN.fullmatch(function_name) is None:
        raise InvalidArgumentError(f"Invalid function name '{function_name}'")
    return _INIT_TEMPLATE.format(name=function_name, program=program)


__all__ = ["PROGRAM_NAME", "render_export", "render_init", "render_lines"]
