# Compleat Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""snippets.py

Shell integration snippets.

A snippet is sourced once by the user's shell. It registers a completer that
re-invokes the program as `<program> _compleat <shell> _ <words...>` and turns
the printed candidates into the shell's own completion objects.
"""
from __future__ import annotations

from typing import Callable

from compleat.command import Command
from compleat.exceptions import UnknownShellError

SnippetGenerator = Callable[[Command, str], str]

SNIPPETS: dict[str, SnippetGenerator] = {}


def snippet_generator(shell: str) -> Callable[[SnippetGenerator], SnippetGenerator]:
    def _register(func: SnippetGenerator) -> SnippetGenerator:
        SNIPPETS[shell] = func
        return func

    return _register


@snippet_generator("elvish")
def elvish_snippet(command: Command, executable: str) -> str:
    return f"""set edit:completion:arg-completer[{command.name}] = {{|@arg|
    {executable} _compleat elvish _ (all $arg) | from-json | all (one) | each {{|c|
        if (eq $c[Description] "") {{
            edit:complex-candidate $c[Value] &display=$c[Display] &code-suffix=$c[CodeSuffix]
        }} else {{
            edit:complex-candidate $c[Value] &display=$c[Display]" ("(styled $c[Description] magenta)")" &code-suffix=$c[CodeSuffix]
        }}
    }}
}}
"""


@snippet_generator("xonsh")
def xonsh_snippet(command: Command, executable: str) -> str:
    function_name = command.name.replace("-", "__")
    return f"""from shlex import split
import subprocess
from xonsh.completers._aliases import _add_one_completer
from xonsh.completers.tools import RichCompletion


def _{function_name}_completer(prefix, line, begidx, endidx, ctx):
    \"\"\"compleat completer for {command.name}\"\"\"
    if not line.startswith('{command.name} '):
        return

    words = split(line[0:endidx] + "_")
    words[-1] = words[-1][0:-1]
    current = words[-1]

    output, _ = subprocess.Popen(
        ['{executable}', '_compleat', 'xonsh', '_', *words],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    ).communicate()
    output = output.decode('utf-8')
    if output == "":
        return {{RichCompletion(current, display=current, description='', prefix_len=0)}}

    result = eval(output)
    return set(
        RichCompletion(
            str(c),
            display=c.display,
            description=c.description,
            prefix_len=len(current),
            append_space=c.append_space,
        )
        for c in result
    )


_add_one_completer('{command.name}', _{function_name}_completer, 'start')
"""


def snippet(shell: str, command: Command, executable: str) -> str:
    """
    Render the integration snippet of `shell` for `command`.

    Raises:
        UnknownShellError: If no snippet exists for `shell`.
    """
    generator = SNIPPETS.get(shell)
    if generator is None:
        raise UnknownShellError(
            f"No snippet for shell '{shell}'. Must be one of: {', '.join(sorted(SNIPPETS))}"
        )
    return generator(command, executable)
