#!/usr/bin/env python
"""
Completion for a small deploy tool.

    python examples/deploy_completion.py _compleat fish _ deploy_completion.py push --env ""
    python examples/deploy_completion.py _compleat elvish > deploy.elv
"""
import sys

from compleat import (
    Command,
    CompletionRegistry,
    action_callback,
    action_directories,
    action_exec_command,
    action_files,
    action_message,
    action_values,
    action_values_described,
)
from compleat.parser import FlagType
from compleat.utils import setup_logging

setup_logging()

deploy = Command(name="deploy", short="deploy tool")
push = Command(name="push", short="push a release", aliases=["p"])
push.flags.add_flag("env", "e", usage="target environment")
push.flags.add_flag("config", "c", usage="config file")
push.flags.add_flag("workdir", "w", usage="working directory")
push.flags.add_flag("dry-run", "n", FlagType.BOOL, "only print the plan")
push.flags.add_flag("verbose", "v", FlagType.COUNT, "more output")
rollback = Command(name="rollback", short="undo the last push")
deploy.add_command(push, rollback)


def tags(context):
    if not context.args:
        return action_message("push a branch first")
    return action_exec_command("git", "tag", "--list", f"{context.args[0]}*")(
        lambda output: action_values(*output.decode().split())
    )


registry = CompletionRegistry()
registry.gen(push).flag_completion(
    {
        "env": action_values_described("staging", "pre-release", "prod", "live traffic"),
        "config": action_files(".yaml", ".yml"),
        "workdir": action_directories(),
    }
)
registry.gen(push).positional_completion(
    action_exec_command("git", "branch", "--format=%(refname:short)")(
        lambda output: action_values(*output.decode().splitlines())
    ),
    action_callback(tags),
)

if __name__ == "__main__":
    if not registry.execute(deploy):
        print("usage: deploy push [--env ENV] [--config FILE] BRANCH [TAG]")
        sys.exit(2)
