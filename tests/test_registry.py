import pytest

from compleat.action import action_callback, action_multi_parts, action_values
from compleat.command import Command
from compleat.config import CompleatConfig
from compleat.exceptions import FlagDefinitionError, RecursionLimitError, UnknownUIDError
from compleat.registry import CompletionRegistry, traverse


def values(invoked):
    return [rv.value for rv in invoked.raw_values]


def test_traverse(example_root):
    state = traverse(example_root, ["alias", "-f", "x", "p1", "--values", ""])
    assert state.command.name == "action"
    assert state.positionals == ["p1"]
    assert state.pending_flag.name == "values"
    assert state.command.flags.lookup("files").changed
    assert state.current == ""


def test_traverse_resets_flags(example_root):
    traverse(example_root, ["action", "-f", "x", ""])
    state = traverse(example_root, ["action", ""])
    assert not state.command.flags.lookup("files").changed


def test_traverse_terminator(example_root):
    state = traverse(example_root, ["action", "--", "-f", ""])
    assert state.terminated
    assert state.positionals == ["-f"]


def test_subcommands(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", [""])
    assert values(invoked) == ["action", "alias", "multiparts", "flag"]


def test_flag_value(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", ["action", "--values", ""])
    assert values(invoked) == ["values", "example"]


def test_flag_value_shorthand(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", ["action", "-d", "ex"])
    assert [rv.description for rv in invoked.raw_values] == [
        "valueDescription",
        "exampleDescription",
    ]


def test_flag_value_attached(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", ["action", "--optarg=r"])
    assert values(invoked)[:2] == ["--optarg=blue", "--optarg=red"]


def test_optional_value_flag_is_not_pending(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", ["action", "-o", ""])
    assert values(invoked) == ["positional1", "p1"]


def test_positionals(example_registry, example_root):
    assert values(example_registry.invoke(example_root, "_", ["action", ""])) == [
        "positional1",
        "p1",
    ]
    assert values(example_registry.invoke(example_root, "_", ["action", "p1", ""])) == [
        "positional2",
        "p2",
    ]
    assert values(example_registry.invoke(example_root, "_", ["action", "p1", "p2", ""])) == []


def test_flags_skip_given_ones(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", ["action", "--values", "x", "-"])
    result = values(invoked)
    assert "--files" in result
    assert "--values" not in result
    assert "-v" not in result


def test_message(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", ["action", "-m", ""])
    assert invoked.raw_values[1].description == "message example"


def test_multi_parts(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_", ["multiparts", "--version", "1."])
    assert values(invoked) == ["1.0", "1.1", "1.2"]
    assert invoked.nospace is True


def test_explicit_uid(example_registry, example_root):
    invoked = example_registry.invoke(
        example_root, "_example__action##values", ["action", "--values", "e"]
    )
    assert values(invoked) == ["values", "example"]


def test_explicit_command_uid(example_registry, example_root):
    invoked = example_registry.invoke(example_root, "_example", ["-"])
    assert values(invoked) == []


@pytest.mark.parametrize("uid", ["_example__action#5", "_example__missing", "example"])
def test_unknown_uid(example_registry, example_root, uid):
    with pytest.raises(UnknownUIDError):
        example_registry.invoke(example_root, uid, ["action", ""])


def test_register_unknown_flag(example_root):
    registry = CompletionRegistry()
    with pytest.raises(FlagDefinitionError):
        registry.gen(example_root).flag_completion({"nope": action_values()})


def test_register(example_root):
    registry = CompletionRegistry()
    registry.gen(example_root).positional_completion(action_values("a"), action_values("b"))
    assert "_example#0" in registry
    assert registry.get("_example#1") is not None
    assert registry.get("_example#2") is None


def test_recursion_limit_from_config():
    root = Command(name="loop")

    def loop(context):
        return action_callback(loop)

    registry = CompletionRegistry(CompleatConfig(max_callback_depth=5))
    registry.gen(root).positional_completion(action_callback(loop))
    with pytest.raises(RecursionLimitError):
        registry.invoke(root, "_", [""])


def test_config_depth_applies_to_nested_resolution():
    root = Command(name="root")
    root.flags.add_flag("x")

    def chain(length):
        action = action_values("end")
        for _ in range(length):
            action = action_callback(lambda c, inner=action: inner)
        return action

    registry = CompletionRegistry(CompleatConfig(max_callback_depth=3))
    registry.gen(root).flag_completion({"x": action_multi_parts(":", lambda c: chain(10))})
    with pytest.raises(RecursionLimitError):
        registry.invoke(root, "_root##x", ["a:"])


def test_execute_reports_self_referencing_action(capsys):
    root = Command(name="root")

    def loop(context):
        return action_multi_parts(":", loop)

    registry = CompletionRegistry()
    registry.gen(root).positional_completion(action_multi_parts(":", loop))
    with pytest.raises(SystemExit) as exc_info:
        registry.execute(root, ["_compleat", "bash", "_", "root", "a:b"])
    assert exc_info.value.code == 1
    assert capsys.readouterr().out == ""


def test_long_shorthand_from_config(example_root):
    registry = CompletionRegistry(CompleatConfig(long_shorthand=True))
    invoked = registry.invoke(example_root, "_", ["flag", "-"])
    assert values(invoked)[:2] == ["-bool", "-b"]


def test_execute_ignores_other_arguments(example_registry, example_root):
    assert example_registry.execute(example_root, ["action", "--values"]) is False
    assert example_registry.execute(example_root, []) is False


def test_execute_completion(example_registry, example_root, capsys):
    argv = ["_compleat", "fish", "_", "example", "action", "--values", ""]
    assert example_registry.execute(example_root, argv) is True
    assert capsys.readouterr().out == "values\nexample\n"


def test_execute_without_words(example_registry, example_root, capsys):
    assert example_registry.execute(example_root, ["_compleat", "bash", "_", "example"])
    assert "action " in capsys.readouterr().out.splitlines()


def test_execute_snippet(example_registry, example_root, capsys):
    assert example_registry.execute(example_root, ["_compleat", "elvish"])
    assert "edit:completion:arg-completer[example]" in capsys.readouterr().out


def test_execute_unknown_shell(example_registry, example_root, capsys):
    argv = ["_compleat", "tcsh", "_", "example", ""]
    with pytest.raises(SystemExit) as exc_info:
        example_registry.execute(example_root, argv)
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unsupported shell" in captured.err


def test_execute_unknown_uid(example_registry, example_root, capsys):
    argv = ["_compleat", "bash", "_example__nope", "example", ""]
    with pytest.raises(SystemExit):
        example_registry.execute(example_root, argv)
    assert capsys.readouterr().out == ""


def test_execute_usage(example_registry, example_root):
    with pytest.raises(SystemExit):
        example_registry.execute(example_root, ["_compleat"])
