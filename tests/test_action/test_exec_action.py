from compleat.action import action_exec_command, action_values
from compleat.context import Context


def lines(output: bytes):
    return action_values(output.decode("utf-8"))


def test_exec_output_is_transformed(tmp_path):
    fixture = tmp_path / "fixture.txt"
    fixture.write_text("first line\nsecond line\n")
    invoked = action_exec_command("head", "-n1", str(fixture))(lines).invoke(Context())
    assert [rv.value for rv in invoked.raw_values] == ["first line\n"]


def test_exec_runs_in_context_dir(tmp_path):
    (tmp_path / "relative.txt").write_text("inside\n")
    action = action_exec_command("head", "-n1", "relative.txt")(lines)
    invoked = action.invoke(Context(dir=str(tmp_path)))
    assert [rv.value for rv in invoked.raw_values] == ["inside\n"]


def test_exec_failure_uses_first_stderr_line():
    action = action_exec_command("sh", "-c", "echo boom >&2; echo more >&2; exit 1")(lines)
    invoked = action.invoke(Context(callback_value="x"))
    assert [rv.value for rv in invoked.raw_values] == ["x_", "xERR"]
    assert invoked.raw_values[1].description == "boom"
    assert invoked.skipcache is True


def test_exec_failure_strips_ansi():
    action = action_exec_command("sh", "-c", "printf '\\033[31mred\\033[0m\\n' >&2; exit 2")(lines)
    invoked = action.invoke(Context())
    assert invoked.raw_values[1].description == "red"


def test_exec_failure_without_stderr():
    invoked = action_exec_command("sh", "-c", "exit 3")(lines).invoke(Context())
    assert invoked.raw_values[1].description == "sh exited with status 3"


def test_exec_missing_program():
    action = action_exec_command("compleat-no-such-program")(lines)
    invoked = action.invoke(Context())
    assert "No such file or directory" in invoked.raw_values[1].description
