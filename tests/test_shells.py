import json

import pytest

from compleat.action import InvokedAction, RawValue
from compleat.exceptions import UnknownShellError
from compleat.shells import SERIALIZERS, serialize


@pytest.fixture
def invoked():
    return InvokedAction(
        (
            RawValue(value="example/cmd/", display="cmd/", description=""),
            RawValue(value="example/main.md", display="main.md", description="docs"),
        ),
        nospace=True,
    )


def test_registered_shells():
    assert set(SERIALIZERS) == {"bash", "zsh", "fish", "elvish", "xonsh", "powershell", "export"}


def test_bash(invoked):
    assert serialize("bash", invoked, "example/m") == "example/main.md"
    spaced = InvokedAction((RawValue.of("a"), RawValue.of("b")))
    assert serialize("bash", spaced) == "a \nb "


def test_zsh(invoked):
    assert serialize("zsh", invoked).splitlines() == [
        "example/cmd/\tcmd/\t\t",
        "example/main.md\tmain.md\tdocs\t",
    ]


def test_fish(invoked):
    assert serialize("fish", invoked) == "example/cmd/\nexample/main.md\tdocs"


def test_elvish(invoked):
    candidates = json.loads(serialize("elvish", invoked))
    assert candidates[1] == {
        "Value": "example/main.md",
        "Display": "main.md",
        "Description": "docs",
        "CodeSuffix": "",
    }


def test_xonsh(invoked):
    output = serialize("xonsh", invoked)
    assert output.startswith("{RichCompletion('example/cmd/', display='cmd/'")
    assert "append_space=False" in output
    assert serialize("xonsh", InvokedAction()) == ""


def test_powershell(invoked):
    candidates = json.loads(serialize("powershell", invoked))
    assert candidates[0] == {
        "CompletionText": "example/cmd/",
        "ListItemText": "cmd/",
        "ToolTip": "cmd/",
    }
    assert candidates[1]["ToolTip"] == "docs"


def test_export(invoked):
    exported = json.loads(serialize("export", invoked))
    assert exported["nospace"] is True
    assert exported["skipcache"] is False
    assert exported["values"][1] == {
        "value": "example/main.md",
        "display": "main.md",
        "description": "docs",
    }


def test_newlines_do_not_break_lines():
    invoked = InvokedAction((RawValue.of("first\nsecond", "multi\nline"),))
    assert serialize("fish", invoked) == "first second\tmulti line"


def test_unknown_shell(invoked):
    with pytest.raises(UnknownShellError):
        serialize("tcsh", invoked)
