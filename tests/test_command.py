import pytest
from pydantic import ValidationError

from compleat.command import Command
from compleat.exceptions import CommandNotFoundError


def test_tree_navigation():
    child = Command(name="child", aliases=["c"])
    root = Command(name="root", children=[Command(name="other")])
    root.add_command(child)
    assert child.parent is root
    assert root.children[0].parent is root
    assert child.root() is root
    assert child.path() == ["root", "child"]
    assert root.find_child("c") is child
    assert root.find(["child"]) is child
    assert root.find([]) is root


def test_find_unknown():
    root = Command(name="root")
    with pytest.raises(CommandNotFoundError):
        root.find(["missing"])


@pytest.mark.parametrize("name", ["", "with space", "a#b", "a__b", "mid_"])
def test_invalid_names(name):
    with pytest.raises(ValidationError):
        Command(name=name)


def test_str():
    assert str(Command(name="root")) == "Command(name='root', children=0)"
