import pytest

from compleat.action import (
    Action,
    InvokedAction,
    RawValue,
    action_callback,
    action_multi_parts,
    action_values,
    action_values_described,
    batch,
    raw_values_from,
)
from compleat.context import Context
from compleat.exceptions import RecursionLimitError


def values(invoked: InvokedAction) -> list[str]:
    return [rv.value for rv in invoked.raw_values]


def test_static_invoke_returns_batch():
    action = action_values_described("a", "first", "b", "second")
    invoked = action.invoke(Context())
    assert invoked.raw_values == (
        RawValue(value="a", display="a", description="first"),
        RawValue(value="b", display="b", description="second"),
    )
    assert invoked.nospace is False
    assert invoked.skipcache is False


def test_static_invoke_is_idempotent():
    action = action_values("a", "b")
    assert action.invoke(Context()) == action.invoke(Context())
    assert action.is_static


def test_invoke_without_context():
    invoked = action_callback(lambda c: action_values(f"<{c.callback_value}>")).invoke()
    assert values(invoked) == ["<>"]


def test_callback_receives_context():
    seen = []

    def callback(context: Context) -> Action:
        seen.append(context)
        return action_values(context.callback_value + "x")

    invoked = action_callback(callback).invoke(Context(callback_value="ab", args=("p",)))
    assert values(invoked) == ["abx"]
    assert seen[0].args == ("p",)


def test_nested_callbacks_are_unwrapped():
    action = action_callback(
        lambda c: action_callback(lambda c: action_callback(lambda c: action_values("deep")))
    )
    assert values(action.invoke(Context())) == ["deep"]


def test_modifiers_accumulate_along_the_chain():
    inner = action_callback(lambda c: action_values("a").skip_cache())
    outer = action_callback(lambda c: inner).no_space()
    invoked = outer.invoke(Context())
    assert invoked.nospace is True
    assert invoked.skipcache is True


def test_recursion_limit():
    def loop(context: Context) -> Action:
        return action_callback(loop)

    with pytest.raises(RecursionLimitError):
        action_callback(loop).invoke(Context())


def test_recursion_limit_is_configurable():
    chain = action_callback(
        lambda c: action_callback(lambda c: action_callback(lambda c: action_values("ok")))
    )
    assert values(chain.invoke(Context(), max_depth=3)) == ["ok"]
    with pytest.raises(RecursionLimitError):
        chain.invoke(Context(), max_depth=2)


def chain(length: int) -> Action:
    action = action_values("end")
    for _ in range(length):
        action = action_callback(lambda c, inner=action: inner)
    return action


def test_recursion_limit_through_multi_parts():
    def loop(context: Context) -> Action:
        return action_multi_parts(":", loop)

    with pytest.raises(RecursionLimitError):
        action_multi_parts(":", loop).invoke(Context(callback_value="a:b"))


def test_recursion_limit_through_batch_chdir_and_suppress(tmp_path):
    def via_batch(context: Context) -> Action:
        return batch(action_callback(via_batch)).to_a()

    def via_chdir(context: Context) -> Action:
        return action_callback(via_chdir).chdir(str(tmp_path))

    def via_suppress(context: Context) -> Action:
        return action_callback(via_suppress).suppress("x")

    for callback in (via_batch, via_chdir, via_suppress):
        with pytest.raises(RecursionLimitError):
            action_callback(callback).invoke(Context())


def test_nested_resolution_shares_depth_bound():
    nested = action_multi_parts(":", lambda c: chain(10))
    with pytest.raises(RecursionLimitError):
        nested.invoke(Context(callback_value="a:"), max_depth=3)
    assert values(nested.invoke(Context(callback_value="a:"), max_depth=20)) == ["a:end"]


def test_callbacks_see_unwrapped_depth():
    seen = []

    def record(context: Context) -> Action:
        seen.append(context.depth)
        return action_values("x")

    action_callback(lambda c: action_callback(record)).invoke(Context())
    assert seen == [2]


def test_merge_preserves_order_and_ors_flags():
    first = action_values("a", "b").invoke(Context())
    second = action_values("c").no_space().invoke(Context())
    third = action_values("d").skip_cache().invoke(Context())
    merged = first.merge(second, third)
    assert values(merged) == ["a", "b", "c", "d"]
    assert merged.nospace is True
    assert merged.skipcache is True
    assert values(first) == ["a", "b"]


def test_filter_by_display():
    invoked = action_values("a", "b", "c").invoke(Context())
    assert values(invoked.filter(["b", "z"])) == ["a", "c"]


def test_prefix_and_suffix():
    invoked = action_values("a", "b").invoke(Context())
    prefixed = invoked.prefix("x/")
    assert values(prefixed) == ["x/a", "x/b"]
    assert [rv.display for rv in prefixed.raw_values] == ["x/a", "x/b"]
    assert values(invoked.suffix(":")) == ["a:", "b:"]


def test_to_multi_parts_a():
    invoked = InvokedAction(raw_values_from("a/b/c", "example/cmd/", "top"), skipcache=True)
    action = invoked.to_multi_parts_a("/")
    assert isinstance(action, Action)
    result = action.invoke(Context())
    assert values(result) == ["a/b/c", "example/cmd/", "top"]
    assert [rv.display for rv in result.raw_values] == ["c", "cmd/", "top"]
    assert result.nospace is True
    assert result.skipcache is True


def test_to_a_round_trip_keeps_flags():
    invoked = action_values("a").no_space().invoke(Context())
    assert invoked.to_a().invoke(Context()) == invoked


def test_context_is_immutable():
    context = Context(callback_value="a/b")
    narrowed = context.narrow("b", ["a"])
    assert narrowed.callback_value == "b"
    assert narrowed.parts == ("a",)
    assert context.callback_value == "a/b"
    assert context.parts == ()
    with pytest.raises(Exception):
        context.callback_value = "c"


def test_context_abs_path(tmp_path):
    assert Context().abs_path("file") == "file"
    assert Context(dir=str(tmp_path)).abs_path("file") == str(tmp_path / "file")
    assert Context(dir=str(tmp_path)).abs_path("/etc") == "/etc"
