from __future__ import annotations

import pytest

from pgsql_builder import ArgumentCountError, Args, Placeholder


def test_placeholder_renders_positional_syntax() -> None:
    assert str(Placeholder(42)) == "$42"
    assert Placeholder(3) == 3


def test_use_deduplicates_equal_values() -> None:
    args = Args()
    assert args.values() == []

    assert args.use(42) == Placeholder(1)
    assert args.values() == [42]

    assert args.use(7) == Placeholder(2)
    assert args.values() == [42, 7]

    assert args.use(42) == Placeholder(1)
    assert args.values() == [42, 7]


def test_use_compares_by_value_not_identity() -> None:
    args = Args()
    first = args.use("".join(["ab", "c"]))
    second = args.use("abc")
    assert first == second
    assert args.values() == ["abc"]


def test_use_keeps_values_of_different_types_apart() -> None:
    args = Args()
    assert args.use(1) == 1
    assert args.use(True) == 2
    assert args.use(1.0) == 3
    assert args.values() == [1, True, 1.0]
    assert type(args.values()[1]) is bool


def test_unhashable_values_get_a_placeholder_per_use() -> None:
    args = Args()
    assert args.use([1, 2]) == 1
    assert args.use([1, 2]) == 2
    assert args.use({"a": 1}) == 3
    assert args.values() == [[1, 2], [1, 2], {"a": 1}]


def test_placeholders_increase_on_first_use() -> None:
    args = Args()
    seen = [args.use(v) for v in ["a", "b", "a", "c", "b", "d"]]
    assert seen == [1, 2, 1, 3, 2, 4]
    assert args.values() == ["a", "b", "c", "d"]


def test_values_returns_a_snapshot() -> None:
    args = Args()
    args.use(1)
    snapshot = args.values()
    snapshot.append("mutated")
    args.use(2)
    assert args.values() == [1, 2]


def test_format_uses_global_numbering() -> None:
    args = Args()
    args.use(42)
    args.use(7)
    assert args.format("array[?, ?, ?]", 1, 42, 7) == "array[$3, $1, $2]"


def test_format_numbering_follows_first_use_not_template_position() -> None:
    args = Args()
    args.use(1)
    assert args.format("?, ?", 2, 1) == "$2, $1"
    assert args.values() == [1, 2]


def test_format_without_markers_returns_template() -> None:
    args = Args()
    assert args.format("now()") == "now()"
    assert args.values() == []


@pytest.mark.parametrize(
    "template, values",
    [
        ("a = ? and b = ?", (1,)),
        ("a = ?", (1, 2)),
        ("a = 1", (1,)),
    ],
)
def test_format_rejects_argument_count_mismatch(template: str, values: tuple) -> None:
    args = Args()
    with pytest.raises(ArgumentCountError, match="markers"):
        args.format(template, *values)
    assert args.values() == []


def test_argument_count_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Args().format("?")
