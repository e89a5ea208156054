"""Tests for the public package API exports."""

import pgsql_builder


def test_public_names_are_exposed() -> None:
    """Every name in ``__all__`` should be importable from the top-level package."""

    for name in pgsql_builder.__all__:
        assert hasattr(pgsql_builder, name), name


def test_version_is_a_string() -> None:
    assert isinstance(pgsql_builder.__version__, str)
