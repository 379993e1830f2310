"""Tests for the OutputStrategy base class."""

import pytest

from dirwalk.output_strategies import JSONOutputStrategy, TextOutputStrategy, TreeOutputStrategy
from dirwalk.output_strategies.base_strategy import OutputStrategy
from dirwalk.types import EntryKind
from dirwalk.walker import Entry, WalkError


class NamesOnly(OutputStrategy):
    def format_entry(self, entry):
        return entry.name + "\n"

    def format_error(self, error):
        return ""


def test_subclass_needs_only_the_two_formatters():
    strategy = NamesOnly("/srv/data")

    assert strategy.root_path == "/srv/data"
    assert strategy.format_entry(Entry(0, "/srv/data/a", "a", EntryKind.FILE)) == "a\n"
    assert strategy.format_error(WalkError(depth=0, path="/srv/data", error=OSError())) == ""
    assert strategy.format_end() == ""


def test_abstract_methods_are_the_formatters():
    assert OutputStrategy.__abstractmethods__ == frozenset({"format_entry", "format_error"})

    with pytest.raises(TypeError):
        OutputStrategy("/srv/data")  # type: ignore[abstract]


@pytest.mark.parametrize("strategy_class", [TextOutputStrategy, JSONOutputStrategy, TreeOutputStrategy])
def test_builtin_strategies_expose_no_file_naming(strategy_class):
    assert not hasattr(strategy_class("/srv/data"), "get_file_extension")
