"""Tests for column display."""

import pytest

from pooledtable import NA, PooledColumn, format_column, print_column
from pooledtable import config


class TestFormatColumn:
    def test_short_column(self):
        col = PooledColumn.from_values(["a", NA, "b"])
        assert format_column(col) == "\n".join([
            "3-element str PooledColumn",
            " a",
            " NA",
            " b",
            "levels: [a, b, NA]",
        ])

    def test_truncated(self):
        col = PooledColumn.from_values(list(range(10)))
        lines = format_column(col, max_lines=4).splitlines()
        assert lines[1:3] == [" 0", " 1"]
        assert lines[3] == " ⋮"
        assert lines[4:6] == [" 8", " 9"]

    def test_floats(self):
        col = PooledColumn.from_values([0.0, 1.23456], eltype=float)
        lines = format_column(col).splitlines()
        assert lines[0] == "2-element float PooledColumn"
        assert lines[1:3] == [" 0", " 1.23"]

    def test_empty(self):
        assert format_column(PooledColumn.missing(0)) == "0-element Any PooledColumn\nlevels: []"

    def test_too_many_rows(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_FORMAT_ROWS", 2)
        with pytest.raises(ValueError, match="exceeds limit"):
            format_column(PooledColumn.from_values([1, 2, 3]))

    def test_print_column(self, capsys):
        print_column(PooledColumn.from_values([1]))
        out = capsys.readouterr().out
        assert "1-element int PooledColumn" in out
        assert "levels: [1]" in out

    def test_repr(self):
        col = PooledColumn.from_values(["a", NA])
        assert repr(col) == "PooledColumn(['a', NA], levels=['a', NA])"
