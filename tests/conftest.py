"""Shared fixtures for teamgraph tests."""

import os

import pytest

from .helpers import make_records


@pytest.fixture
def two_pairs():
    """Two separate teams of two players"""
    return make_records(("A", "X"), ("B", "X"), ("C", "Y"), ("D", "Y"))


@pytest.fixture
def one_team():
    return make_records(("A", "X"), ("B", "X"), ("C", "X"), ("D", "X"), ("E", "X"))


@pytest.fixture
def no_teammates():
    return make_records(("A", "X"), ("B", "Y"), ("C", "Z"))


@pytest.fixture
def roster_csv(tmp_path):
    """Write a roster CSV using the default column names"""
    def _write(rows, header="PLAYER,TEAM_pie", name="roster.csv"):
        path = tmp_path / name
        lines = [header] + [",".join(row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def clean_teamgraph_env(monkeypatch):
    """Keep TEAMGRAPH_* variables from the caller's shell out of tests"""
    for key in list(os.environ):
        if key.startswith("TEAMGRAPH_"):
            monkeypatch.delenv(key, raising=False)
