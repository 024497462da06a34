import pytest

from cmdtree.sources import (
    ArgumentSource,
    IteratorArgumentSource,
    ListArgumentSource,
    SystemArgumentSource,
    as_source,
)


def drain(source):
    tokens = []
    while (token := source.next()) is not None:
        tokens.append(token)
    return tokens


def test_list_source():
    source = ListArgumentSource(["prog", "a", ""])
    assert drain(source) == ["prog", "a", ""]
    assert source.next() is None
    assert repr(source) == "ListArgumentSource(items=3, index=3)"


def test_system_source(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "--flag"])
    assert drain(SystemArgumentSource()) == ["prog", "--flag"]


def test_iterator_source():
    source = IteratorArgumentSource(token for token in ["x", "y"])
    assert drain(source) == ["x", "y"]
    assert source.next() is None


def test_as_source(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog"])
    existing = ListArgumentSource([])
    assert as_source(existing) is existing
    assert isinstance(as_source(["a"]), ListArgumentSource)
    assert isinstance(as_source(iter(["a"])), IteratorArgumentSource)
    assert isinstance(as_source(None), SystemArgumentSource)
    assert isinstance(as_source(["a"]), ArgumentSource)
    with pytest.raises(TypeError):
        as_source("prog a b")
