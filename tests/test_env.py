import pytest

from pacdef.env import get_editor, get_single_var


def test_editor_prefers_editor_over_visual(monkeypatch):
    monkeypatch.setenv("EDITOR", "vim")
    monkeypatch.setenv("VISUAL", "code")
    assert get_editor() == "vim"


def test_editor_falls_back_to_visual(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.setenv("VISUAL", "code")
    assert get_editor() == "code"


def test_editor_missing_raises(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.delenv("VISUAL", raising=False)
    with pytest.raises(RuntimeError, match="could not find editor"):
        get_editor()


def test_single_var_set(monkeypatch):
    monkeypatch.setenv("RUST_BACKTRACE", "full")
    assert get_single_var("RUST_BACKTRACE") == "full"


def test_single_var_unset(monkeypatch):
    monkeypatch.delenv("RUST_BACKTRACE", raising=False)
    assert get_single_var("RUST_BACKTRACE") is None