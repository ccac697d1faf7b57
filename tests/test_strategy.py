import pytest

from pacdef.backend.base import Backend
from pacdef.group import Group
from pacdef.package import Package
from pacdef.review.strategy import Strategy


class FakeBackend(Backend):
    binary = "fake"
    section = "fake"
    supports_as_dependency = True

    def __init__(self, code=0):
        super().__init__()
        self.code = code
        self.calls = []

    def get_all_installed_packages(self):
        return set()

    def get_explicitly_installed_packages(self):
        return set()

    def remove_packages(self, packages, noconfirm):
        self.calls.append(("remove", list(packages), noconfirm))
        return self.code

    def make_dependency(self, packages):
        self.calls.append(("dependency", list(packages)))
        return self.code


def test_nothing_to_do():
    strategy = Strategy(FakeBackend())
    assert strategy.nothing_to_do()
    assert strategy.format() == ""


def test_show_prints_nothing_without_actions(capsys):
    Strategy(FakeBackend()).show()
    assert capsys.readouterr().out == ""


def test_format_lists_deletions():
    strategy = Strategy(FakeBackend(), delete=[Package("foo"), Package("bar")])
    assert not strategy.nothing_to_do()
    assert strategy.format() == "[fake]\ndelete:\n  foo\n  bar"


def test_format_lists_group_assignments(tmp_path):
    group = Group("base", set(), tmp_path / "base")
    strategy = Strategy(FakeBackend(), assign_group=[(Package("foo"), group)])
    assert strategy.format().endswith("  foo -> base")


def test_execute_calls_backend():
    backend = FakeBackend()
    Strategy(backend, delete=[Package("a")], as_dependency=[Package("b")]).execute()
    assert backend.calls == [("remove", [Package("a")], False), ("dependency", [Package("b")])]


def test_execute_raises_on_failure():
    backend = FakeBackend(code=1)
    with pytest.raises(RuntimeError):
        Strategy(backend, delete=[Package("a")], as_dependency=[Package("b")]).execute()
    assert backend.calls == [("remove", [Package("a")], False)]


def test_execute_writes_group_file(tmp_path):
    path = tmp_path / "base"
    path.write_text("[fake]\nbar\n", encoding="utf-8")
    group = Group("base", set(), path)
    Strategy(FakeBackend(), assign_group=[(Package("foo"), group)]).execute()
    assert path.read_text(encoding="utf-8") == "[fake]\nfoo\nbar\n"