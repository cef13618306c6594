"""Tests for calculator/ui/intro.py"""

import pytest

from calculator.ui import intro


class Rerun(Exception):
    pass


class FakeState(dict):
    __getattr__ = dict.get

    def __setattr__(self, name, value):
        self[name] = value


class FakePlaceholder:
    def markdown(self, *a, **k):
        pass


class FakeStreamlit:
    def __init__(self, state):
        self.session_state = state
        self.markdown_calls = 0

    def markdown(self, *a, **k):
        self.markdown_calls += 1

    def empty(self):
        return FakePlaceholder()

    def rerun(self):
        raise Rerun()


@pytest.fixture
def fake_st(monkeypatch):
    fake = FakeStreamlit(FakeState())
    monkeypatch.setattr(intro, "st", fake)
    monkeypatch.setattr(intro.time, "sleep", lambda s: None)
    return fake


def test_first_run_shows_intro_then_reruns(fake_st):
    with pytest.raises(Rerun):
        intro.render_intro()
    assert fake_st.session_state["intro_done"] is True
    assert fake_st.markdown_calls == 1


def test_later_runs_skip_intro(fake_st):
    fake_st.session_state["intro_done"] = True
    assert intro.render_intro() is None
    assert fake_st.markdown_calls == 0
