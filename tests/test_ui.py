import pytest

from drillrunner import ui


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("NO_EMOJI", "1")


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_bold_without_color_is_unchanged(plain):
    assert ui.bold("hello") == "hello"
    assert ui.blue(12) == "12"


def test_bold_wraps_text_in_escape_codes(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    styled = ui.bold("hello")
    assert styled.startswith("\x1b[1m")
    assert styled.endswith("\x1b[0m")
    assert "hello" in styled


def test_blue_differs_from_bold(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert ui.blue("x") != ui.bold("x")
    assert "x" in ui.blue("x")


def test_warn_plain(plain, capsys):
    ui.warn("Ran thing with errors")
    assert capsys.readouterr().out == "! Ran thing with errors\n"


def test_success_plain(plain, capsys):
    ui.success("Successfully ran thing")
    assert capsys.readouterr().out == "✓ Successfully ran thing\n"


def test_warn_uses_emoji_when_allowed(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("careful")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.rstrip("\n").endswith("careful")


def test_success_uses_emoji_when_allowed(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("done")
    assert capsys.readouterr().out.startswith("✅ done")