import curses

import pytest

import main
from config import get_settings
from errors import InputError, RenderError


@pytest.fixture()
def terminals(monkeypatch, make_terminal):
    made = []

    def factory(**kwargs):
        def _build():
            term = make_terminal(**kwargs)
            made.append(term)
            return term

        monkeypatch.setattr(main, "CursesTerminal", _build)
        return made

    return factory


def test_clean_quit(terminals, capsys):
    made = terminals(script=[(0.0, curses.KEY_RIGHT), (0.0, ord("q"))])

    assert main.main([]) == 0

    term = made[0]
    assert term.enter_calls == 1
    assert term.restore_calls == 1
    assert "Inner 1" in "\n".join(term.frames[-1])
    assert "Exited cleanly." in capsys.readouterr().out


def test_layout_flag_selects_inventory(terminals):
    made = terminals(size=(10, 100))

    assert main.main(["--layout", "inventory"]) == 0
    assert "Inventory" in made[0].frames[0][0]


def test_layout_from_environment(terminals, monkeypatch):
    monkeypatch.setenv("FLUX_LAYOUT", "inventory")
    made = terminals(size=(10, 100))

    assert main.main([]) == 0
    assert "Inventory" in made[0].frames[0][0]


def test_render_error_restores_and_fails(terminals, capsys):
    made = terminals(fail_on_draw=RenderError("terminal went away"))

    assert main.main([]) == 1
    assert made[0].restore_calls == 1
    assert "Error: terminal went away" in capsys.readouterr().err


def test_input_error_restores_and_fails(terminals, capsys):
    made = terminals(fail_on_poll=InputError("stdin closed"))

    assert main.main([]) == 1
    assert made[0].restore_calls == 1
    assert "stdin closed" in capsys.readouterr().err


def test_keyboard_interrupt(terminals):
    made = terminals(fail_on_draw=KeyboardInterrupt())

    assert main.main([]) == 130
    assert made[0].restore_calls == 1


def test_bad_layout_is_rejected():
    with pytest.raises(SystemExit):
        main.main(["--layout", "map"])


def test_bad_layout_env_is_rejected(monkeypatch):
    monkeypatch.setenv("FLUX_LAYOUT", "map")
    with pytest.raises(SystemExit):
        main.main([])


def test_nonpositive_tick_rate_is_rejected():
    with pytest.raises(SystemExit):
        main.main(["--tick-rate", "0"])


def test_settings_defaults():
    settings = get_settings()
    assert settings.tick_rate_ms == 250
    assert settings.tick_rate == pytest.approx(0.25)
    assert settings.layout == "tabs"
    assert settings.log_file is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("FLUX_TICK_RATE_MS", "100")
    monkeypatch.setenv("FLUX_LOG_FILE", "/tmp/flux.log")
    settings = get_settings()
    assert settings.tick_rate == pytest.approx(0.1)
    assert settings.log_file == "/tmp/flux.log"
