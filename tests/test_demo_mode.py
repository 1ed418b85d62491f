import pytest

from src import demo_mode
from src.demo_mode import AMOUNT_KEY, PLANKS_KEY, apply_demo_preset, get_preset, get_preset_options, reset_demo
from src.tier_config import CFG


@pytest.fixture
def session_state(monkeypatch):
    state = {}
    monkeypatch.setattr(demo_mode.st, "session_state", state)
    return state


def test_preset_options_follow_config():
    assert get_preset_options() == [name for name, _, _ in CFG.demo_presets]


def test_get_preset():
    assert get_preset("Ejemplo base (75 / 7500)") == (75.0, 7500.0)
    assert get_preset("no existe") is None


def test_apply_preset_only_sets_form_inputs(session_state):
    apply_demo_preset("No alcanza Escala 1 (7 / 350)")
    assert session_state == {PLANKS_KEY: 7.0, AMOUNT_KEY: 350.0}

    apply_demo_preset("no existe")
    assert session_state == {PLANKS_KEY: 7.0, AMOUNT_KEY: 350.0}

    reset_demo()
    assert session_state == {}
