from __future__ import annotations

import streamlit as st

from src.tier_config import CFG


PLANKS_KEY = "planchas"
AMOUNT_KEY = "monto"


def get_preset_options() -> list[str]:
    return [name for name, _, _ in CFG.demo_presets]


def get_preset(name: str) -> tuple[float, float] | None:
    for preset_name, planks, amount in CFG.demo_presets:
        if preset_name == name:
            return planks, amount
    return None


def ensure_inputs_initialized() -> None:
    """
    Valores iniciales del formulario: el primer ejemplo (75 planchas / S/. 7500).
    """
    _, planks, amount = CFG.demo_presets[0]
    if PLANKS_KEY not in st.session_state:
        st.session_state[PLANKS_KEY] = planks
    if AMOUNT_KEY not in st.session_state:
        st.session_state[AMOUNT_KEY] = amount


def apply_demo_preset(name: str) -> None:
    preset = get_preset(name)
    if preset is None:
        return
    st.session_state[PLANKS_KEY], st.session_state[AMOUNT_KEY] = preset


def reset_demo() -> None:
    for k in [PLANKS_KEY, AMOUNT_KEY]:
        if k in st.session_state:
            del st.session_state[k]
