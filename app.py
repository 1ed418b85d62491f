from __future__ import annotations

import logging

import streamlit as st

from src.canje_engine import check_totals, compute_canjes
from src.demo_mode import ensure_inputs_initialized
from src.tier_config import CFG
from src.ui_components import (
    render_canjes_realizados,
    render_cuadro,
    render_header,
    render_inputs,
    render_notes,
    render_sidebar_controls,
    render_unit_price,
)


logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=CFG.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    st.set_page_config(page_title="App de Canjes por Escalas", layout="wide")
    ensure_inputs_initialized()

    render_header()
    render_sidebar_controls()

    left, right = st.columns([2, 1])
    with left:
        planks, amount = render_inputs()

    result = compute_canjes(planks, amount)
    planks_ok, amount_ok = check_totals(result, planks, amount)
    if result.rows and not (planks_ok and amount_ok):
        logger.warning("totales no cuadran: planchas=%s/%s monto=%s/%s", planks, result.total_planks, amount, result.total_amount)

    with right:
        render_unit_price(result, planks_ok, amount_ok)

    c1, c2 = st.columns(2)
    with c1:
        render_canjes_realizados(result)
    with c2:
        render_cuadro(result)

    render_notes()


if __name__ == "__main__":
    main()
