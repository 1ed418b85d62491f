from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from src.canje_engine import CanjeResult, round2
from src.demo_mode import (
    AMOUNT_KEY,
    PLANKS_KEY,
    apply_demo_preset,
    get_preset_options,
    reset_demo,
)
from src.row_export import allocations_frame, copy_rows, download_rows_csv, rows_frame
from src.tier_config import CFG, TIERS


class StreamlitTextSink:
    """Muestra el texto en un bloque de código (con botón de copiar)."""

    def write(self, text: str) -> None:
        st.code(text, language=None)


class StreamlitFileSink:
    def __init__(self, label: str = "Descargar CSV") -> None:
        self.label = label

    def write(self, filename: str, data: bytes, mime_type: str) -> None:
        st.download_button(self.label, data=data, file_name=filename, mime=mime_type, use_container_width=True)


def render_header() -> None:
    st.title("🎁 App de Canjes por Escalas")
    st.caption("Optimiza canjes y genera el cuadro del aplicativo")


def render_sidebar_controls() -> None:
    with st.sidebar:
        st.subheader("Controles")
        demo_on = st.toggle("Modo Demo", value=True)

        if demo_on:
            st.markdown("**Ejemplos**")
            for name in get_preset_options():
                st.button(name, use_container_width=True, on_click=apply_demo_preset, args=(name,))
            st.button("Reset", on_click=reset_demo)

        st.divider()
        st.markdown("**Escalas**")
        for t in _tiers_caption():
            st.caption(t)


def _tiers_caption() -> list[str]:
    return [f"{t.name}: {t.size} planchas → 1 premio (peso {t.weight})" for t in TIERS]


def _fmt_money(x: float) -> str:
    return f"{CFG.currency} {round2(x):,.2f}"


def _badge(ok: bool, text: str) -> str:
    return f"{'🟢' if ok else '🔴'} {text}"


def render_inputs() -> tuple[float, float]:
    cols = st.columns(2)
    with cols[0]:
        with st.container(border=True):
            planks = st.number_input("Planchas compradas", min_value=0.0, step=1.0, key=PLANKS_KEY)
            st.caption("Ejemplo: 75")
    with cols[1]:
        with st.container(border=True):
            amount = st.number_input(f"Monto total ({CFG.currency})", min_value=0.0, step=100.0, key=AMOUNT_KEY)
            st.caption("Ejemplo: 7500")
    return planks, amount


def render_unit_price(result: CanjeResult, planks_ok: bool, amount_ok: bool) -> None:
    with st.container(border=True):
        st.metric("Precio por plancha", _fmt_money(result.unit_price))
        st.markdown(f"{_badge(planks_ok, 'Planchas cuadran')} &nbsp; {_badge(amount_ok, 'Monto cuadra')}")


def _score_chart(result: CanjeResult) -> go.Figure:
    fig = go.Figure(
        data=[
            go.Bar(
                x=[a.tier.name for a in result.allocations],
                y=[a.score for a in result.allocations],
            )
        ]
    )
    fig.update_layout(
        title="Premios × Peso por escala",
        xaxis_title="Escala",
        yaxis_title="Premios × Peso",
        height=320,
        margin=dict(l=20, r=20, t=60, b=20),
    )
    return fig


def render_canjes_realizados(result: CanjeResult) -> None:
    with st.container(border=True):
        st.markdown("**Canjes realizados (maximizando premios)**")
        if not result.allocations:
            st.info("Ingresa planchas y monto para ver los canjes.")
            return
        st.dataframe(allocations_frame(result), use_container_width=True, hide_index=True)
        st.markdown(f"**Total Premios:** {result.total_score}")
        st.plotly_chart(_score_chart(result), use_container_width=True)


def render_cuadro(result: CanjeResult) -> None:
    with st.container(border=True):
        st.markdown("**Cuadro para el aplicativo**")
        if not result.rows:
            st.info("Ingresa planchas y monto para ver el desglose.")
            return

        st.dataframe(rows_frame(result.rows), use_container_width=True, hide_index=True)
        c1, c2 = st.columns(2)
        c1.metric("Total planchas", f"{result.total_planks:,.2f}")
        c2.metric(f"Total monto {CFG.currency}", f"{result.total_amount:,.2f}")

        a1, a2 = st.columns(2)
        with a1:
            show_copy = st.toggle("Copiar filas")
        with a2:
            download_rows_csv(result.rows, StreamlitFileSink())
        if show_copy:
            copy_rows(result.rows, StreamlitTextSink())


def render_notes() -> None:
    with st.expander("Notas", expanded=False):
        st.markdown(
            "- El sistema maximiza siempre de la escala más alta a la más baja.\n"
            "- Si hay sobrante que no completa una escala, se distribuye equitativamente "
            "en la última escala usada.\n"
            "- Los totales del cuadro del aplicativo deben cuadrar con lo digitado "
            "(indicadores verdes arriba)."
        )
