from __future__ import annotations

import logging
from typing import Protocol, Sequence

import pandas as pd

from src.canje_engine import CanjeResult, ReconciliationRow, round2
from src.tier_config import CFG


logger = logging.getLogger(__name__)

ALLOCATION_COLUMNS = ["Escala", "Tamaño", "Premios", "Peso", "Premios × Peso"]
TSV_COLUMNS = ["Relevos", "¿Repetir Canje?", "Planchas", f"Monto {CFG.currency}"]
CSV_COLUMNS = ["Relevos", "Repetir", "Planchas", "Monto"]


class TextSink(Protocol):
    def write(self, text: str) -> None: ...


class FileSink(Protocol):
    def write(self, filename: str, data: bytes, mime_type: str) -> None: ...


def allocations_frame(result: CanjeResult) -> pd.DataFrame:
    """Tabla de canjes realizados (incluye escalas con 0 premios)."""
    rows = [
        {
            "Escala": a.tier.name,
            "Tamaño": a.tier.size,
            "Premios": a.count,
            "Peso": a.tier.weight,
            "Premios × Peso": a.score,
        }
        for a in result.allocations
    ]
    return pd.DataFrame(rows, columns=ALLOCATION_COLUMNS)


def rows_frame(rows: Sequence[ReconciliationRow], columns: Sequence[str] = TSV_COLUMNS) -> pd.DataFrame:
    label_col, rep_col, qty_col, amount_col = columns
    df = pd.DataFrame(
        {
            label_col: [r.label for r in rows],
            rep_col: [int(r.repetitions) for r in rows],
            qty_col: [round2(r.qty_per_rep) for r in rows],
            amount_col: [round2(r.amount_per_rep) for r in rows],
        },
        columns=list(columns),
    )
    return df.astype({rep_col: "int64", qty_col: "float64", amount_col: "float64"})


def _serialize(rows: Sequence[ReconciliationRow], columns: Sequence[str], sep: str) -> str:
    df = rows_frame(rows, columns)
    return df.to_csv(index=False, sep=sep, float_format="%.2f", lineterminator="\n")


def rows_to_tsv(rows: Sequence[ReconciliationRow]) -> str:
    # texto para pegar en el aplicativo: sin salto de línea final
    return _serialize(rows, TSV_COLUMNS, "\t").rstrip("\n")


def rows_to_csv_bytes(rows: Sequence[ReconciliationRow]) -> bytes:
    return _serialize(rows, CSV_COLUMNS, ",").encode("utf-8")


def copy_rows(rows: Sequence[ReconciliationRow], sink: TextSink) -> str:
    text = rows_to_tsv(rows)
    sink.write(text)
    logger.info("copiadas %d filas del cuadro", len(rows))
    return text


def download_rows_csv(rows: Sequence[ReconciliationRow], sink: FileSink, filename: str = CFG.csv_filename) -> bytes:
    data = rows_to_csv_bytes(rows)
    sink.write(filename, data, CFG.csv_mime)
    logger.debug("CSV %s generado (%d filas)", filename, len(rows))
    return data
