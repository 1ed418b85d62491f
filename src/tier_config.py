from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Tier:
    id: int
    name: str
    size: int  # planchas necesarias para 1 premio
    weight: int  # peso del premio en el total


# Orden fijo: de la escala más grande a la más pequeña
TIERS: tuple[Tier, ...] = (
    Tier(id=3, name="Escala 3", size=50, weight=12),
    Tier(id=2, name="Escala 2", size=35, weight=6),
    Tier(id=1, name="Escala 1", size=10, weight=1),
)


@dataclass(frozen=True)
class CanjesConfig:
    currency: str = "S/."
    tolerance: float = 0.01
    csv_filename: str = "aplicativo_canjes.csv"
    csv_mime: str = "text/csv;charset=utf-8"
    log_level: str = os.getenv("CANJES_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    # Ejemplos precargados en el formulario: (nombre, planchas, monto)
    demo_presets: tuple[tuple[str, float, float], ...] = (
        ("Ejemplo base (75 / 7500)", 75.0, 7500.0),
        ("Sobrante en Escala 1 (84 / 8400)", 84.0, 8400.0),
        ("Dos escalas (135 / 10125)", 135.0, 10125.0),
        ("No alcanza Escala 1 (7 / 350)", 7.0, 350.0),
    )


CFG = CanjesConfig()


def smallest_tier() -> Tier:
    return TIERS[-1]
