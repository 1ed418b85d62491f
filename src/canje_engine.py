from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from src.tier_config import CFG, TIERS, Tier, smallest_tier


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierAllocation:
    tier: Tier
    count: int

    @property
    def score(self) -> int:
        return self.count * self.tier.weight


@dataclass(frozen=True)
class AllocationResult:
    allocations: tuple[TierAllocation, ...]
    remaining: float
    total_score: int

    @property
    def is_empty(self) -> bool:
        return not self.allocations


@dataclass(frozen=True)
class ReconciliationRow:
    label: str
    repetitions: int
    qty_per_rep: float
    amount_per_rep: float


@dataclass(frozen=True)
class Reconciliation:
    rows: tuple[ReconciliationRow, ...]
    total_planks: float
    total_amount: float


@dataclass(frozen=True)
class CanjeResult:
    unit_price: float
    allocations: tuple[TierAllocation, ...]
    rows: tuple[ReconciliationRow, ...]
    total_planks: float
    total_amount: float
    total_score: int


EMPTY_ALLOCATION = AllocationResult(allocations=(), remaining=0.0, total_score=0)
EMPTY_RESULT = CanjeResult(
    unit_price=0.0,
    allocations=(),
    rows=(),
    total_planks=0.0,
    total_amount=0.0,
    total_score=0,
)


def round2(x: Any) -> float:
    """Redondeo a centavos, mitad hacia arriba (como Math.round)."""
    v = as_number(x)
    return float(np.floor(v * 100 + 0.5) / 100)


def as_number(x: Any) -> float:
    """
    Convierte la entrada del formulario a float.
    Lo no numérico, NaN o infinito se trata como 0 (no es un error).
    """
    try:
        v = float(x)
    except (TypeError, ValueError):
        logger.debug("entrada no numérica %r tratada como 0", x)
        return 0.0
    if not np.isfinite(v):
        logger.debug("entrada no finita %r tratada como 0", x)
        return 0.0
    return v


def allocate_tiers(count: float, tiers: Sequence[Tier] = TIERS) -> AllocationResult:
    """
    Reparte `count` planchas de mayor a menor escala (greedy):
    premios = floor(restante / tamaño), restante -= premios * tamaño.
    Devuelve también las escalas con 0 premios.
    """
    if count <= 0:
        return EMPTY_ALLOCATION

    remaining = count
    allocations: list[TierAllocation] = []
    for tier in tiers:
        awarded = int(np.floor(remaining / tier.size))
        allocations.append(TierAllocation(tier=tier, count=awarded))
        remaining -= awarded * tier.size

    total_score = sum(a.score for a in allocations)
    logger.debug(
        "asignación %s -> %s, sobrante=%s, premios=%d",
        count,
        [(a.tier.size, a.count) for a in allocations],
        remaining,
        total_score,
    )
    return AllocationResult(allocations=tuple(allocations), remaining=remaining, total_score=total_score)


def _anchor_index(allocations: Sequence[TierAllocation]) -> int:
    # última escala (la más pequeña) que sí tuvo premios
    last = -1
    for i, a in enumerate(allocations):
        if a.count > 0:
            last = i
    return last


def _control_totals(rows: Sequence[ReconciliationRow]) -> tuple[float, float]:
    planks = sum(r.qty_per_rep * r.repetitions for r in rows)
    amount = sum(r.amount_per_rep * r.repetitions for r in rows)
    return float(planks), float(amount)


def build_reconciliation(allocation: AllocationResult, unit_price: float) -> Reconciliation:
    """
    Arma el cuadro para el aplicativo.

    - Si ninguna escala tuvo premios, una sola fila con la escala más pequeña,
      1 repetición y todas las planchas.
    - Si hay sobrante, se reparte en partes iguales entre las repeticiones de la
      última escala con premios.
    Las escalas sin premios no generan fila.
    """
    if allocation.is_empty:
        return Reconciliation(rows=(), total_planks=0.0, total_amount=0.0)

    allocations = allocation.allocations
    remaining = allocation.remaining
    rows: list[ReconciliationRow] = []

    anchor = _anchor_index(allocations)
    if anchor < 0:
        # no alcanza ni para la escala más pequeña
        planks = sum(a.count * a.tier.size for a in allocations) + remaining
        rows.append(
            ReconciliationRow(
                label=smallest_tier().name,
                repetitions=1,
                qty_per_rep=planks,
                amount_per_rep=planks * unit_price,
            )
        )
    else:
        for idx, a in enumerate(allocations):
            if a.count == 0:
                continue
            qty = float(a.tier.size)
            if idx == anchor and remaining > 0:
                qty = a.tier.size + remaining / a.count
            rows.append(
                ReconciliationRow(
                    label=a.tier.name,
                    repetitions=a.count,
                    qty_per_rep=qty,
                    amount_per_rep=qty * unit_price,
                )
            )

    total_planks, total_amount = _control_totals(rows)
    return Reconciliation(rows=tuple(rows), total_planks=total_planks, total_amount=total_amount)


def compute_canjes(plank_count: Any, total_amount: Any) -> CanjeResult:
    """Flujo completo: precio unitario, canjes realizados y cuadro del aplicativo."""
    planks = as_number(plank_count)
    amount = as_number(total_amount)

    if planks <= 0 or amount < 0:
        logger.debug("sin cálculo para planchas=%s monto=%s", planks, amount)
        return EMPTY_RESULT

    unit_price = amount / planks
    if not np.isfinite(unit_price):
        logger.debug("precio unitario no finito para planchas=%s monto=%s", planks, amount)
        return EMPTY_RESULT

    allocation = allocate_tiers(planks)
    reconciliation = build_reconciliation(allocation, unit_price)

    return CanjeResult(
        unit_price=unit_price,
        allocations=allocation.allocations,
        rows=reconciliation.rows,
        total_planks=round2(reconciliation.total_planks),
        total_amount=round2(reconciliation.total_amount),
        total_score=allocation.total_score,
    )


def check_totals(result: CanjeResult, plank_count: Any, total_amount: Any) -> tuple[bool, bool]:
    """(planchas cuadran, monto cuadra) frente a lo digitado."""
    planks_ok = abs(as_number(plank_count) - result.total_planks) < CFG.tolerance
    amount_ok = abs(as_number(total_amount) - result.total_amount) < CFG.tolerance
    return planks_ok, amount_ok
