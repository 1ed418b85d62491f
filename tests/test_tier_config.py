import dataclasses

import pytest

from src.canje_engine import compute_canjes
from src.tier_config import CFG, TIERS, smallest_tier


def test_tiers_fixed_descending_order():
    assert [(t.id, t.name, t.size, t.weight) for t in TIERS] == [
        (3, "Escala 3", 50, 12),
        (2, "Escala 2", 35, 6),
        (1, "Escala 1", 10, 1),
    ]
    sizes = [t.size for t in TIERS]
    assert sizes == sorted(sizes, reverse=True)
    assert smallest_tier().size == 10


def test_tiers_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        TIERS[0].size = 40
    assert smallest_tier() is TIERS[-1]


def test_demo_presets_reconcile():
    assert CFG.demo_presets[0][1:] == (75.0, 7500.0)
    for _, planks, amount in CFG.demo_presets:
        result = compute_canjes(planks, amount)
        assert result.total_planks == pytest.approx(planks, abs=CFG.tolerance)
        assert result.total_amount == pytest.approx(amount, abs=CFG.tolerance)
