# Derived on read, never stored. Negative deltas are passed through unclamped.
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class ChargeMetrics:
    energy_kwh: float
    cost_amount: float


def compute(capacity_kwh: float, rate: float, start_pct: float, end_pct: float) -> ChargeMetrics:
    delta = end_pct - start_pct
    energy = float(capacity_kwh) * delta / 100.0
    return ChargeMetrics(energy_kwh=energy, cost_amount=energy * float(rate))


def compute_for(vehicle, charge) -> ChargeMetrics:
    return compute(vehicle.battery_capacity_kwh, vehicle.kwh_per_baht, charge.start_pct, charge.end_pct)


@dataclass(frozen=True)
class MetricsTotal:
    count: int
    energy_kwh: float
    cost_amount: float


def summarize(charges: Iterable) -> MetricsTotal:
    count = 0
    energy = 0.0
    cost = 0.0
    for c in charges:
        m = compute_for(c.vehicle, c)
        count += 1
        energy += m.energy_kwh
        cost += m.cost_amount
    return MetricsTotal(count=count, energy_kwh=energy, cost_amount=cost)
