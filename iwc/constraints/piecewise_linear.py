# iwc/constraints/piecewise_linear.py
"""Кусочно‑линейная зависимость скорости закачки/отбора от объёма.

Идея
----
1. **Кривая.** По набору точек *(V_i, [r_min,i, r_max,i])* строятся две
   кусочно‑линейные функции объёма: максимальная скорость (закачка) и
   минимальная (отбор).  Точки сортируются по объёму; за пределами
   крайних точек продолжается ближайший отрезок.

2. **Достижимость.** При удержании ``1 - loss`` объём следующего периода
   после действия с крайней скоростью равен

       f(V) = V·(1 − loss) + r_min(V)   – максимальный отбор,
       g(V) = V·(1 − loss) + r_max(V)   – максимальная закачка.

   Обе функции кусочно‑линейны с теми же узлами и считаются
   неубывающими по V.

3. **Верхняя граница** текущего объёма – наибольший V ∈ [L, U], при
   котором f(V) ≤ U'.  Если уже из U достижим [L', U'], ответ – U.
   Иначе узлы (V, f(V)) перебираются сверху вниз до первой пары,
   «зажимающей» U', и внутри неё решается линейное уравнение.

4. **Нижняя граница** – симметрично: наименьший V, при котором
   g(V) ≥ L', перебор узлов снизу вверх.

Перебор выполняется над кортежем узлов, ограниченным отрезком [L, U]
(крайние узлы – сами L и U), поэтому найденная граница всегда лежит в
[L, U].
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from . import InjectWithdrawConstraint, validate_space_args
from ..core.bound_result import BoundResult
from ..core.interpolation import (
    Interpolator,
    interpolate_linear_and_solve,
    linear_extrap_interp,
)
from ..domain.rate_range import InjectWithdrawRange
from ..domain.rate_sample import InjectWithdrawRangeByInventory
from ..errors import MalformedConfigurationError

logger = logging.getLogger(__name__)

Knot = Tuple[float, float]  # (объём, объём следующего периода после действия)


class PiecewiseLinearInjectWithdrawConstraint(InjectWithdrawConstraint):
    """Ограничение закачки/отбора, линейное между заданными объёмами."""

    # ------------------------------------------------------------------
    # Конструктор
    # ------------------------------------------------------------------

    def __init__(
        self,
        inject_withdraw_ranges: Iterable[InjectWithdrawRangeByInventory],
        interp: Interpolator = linear_extrap_interp,
    ) -> None:
        if inject_withdraw_ranges is None:
            raise TypeError("inject_withdraw_ranges must not be None.")

        # Собственная отсортированная копия; исходная коллекция больше не нужна
        self._ranges: Tuple[InjectWithdrawRangeByInventory, ...] = tuple(
            sorted(inject_withdraw_ranges, key=lambda r: r.inventory)
        )
        if len(self._ranges) < 2:
            raise MalformedConfigurationError(
                "Inject/withdraw ranges collection must contain at least two elements."
            )

        self._inventories = np.array([r.inventory for r in self._ranges], dtype=float)
        if np.any(np.diff(self._inventories) <= 0.0):
            raise MalformedConfigurationError(
                "Inject/withdraw ranges must have distinct inventory values."
            )
        self._max_rates = np.array(
            [r.inject_withdraw_range.max_inject_withdraw_rate for r in self._ranges],
            dtype=float,
        )
        self._min_rates = np.array(
            [r.inject_withdraw_range.min_inject_withdraw_rate for r in self._ranges],
            dtype=float,
        )
        for arr in (self._inventories, self._max_rates, self._min_rates):
            arr.setflags(write=False)

        self.interp = interp

    # ------------------------------------------------------------------
    # Кривая скоростей
    # ------------------------------------------------------------------

    @property
    def inject_withdraw_ranges(self) -> Tuple[InjectWithdrawRangeByInventory, ...]:
        """Точки кривой, отсортированные по объёму."""
        return self._ranges

    def get_inject_withdraw_range(self, inventory: float) -> InjectWithdrawRange:
        if not math.isfinite(inventory):
            raise ValueError(f"Inventory must be finite, got {inventory}.")
        max_rate = self.interp(inventory, self._inventories, self._max_rates)
        min_rate = self.interp(inventory, self._inventories, self._min_rates)
        return InjectWithdrawRange(min_rate, max_rate)

    def to_frame(self) -> pd.DataFrame:
        """Точки кривой в виде таблицы (для отчётов и графиков)."""
        return pd.DataFrame(
            {
                "inventory": self._inventories,
                "min_rate": self._min_rates,
                "max_rate": self._max_rates,
            }
        )

    # ------------------------------------------------------------------
    # Поиск границ допустимого объёма
    # ------------------------------------------------------------------

    def inventory_space_upper_bound(
        self,
        next_period_inventory_space_lower_bound: float,
        next_period_inventory_space_upper_bound: float,
        current_period_min_inventory: float,
        current_period_max_inventory: float,
        inventory_percent_loss: float,
    ) -> BoundResult:
        validate_space_args(
            next_period_inventory_space_lower_bound,
            next_period_inventory_space_upper_bound,
            current_period_min_inventory,
            current_period_max_inventory,
            inventory_percent_loss,
        )
        retention = 1.0 - inventory_percent_loss
        at_max = self.get_inject_withdraw_range(current_period_max_inventory)
        next_max = current_period_max_inventory * retention + at_max.max_inject_withdraw_rate
        next_min = current_period_max_inventory * retention + at_max.min_inject_withdraw_rate

        if (next_min <= next_period_inventory_space_upper_bound
                and next_period_inventory_space_lower_bound <= next_max):
            logger.debug(
                "upper bound: next space [%.6g, %.6g] reachable from max inventory %.6g",
                next_period_inventory_space_lower_bound,
                next_period_inventory_space_upper_bound,
                current_period_max_inventory,
            )
            return BoundResult.feasible(current_period_max_inventory)

        knots = self._reachable_knots(
            current_period_min_inventory, current_period_max_inventory,
            retention, self._min_rates,
        )
        target = next_period_inventory_space_upper_bound
        bracket = _first_straddling(reversed(list(zip(knots, knots[1:]))), target)
        if bracket is None:
            logger.warning(
                "upper bound: no inventory in [%.6g, %.6g] can reach next period space [%.6g, %.6g]",
                current_period_min_inventory,
                current_period_max_inventory,
                next_period_inventory_space_lower_bound,
                next_period_inventory_space_upper_bound,
            )
            return BoundResult.infeasible()

        (lo_inv, lo_val), (hi_inv, hi_val) = bracket
        if lo_val == hi_val:
            inventory = hi_inv  # плоский участок: берём наибольший объём
        else:
            inventory = interpolate_linear_and_solve(lo_inv, lo_val, hi_inv, hi_val, target)
        logger.debug("upper bound: solved %.6g in bracket [%.6g, %.6g]", inventory, lo_inv, hi_inv)
        return BoundResult.feasible(inventory)

    def inventory_space_lower_bound(
        self,
        next_period_inventory_space_lower_bound: float,
        next_period_inventory_space_upper_bound: float,
        current_period_min_inventory: float,
        current_period_max_inventory: float,
        inventory_percent_loss: float,
    ) -> BoundResult:
        validate_space_args(
            next_period_inventory_space_lower_bound,
            next_period_inventory_space_upper_bound,
            current_period_min_inventory,
            current_period_max_inventory,
            inventory_percent_loss,
        )
        retention = 1.0 - inventory_percent_loss
        at_min = self.get_inject_withdraw_range(current_period_min_inventory)
        next_max = current_period_min_inventory * retention + at_min.max_inject_withdraw_rate
        next_min = current_period_min_inventory * retention + at_min.min_inject_withdraw_rate

        if (next_min <= next_period_inventory_space_upper_bound
                and next_period_inventory_space_lower_bound <= next_max):
            logger.debug(
                "lower bound: next space [%.6g, %.6g] reachable from min inventory %.6g",
                next_period_inventory_space_lower_bound,
                next_period_inventory_space_upper_bound,
                current_period_min_inventory,
            )
            return BoundResult.feasible(current_period_min_inventory)

        knots = self._reachable_knots(
            current_period_min_inventory, current_period_max_inventory,
            retention, self._max_rates,
        )
        target = next_period_inventory_space_lower_bound
        bracket = _first_straddling(zip(knots, knots[1:]), target)
        if bracket is None:
            logger.warning(
                "lower bound: no inventory in [%.6g, %.6g] can reach next period space [%.6g, %.6g]",
                current_period_min_inventory,
                current_period_max_inventory,
                next_period_inventory_space_lower_bound,
                next_period_inventory_space_upper_bound,
            )
            return BoundResult.infeasible()

        (lo_inv, lo_val), (hi_inv, hi_val) = bracket
        if lo_val == hi_val:
            inventory = lo_inv  # плоский участок: берём наименьший объём
        else:
            inventory = interpolate_linear_and_solve(lo_inv, lo_val, hi_inv, hi_val, target)
        logger.debug("lower bound: solved %.6g in bracket [%.6g, %.6g]", inventory, lo_inv, hi_inv)
        return BoundResult.feasible(inventory)

    # ------------------------------------------------------------------
    # Вспомогательные методы
    # ------------------------------------------------------------------

    def _reachable_knots(
        self,
        min_inventory: float,
        max_inventory: float,
        retention: float,
        rates: np.ndarray,
    ) -> Tuple[Knot, ...]:
        """Узлы (V, V·retention + r(V)) на отрезке [min_inventory, max_inventory].

        Крайние узлы – сами границы отрезка, внутренние – точки кривой,
        лежащие строго внутри.  Функция линейна между узлами, так что
        вставка границ её не меняет.
        """
        def knot(inventory: float) -> Knot:
            rate = self.interp(inventory, self._inventories, rates)
            return inventory, inventory * retention + rate

        if min_inventory == max_inventory:
            return (knot(min_inventory),)
        inner = tuple(
            (float(v), float(v) * retention + float(r))
            for v, r in zip(self._inventories, rates)
            if min_inventory < v < max_inventory
        )
        return (knot(min_inventory),) + inner + (knot(max_inventory),)

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PiecewiseLinearInjectWithdrawConstraint):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._ranges)!r})"


def _first_straddling(
    brackets: Iterable[Tuple[Knot, Knot]], target: float
) -> Optional[Tuple[Knot, Knot]]:
    """Первая пара соседних узлов, значения которых «зажимают» *target*."""
    return next(
        ((lo, hi) for lo, hi in brackets if lo[1] <= target <= hi[1]),
        None,
    )
