# iwc/core/inventory_space.py
"""Расчёт допустимого диапазона объёмов хранилища по периодам.

* Принимает на вход:
  - ограничение закачки/отбора (любая реализация
    :class:`~iwc.constraints.InjectWithdrawConstraint`),
  - минимальный и максимальный объём для периодов ``0 … T-1``,
  - начальный объём (период 0) и допустимый диапазон конечного
    объёма (период ``T``),
  - долю потерь объёма за период.
* На выходе формируется **DataFrame** с диапазоном
  ``[inventory_lower, inventory_upper]`` для каждого периода ``0 … T``.

Расчёт выполняется в два прохода:
1. **Прямой** – от начального объёма вперёд: какой объём вообще
   достижим к каждому периоду при крайних скоростях закачки/отбора.
2. **Обратный** – от конечного диапазона назад через
   ``inventory_space_upper_bound``/``inventory_space_lower_bound``:
   из каких объёмов ещё можно попасть в допустимую область следующего
   периода.

Итоговый диапазон – пересечение обоих проходов.  Именно эту сетку
состояний использует внешний оптимизатор стоимости хранилища.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from ..constraints import InjectWithdrawConstraint
from ..errors import InfeasibleConstraintError

logger = logging.getLogger(__name__)


def calculate_inventory_space(
    constraint: InjectWithdrawConstraint,
    min_inventory: Sequence[float],
    max_inventory: Sequence[float],
    start_inventory: float,
    terminal_min_inventory: float,
    terminal_max_inventory: float,
    inventory_percent_loss: float = 0.0,
) -> pd.DataFrame:
    """Вернуть таблицу допустимых объёмов ``period / inventory_lower / inventory_upper``.

    Raises
    ------
    ValueError
        Несогласованные входные ряды.
    InfeasibleConstraintError
        В каком‑либо периоде допустимый диапазон пуст.
    """
    if len(min_inventory) != len(max_inventory):
        raise ValueError("Length of min and max inventory series must match.")
    if len(min_inventory) == 0:
        raise ValueError("At least one period is required.")
    if not min_inventory[0] <= start_inventory <= max_inventory[0]:
        raise ValueError(
            f"Start inventory {start_inventory} outside first period limits "
            f"[{min_inventory[0]}, {max_inventory[0]}]."
        )

    n_periods = len(min_inventory)
    retention = 1.0 - inventory_percent_loss
    logger.info("Calculating inventory space for %d periods …", n_periods)

    # Ограничения по периодам 0 … T; последний – конечный диапазон
    limit_lo = np.append(np.asarray(min_inventory, dtype=float), terminal_min_inventory)
    limit_hi = np.append(np.asarray(max_inventory, dtype=float), terminal_max_inventory)

    lower = np.empty(n_periods + 1)
    upper = np.empty(n_periods + 1)
    lower[0] = upper[0] = start_inventory

    # ---- 1. Прямой проход ----
    for t in range(n_periods):
        at_lower = constraint.get_inject_withdraw_range(lower[t])
        at_upper = constraint.get_inject_withdraw_range(upper[t])
        reach_lo = lower[t] * retention + at_lower.min_inject_withdraw_rate
        reach_hi = upper[t] * retention + at_upper.max_inject_withdraw_rate
        lower[t + 1] = max(reach_lo, limit_lo[t + 1])
        upper[t + 1] = min(reach_hi, limit_hi[t + 1])
        if lower[t + 1] > upper[t + 1]:
            raise InfeasibleConstraintError(
                f"Inventory constraints cannot be satisfied: period {t + 1} "
                f"is not reachable from start inventory {start_inventory}."
            )

    # ---- 2. Обратный проход ----
    for t in range(n_periods - 1, -1, -1):
        args = (lower[t + 1], upper[t + 1], lower[t], upper[t], inventory_percent_loss)
        upper_bound = constraint.inventory_space_upper_bound(*args)
        lower_bound = constraint.inventory_space_lower_bound(*args)
        if not (upper_bound.is_feasible and lower_bound.is_feasible):
            reason = upper_bound.reason or lower_bound.reason
            raise InfeasibleConstraintError(f"Period {t}: {reason}")

        lower[t] = max(lower[t], lower_bound.inventory)
        upper[t] = min(upper[t], upper_bound.inventory)
        if lower[t] > upper[t]:
            raise InfeasibleConstraintError(
                f"Inventory constraints cannot be satisfied in period {t}."
            )
        logger.debug("period=%3d space=[%.6g, %.6g]", t, lower[t], upper[t])

    logger.info("Inventory space calculated.")
    return pd.DataFrame(
        {
            "period": np.arange(n_periods + 1),
            "inventory_lower": lower,
            "inventory_upper": upper,
        }
    )
