# iwc/constraints/__init__.py
"""Базовая абстракция и фабрика ограничений закачки/отбора.

*Модуль объединяет:*
1. **InjectWithdrawConstraint** – абстрактный базовый класс (ABC),
   определяющий единый интерфейс из трёх операций, которыми пользуется
   внешний оптимизатор стоимости хранилища:
   ``get_inject_withdraw_range``, ``inventory_space_upper_bound`` и
   ``inventory_space_lower_bound``.  Конкретная форма кривой (постоянная,
   кусочно‑линейная, ...) от вызывающего кода скрыта.
2. Функцию‑фабрику **get(name, **kwargs)**, возвращающую экземпляр
   ограничения по строковому алиасу ("constant", "piecewise_linear").
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from ..core.bound_result import BoundResult
from ..domain.rate_range import InjectWithdrawRange

# ---------------------------------------------------------------------------
# Абстрактный базовый класс ограничений
# ---------------------------------------------------------------------------


class InjectWithdrawConstraint(ABC):
    """Интерфейс любой зависимости скорости закачки/отбора от объёма.

    Все реализации неизменяемы после создания и могут безопасно
    использоваться из нескольких потоков одновременно.
    """

    @abstractmethod
    def get_inject_withdraw_range(self, inventory: float) -> InjectWithdrawRange:
        """Вернуть диапазон скоростей при объёме *inventory*."""
        ...

    @abstractmethod
    def inventory_space_upper_bound(
        self,
        next_period_inventory_space_lower_bound: float,
        next_period_inventory_space_upper_bound: float,
        current_period_min_inventory: float,
        current_period_max_inventory: float,
        inventory_percent_loss: float,
    ) -> BoundResult:
        """Наибольший текущий объём, из которого достижим диапазон следующего периода."""
        ...

    @abstractmethod
    def inventory_space_lower_bound(
        self,
        next_period_inventory_space_lower_bound: float,
        next_period_inventory_space_upper_bound: float,
        current_period_min_inventory: float,
        current_period_max_inventory: float,
        inventory_percent_loss: float,
    ) -> BoundResult:
        """Наименьший текущий объём, из которого достижим диапазон следующего периода."""
        ...


def validate_space_args(
    next_period_inventory_space_lower_bound: float,
    next_period_inventory_space_upper_bound: float,
    current_period_min_inventory: float,
    current_period_max_inventory: float,
    inventory_percent_loss: float,
) -> None:
    """Общая проверка аргументов ``inventory_space_*_bound``.

    NaN/inf отклоняются на входе, а не распространяются по арифметике.
    """
    args = {
        "next_period_inventory_space_lower_bound": next_period_inventory_space_lower_bound,
        "next_period_inventory_space_upper_bound": next_period_inventory_space_upper_bound,
        "current_period_min_inventory": current_period_min_inventory,
        "current_period_max_inventory": current_period_max_inventory,
        "inventory_percent_loss": inventory_percent_loss,
    }
    for name, value in args.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}.")
    if not 0.0 <= inventory_percent_loss <= 1.0:
        raise ValueError(
            f"inventory_percent_loss must lie in [0, 1], got {inventory_percent_loss}."
        )
    if next_period_inventory_space_lower_bound > next_period_inventory_space_upper_bound:
        raise ValueError("Next period inventory space lower bound exceeds upper bound.")
    if current_period_min_inventory > current_period_max_inventory:
        raise ValueError("Current period min inventory exceeds max inventory.")


# ---------------------------------------------------------------------------
# Фабрика ограничений по строковому имени
# ---------------------------------------------------------------------------


def get(name: str = "piecewise_linear", **kwargs) -> InjectWithdrawConstraint:
    """Вернуть готовый объект‑ограничение по алиасу *name*.

    Parameters
    ----------
    name : str
        Допустимые значения:
        * ``"piecewise_linear"`` – PiecewiseLinearInjectWithdrawConstraint
          (``inject_withdraw_ranges=[...]``),
        * ``"constant"`` – ConstantInjectWithdrawConstraint
          (``min_rate=..., max_rate=...``).
    **kwargs
        Передаются конструктору без изменений.

    Raises
    ------
    ValueError
        Если передано неизвестное имя ограничения.
    """
    if name == "piecewise_linear":
        from .piecewise_linear import PiecewiseLinearInjectWithdrawConstraint

        return PiecewiseLinearInjectWithdrawConstraint(**kwargs)
    if name == "constant":
        from .constant import ConstantInjectWithdrawConstraint

        return ConstantInjectWithdrawConstraint(**kwargs)

    raise ValueError(f"Unknown inject/withdraw constraint '{name}'")
