# iwc/__init__.py
"""Пакет **IWC** (Inject/Withdraw Constraints).

Ограничения скорости закачки/отбора физического хранилища (например,
газовой каверны) в зависимости от текущего объёма, и расчёт диапазона
объёмов, из которых достижима допустимая область следующего периода.

--- from iwc import PiecewiseLinearInjectWithdrawConstraint, InjectWithdrawRangeByInventory ---

Экспортируемые объекты перечислены в ``__all__`` – это служит
*public API* пакета.
"""

from __future__ import annotations

from .errors import IwcError, MalformedConfigurationError, InfeasibleConstraintError
from .domain.rate_range import InjectWithdrawRange
from .domain.rate_sample import InjectWithdrawRangeByInventory
from .core.bound_result import BoundResult
from .core.interpolation import interpolate_linear_and_solve
from .constraints import InjectWithdrawConstraint, get as get_constraint
from .constraints.constant import ConstantInjectWithdrawConstraint
from .constraints.piecewise_linear import PiecewiseLinearInjectWithdrawConstraint
from .core.inventory_space import calculate_inventory_space

__all__ = [
    "IwcError",
    "MalformedConfigurationError",
    "InfeasibleConstraintError",  # ограничения по объёму невыполнимы
    "InjectWithdrawRange",
    "InjectWithdrawRangeByInventory",  # точка кривой (объём, диапазон скоростей)
    "BoundResult",
    "interpolate_linear_and_solve",
    "InjectWithdrawConstraint",  # общий интерфейс для оптимизатора стоимости
    "get_constraint",
    "ConstantInjectWithdrawConstraint",
    "PiecewiseLinearInjectWithdrawConstraint",
    "calculate_inventory_space",
]
