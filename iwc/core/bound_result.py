# iwc/core/bound_result.py
"""Типизированный результат поиска границы допустимого объёма.

Невыполнимость ограничений – ожидаемый математический исход поиска, а не
сбой программы, поэтому методы ``inventory_space_*_bound`` возвращают
**BoundResult** с одним из двух вариантов:

* ``BoundResult.feasible(x)``  – найден объём *x*;
* ``BoundResult.infeasible(reason)`` – ни один текущий объём не позволяет
  попасть в допустимый диапазон следующего периода.

Вызывающий код сам решает, прервать ли расчёт (``unwrap()`` поднимает
:class:`~iwc.errors.InfeasibleConstraintError`) или вывести диагностику.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import InfeasibleConstraintError

INFEASIBLE_MESSAGE = "Storage inventory constraints cannot be satisfied."


@dataclass(frozen=True, slots=True)
class BoundResult:
    """Объём-граница либо причина невыполнимости."""

    inventory: Optional[float] = None
    reason: Optional[str] = None

    @classmethod
    def feasible(cls, inventory: float) -> "BoundResult":
        return cls(inventory=float(inventory))

    @classmethod
    def infeasible(cls, reason: str = INFEASIBLE_MESSAGE) -> "BoundResult":
        return cls(reason=reason)

    @property
    def is_feasible(self) -> bool:
        return self.inventory is not None

    def unwrap(self) -> float:
        """Вернуть объём или поднять ``InfeasibleConstraintError``."""
        if self.inventory is None:
            raise InfeasibleConstraintError(self.reason or INFEASIBLE_MESSAGE)
        return self.inventory
