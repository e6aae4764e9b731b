# iwc/constraints/constant.py
"""Inject/withdraw constraint whose rate range does not depend on inventory."""

from __future__ import annotations

import logging

from . import InjectWithdrawConstraint, validate_space_args
from ..core.bound_result import BoundResult
from ..domain.rate_range import InjectWithdrawRange, validate_rate_range

logger = logging.getLogger(__name__)


class ConstantInjectWithdrawConstraint(InjectWithdrawConstraint):
    """Same ``[min_rate, max_rate]`` at every inventory level.

    Reachable next-period inventory is linear in the current inventory, so
    both bounds are solved in closed form instead of a bracket search.
    """

    def __init__(self, min_rate: float, max_rate: float) -> None:
        self._range = InjectWithdrawRange(float(min_rate), float(max_rate))
        validate_rate_range(self._range)

    @classmethod
    def from_range(cls, rate_range: InjectWithdrawRange) -> "ConstantInjectWithdrawConstraint":
        return cls(rate_range.min_inject_withdraw_rate, rate_range.max_inject_withdraw_rate)

    def get_inject_withdraw_range(self, inventory: float) -> InjectWithdrawRange:
        return self._range

    # --------------------------------------------------------------
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
        if self._reaches(current_period_max_inventory, inventory_percent_loss,
                         next_period_inventory_space_lower_bound,
                         next_period_inventory_space_upper_bound):
            return BoundResult.feasible(current_period_max_inventory)

        return self._solve(
            next_period_inventory_space_upper_bound - self._range.min_inject_withdraw_rate,
            current_period_min_inventory,
            current_period_max_inventory,
            inventory_percent_loss,
        )

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
        if self._reaches(current_period_min_inventory, inventory_percent_loss,
                         next_period_inventory_space_lower_bound,
                         next_period_inventory_space_upper_bound):
            return BoundResult.feasible(current_period_min_inventory)

        return self._solve(
            next_period_inventory_space_lower_bound - self._range.max_inject_withdraw_rate,
            current_period_min_inventory,
            current_period_max_inventory,
            inventory_percent_loss,
        )

    # --------------------------------------------------------------
    def _reaches(self, inventory: float, loss: float, next_lower: float, next_upper: float) -> bool:
        retained = inventory * (1.0 - loss)
        return (retained + self._range.min_inject_withdraw_rate <= next_upper
                and next_lower <= retained + self._range.max_inject_withdraw_rate)

    def _solve(self, retained_target: float, min_inventory: float,
               max_inventory: float, loss: float) -> BoundResult:
        retention = 1.0 - loss
        if retention == 0.0:
            # nothing is retained: every inventory reaches the same interval
            return BoundResult.infeasible()
        inventory = retained_target / retention
        if not min_inventory <= inventory <= max_inventory:
            logger.warning(
                "constant constraint: solved inventory %.6g outside [%.6g, %.6g]",
                inventory, min_inventory, max_inventory,
            )
            return BoundResult.infeasible()
        return BoundResult.feasible(inventory)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self._range.min_inject_withdraw_rate!r}, "
                f"{self._range.max_inject_withdraw_rate!r})")
