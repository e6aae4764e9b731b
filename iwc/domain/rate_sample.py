# iwc/domain/rate_sample.py

import math
from dataclasses import dataclass

from .rate_range import InjectWithdrawRange, validate_rate_range
from ..errors import MalformedConfigurationError


@dataclass(frozen=True, slots=True)
class InjectWithdrawRangeByInventory:
    """Inject/withdraw range allowed at a given inventory level."""
    inventory: float  # объём в хранилище
    inject_withdraw_range: InjectWithdrawRange

    def __post_init__(self) -> None:
        if not math.isfinite(self.inventory) or self.inventory < 0.0:
            raise MalformedConfigurationError(
                f"Inventory must be a finite non-negative number, got {self.inventory}."
            )
        validate_rate_range(self.inject_withdraw_range)

    @classmethod
    def of(cls, inventory: float, min_rate: float, max_rate: float) -> "InjectWithdrawRangeByInventory":
        return cls(float(inventory), InjectWithdrawRange(float(min_rate), float(max_rate)))
