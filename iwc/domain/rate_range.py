# iwc/domain/rate_range.py
"""Диапазон допустимой скорости закачки/отбора за один период.

Соглашение о знаках фиксировано для всего пакета:
* отрицательные значения – **отбор** (withdrawal) из хранилища;
* положительные значения – **закачка** (injection).

Поэтому ``min_inject_withdraw_rate`` – это максимально возможный отбор,
а ``max_inject_withdraw_rate`` – максимально возможная закачка.

Сам контейнер ничего не проверяет: результат экстраполяции кривой за
пределами заданных точек может дать пересекающиеся границы.  Проверка
конфигурационных данных вынесена в :func:`validate_rate_range`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import MalformedConfigurationError


@dataclass(frozen=True, slots=True)
class InjectWithdrawRange:
    """Пара (min, max) скоростей закачки/отбора."""

    min_inject_withdraw_rate: float  # < 0 – отбор
    max_inject_withdraw_rate: float  # > 0 – закачка


def validate_rate_range(rate_range: InjectWithdrawRange) -> None:
    """Поднять ``MalformedConfigurationError``, если min > max или значения не конечны."""
    lo = rate_range.min_inject_withdraw_rate
    hi = rate_range.max_inject_withdraw_rate
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise MalformedConfigurationError(
            f"Inject/withdraw rates must be finite numbers, got ({lo}, {hi})."
        )
    if lo > hi:
        raise MalformedConfigurationError(
            f"Min inject/withdraw rate {lo} exceeds max rate {hi}."
        )
