# iwc/visualization/plots.py
"""Мини‑обёртки над matplotlib для отображения ключевых графиков.

Функции строят *интерактивные* графики (``plt.show()``) и не возвращают
объекты Figure/Axes, чтобы оставить API как можно более простым.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..constraints.piecewise_linear import PiecewiseLinearInjectWithdrawConstraint

# ---------------------------------------------------------------------------
# 1) Кривая скоростей закачки/отбора
# ---------------------------------------------------------------------------

def plot_rate_curve(constraint: PiecewiseLinearInjectWithdrawConstraint, n_points: int = 101) -> None:
    """Линии max/min скорости от объёма + исходные точки кривой."""
    knots = constraint.to_frame()
    grid = np.linspace(knots["inventory"].iloc[0], knots["inventory"].iloc[-1], n_points)
    ranges = [constraint.get_inject_withdraw_range(v) for v in grid]

    plt.plot(grid, [r.max_inject_withdraw_rate for r in ranges], label="закачка (max)")
    plt.plot(grid, [r.min_inject_withdraw_rate for r in ranges], label="отбор (min)")
    plt.scatter(knots["inventory"], knots["max_rate"], marker="o")
    plt.scatter(knots["inventory"], knots["min_rate"], marker="o")
    plt.axhline(0.0, ls="--", color="grey")

    plt.title("Скорость закачки/отбора в зависимости от объёма")
    plt.xlabel("Объём")
    plt.ylabel("Скорость за период")
    plt.grid(True)
    plt.legend()
    plt.show()

# ---------------------------------------------------------------------------
# 2) Допустимый диапазон объёмов по периодам
# ---------------------------------------------------------------------------

def plot_inventory_space(df: pd.DataFrame) -> None:
    """Коридор [inventory_lower, inventory_upper] по результатам расчёта."""
    plt.fill_between(df["period"], df["inventory_lower"], df["inventory_upper"], alpha=0.3)
    plt.plot(df["period"], df["inventory_lower"], marker="o", label="нижняя граница")
    plt.plot(df["period"], df["inventory_upper"], marker="o", label="верхняя граница")

    plt.title("Допустимый объём хранилища по периодам")
    plt.xlabel("Период")
    plt.ylabel("Объём")
    plt.grid(True)
    plt.legend()
    plt.show()
