# cli/demo.py   (внешний скрипт запуска)

import logging

from iwc import InjectWithdrawRangeByInventory, calculate_inventory_space, get_constraint
from iwc.visualization import plots

def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Соляная каверна: отбор падает с давлением, закачка – с заполнением
    cavern = get_constraint(
        "piecewise_linear",
        inject_withdraw_ranges=[
            InjectWithdrawRangeByInventory.of(0.0, -150.0, 250.0),
            InjectWithdrawRangeByInventory.of(2000.0, -200.0, 220.0),
            InjectWithdrawRangeByInventory.of(6000.0, -260.0, 180.0),
            InjectWithdrawRangeByInventory.of(10000.0, -300.0, 120.0),
        ],
    )
    n_periods = 60
    df = calculate_inventory_space(
        cavern,
        min_inventory=[0.0] * n_periods,
        max_inventory=[10000.0] * n_periods,
        start_inventory=0.0,
        terminal_min_inventory=0.0,
        terminal_max_inventory=0.0,
        inventory_percent_loss=0.001,
    )
    print(df)
    plots.plot_rate_curve(cavern)
    plots.plot_inventory_space(df)

if __name__ == "__main__":
    main()
