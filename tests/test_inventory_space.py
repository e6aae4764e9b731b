import importlib

import pytest

calculate_inventory_space = importlib.import_module('iwc.core.inventory_space').calculate_inventory_space
Constant = importlib.import_module('iwc.constraints.constant').ConstantInjectWithdrawConstraint
InfeasibleConstraintError = importlib.import_module('iwc.errors').InfeasibleConstraintError


def test_constant_space_corridor():
    df = calculate_inventory_space(
        Constant(-10.0, 20.0),
        min_inventory=[0.0] * 5,
        max_inventory=[100.0] * 5,
        start_inventory=0.0,
        terminal_min_inventory=0.0,
        terminal_max_inventory=0.0,
    )
    assert list(df.columns) == ['period', 'inventory_lower', 'inventory_upper']
    assert list(df['period']) == [0, 1, 2, 3, 4, 5]
    assert list(df['inventory_lower']) == pytest.approx([0.0] * 6)
    assert list(df['inventory_upper']) == pytest.approx([0.0, 20.0, 30.0, 20.0, 10.0, 0.0])


def test_cavern_space_is_consistent(cavern):
    df = calculate_inventory_space(
        cavern,
        min_inventory=[0.0] * 40,
        max_inventory=[10000.0] * 40,
        start_inventory=0.0,
        terminal_min_inventory=0.0,
        terminal_max_inventory=0.0,
        inventory_percent_loss=0.001,
    )
    assert len(df) == 41
    assert (df['inventory_lower'] <= df['inventory_upper'] + 1e-9).all()
    assert df['inventory_upper'].iloc[0] == 0.0
    assert df['inventory_upper'].iloc[-1] == pytest.approx(0.0)
    assert df['inventory_upper'].max() <= 10000.0


def test_unreachable_terminal_raises():
    with pytest.raises(InfeasibleConstraintError):
        calculate_inventory_space(
            Constant(-10.0, 20.0),
            min_inventory=[0.0] * 5,
            max_inventory=[100.0] * 5,
            start_inventory=0.0,
            terminal_min_inventory=500.0,
            terminal_max_inventory=500.0,
        )


def test_frozen_storage_cannot_move(frozen_curve):
    with pytest.raises(InfeasibleConstraintError):
        calculate_inventory_space(
            frozen_curve,
            min_inventory=[0.0, 0.0],
            max_inventory=[10.0, 10.0],
            start_inventory=0.0,
            terminal_min_inventory=5.0,
            terminal_max_inventory=10.0,
        )


def test_inconsistent_inputs_rejected():
    constant = Constant(-1.0, 1.0)
    with pytest.raises(ValueError):
        calculate_inventory_space(constant, [0.0], [10.0, 10.0], 0.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        calculate_inventory_space(constant, [0.0], [10.0], 20.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        calculate_inventory_space(constant, [], [], 0.0, 0.0, 0.0)
