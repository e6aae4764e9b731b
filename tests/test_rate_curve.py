import importlib
import math

import numpy as np
import pytest

Sample = importlib.import_module('iwc.domain.rate_sample').InjectWithdrawRangeByInventory
InjectWithdrawRange = importlib.import_module('iwc.domain.rate_range').InjectWithdrawRange
PiecewiseLinear = importlib.import_module('iwc.constraints.piecewise_linear').PiecewiseLinearInjectWithdrawConstraint
MalformedConfigurationError = importlib.import_module('iwc.errors').MalformedConfigurationError


def test_construction_is_order_independent(cavern_samples):
    shuffled = PiecewiseLinear(cavern_samples)
    presorted = PiecewiseLinear(sorted(cavern_samples, key=lambda s: s.inventory))
    assert shuffled == presorted
    assert [s.inventory for s in shuffled.inject_withdraw_ranges] == [0.0, 2000.0, 6000.0, 10000.0]


def test_construction_copies_input(cavern_samples):
    curve = PiecewiseLinear(cavern_samples)
    cavern_samples.clear()
    assert len(curve.inject_withdraw_ranges) == 4


def test_none_is_rejected():
    with pytest.raises(TypeError):
        PiecewiseLinear(None)


@pytest.mark.parametrize('samples', [
    [],
    [Sample.of(10.0, -1.0, 1.0)],
    [Sample.of(10.0, -1.0, 1.0), Sample.of(10.0, -2.0, 2.0)],
])
def test_fewer_than_two_distinct_inventories_rejected(samples):
    with pytest.raises(MalformedConfigurationError):
        PiecewiseLinear(samples)


def test_duplicate_inventory_rejected(cavern_samples):
    with pytest.raises(MalformedConfigurationError):
        PiecewiseLinear(cavern_samples + [Sample.of(2000.0, -100.0, 100.0)])


def test_bad_samples_rejected():
    with pytest.raises(MalformedConfigurationError):
        Sample.of(0.0, 5.0, 1.0)  # min > max
    with pytest.raises(MalformedConfigurationError):
        Sample.of(-1.0, -1.0, 1.0)
    with pytest.raises(MalformedConfigurationError):
        Sample.of(math.nan, -1.0, 1.0)
    with pytest.raises(ValueError):
        Sample.of(0.0, -math.inf, 1.0)


def test_midpoint_of_simple_curve(simple_curve):
    assert simple_curve.get_inject_withdraw_range(50.0) == InjectWithdrawRange(-25.0, 25.0)


def test_knots_returned_exactly(cavern, cavern_samples):
    for sample in cavern_samples:
        assert cavern.get_inject_withdraw_range(sample.inventory) == sample.inject_withdraw_range


def test_linear_between_knots(cavern):
    rng = cavern.get_inject_withdraw_range(4000.0)
    assert rng.min_inject_withdraw_rate == pytest.approx(-230.0)
    assert rng.max_inject_withdraw_rate == pytest.approx(200.0)


def test_interpolation_does_not_cross(cavern):
    for v in np.linspace(0.0, 10000.0, 201):
        rng = cavern.get_inject_withdraw_range(float(v))
        assert rng.min_inject_withdraw_rate <= rng.max_inject_withdraw_rate


def test_extrapolates_nearest_segment(simple_curve):
    above = simple_curve.get_inject_withdraw_range(200.0)
    assert above.min_inject_withdraw_rate == pytest.approx(-100.0)
    assert above.max_inject_withdraw_rate == pytest.approx(100.0)


def test_non_finite_inventory_rejected(simple_curve):
    with pytest.raises(ValueError):
        simple_curve.get_inject_withdraw_range(math.nan)


def test_to_frame(cavern):
    df = cavern.to_frame()
    assert list(df.columns) == ['inventory', 'min_rate', 'max_rate']
    assert list(df['inventory']) == [0.0, 2000.0, 6000.0, 10000.0]
    assert list(df['max_rate']) == [250.0, 220.0, 180.0, 120.0]
