import importlib
import os
import sys
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

Sample = importlib.import_module('iwc.domain.rate_sample').InjectWithdrawRangeByInventory
PiecewiseLinear = importlib.import_module('iwc.constraints.piecewise_linear').PiecewiseLinearInjectWithdrawConstraint

@pytest.fixture
def simple_samples():
    return [Sample.of(0.0, 0.0, 0.0), Sample.of(100.0, -50.0, 50.0)]

@pytest.fixture
def simple_curve(simple_samples):
    return PiecewiseLinear(simple_samples)

@pytest.fixture
def cavern_samples():
    # unsorted on purpose
    return [
        Sample.of(6000.0, -260.0, 180.0),
        Sample.of(0.0, -150.0, 250.0),
        Sample.of(10000.0, -300.0, 120.0),
        Sample.of(2000.0, -200.0, 220.0),
    ]

@pytest.fixture
def cavern(cavern_samples):
    return PiecewiseLinear(cavern_samples)

@pytest.fixture
def frozen_curve():
    # no inject/withdraw capability at all
    return PiecewiseLinear([Sample.of(0.0, 0.0, 0.0), Sample.of(10.0, 0.0, 0.0)])
