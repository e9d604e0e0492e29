from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from distfamilies.distributions import AnalyticalComputation
from distfamilies.distributions.support import ContinuousSupport
from distfamilies.types import CharacteristicName, Kind
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


def _uniform_ppf_only() -> StandaloneEuclideanUnivariateDistribution:
    return StandaloneEuclideanUnivariateDistribution(
        kind=Kind.CONTINUOUS,
        analytical_computations=[
            AnalyticalComputation(target=CharacteristicName.PPF, func=lambda q, **_: q),
        ],
        support=ContinuousSupport(0.0, 1.0),
    )


class TestDefaultComputationStrategy:
    def test_returns_planned_computation(self):
        distr = _uniform_ppf_only()
        method = distr.query_method(CharacteristicName.PPF)
        assert method.target == CharacteristicName.PPF
        assert method(0.25) == pytest.approx(0.25)

    def test_missing_characteristic_raises(self):
        distr = _uniform_ppf_only()
        with pytest.raises(RuntimeError, match="no analytical computation for 'pdf'"):
            distr.query_method(CharacteristicName.PDF)


class TestDefaultSamplingUnivariateStrategy:
    def test_inverse_transform_when_no_rvs(self):
        distr = _uniform_ppf_only()
        draws = distr.sample(64, rng=5)
        assert draws.shape == (64,)
        assert draws.dtype == np.float64
        assert np.all((draws > 0.0) & (draws < 1.0))

    def test_rvs_is_preferred(self):
        calls = []

        def rvs(n, *, rng):
            calls.append(n)
            return np.full(n, 7.0)

        distr = StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation(target=CharacteristicName.PPF, func=lambda q, **_: q),
                AnalyticalComputation(target=CharacteristicName.RVS, func=rvs),
            ],
        )
        draws = distr.sample(3)
        assert calls == [3]
        np.testing.assert_array_equal(draws, [7.0, 7.0, 7.0])

    def test_same_seed_same_draws(self):
        distr = _uniform_ppf_only()
        np.testing.assert_array_equal(distr.sample(10, rng=42), distr.sample(10, rng=42))

    def test_generator_is_used_as_given(self):
        distr = _uniform_ppf_only()
        a = distr.sample(5, rng=np.random.default_rng(9))
        b = np.random.default_rng(9).uniform(np.finfo(np.float64).tiny, 1.0, size=5)
        np.testing.assert_array_equal(a, b)

    def test_zero_draws(self):
        assert _uniform_ppf_only().sample(0).shape == (0,)
