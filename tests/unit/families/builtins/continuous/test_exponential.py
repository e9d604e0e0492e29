"""
Tests for Exponential Distribution Family

This module tests the rate and scale parameterizations of the exponential
family and its characteristics against scipy.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import expon

from distfamilies import operations as ops
from distfamilies.errors import ParameterError
from distfamilies.types import ContinuousSupportShape1D, FamilyName

from .base import BaseDistributionTest


class TestExponentialFamily(BaseDistributionTest):
    """Test suite for Exponential distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.exponential_family = self.family(FamilyName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(rate=0.5)

    def test_family_properties(self):
        assert self.exponential_family.parametrization_names == ["rate", "scale"]
        assert self.exponential_family.base_parametrization_name == "rate"

    def test_scale_parametrization(self):
        dist = self.exponential_family(scale=2.0, parametrization_name="scale")

        assert dist.parametrization_name == "scale"
        assert dist.parameters.parameters == {"scale": 2.0}
        assert self.exponential_family.to_base(dist.parameters).rate == pytest.approx(0.5)
        assert ops.describe(dist) == "Exponential distribution (scale = 2)"

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"rate": 0.0}, "rate > 0"),
            ({"rate": -1.0}, "rate > 0"),
            ({"scale": -2.0, "parametrization_name": "scale"}, "scale > 0"),
        ],
    )
    def test_parametrization_constraints(self, kwargs, message):
        with pytest.raises(ParameterError, match=message):
            self.exponential_family(**kwargs)

    @pytest.mark.parametrize("parametrization_name, value", [("rate", 0.5), ("scale", 2.0)])
    def test_against_scipy(self, parametrization_name, value):
        dist = self.exponential_family(
            parametrization_name=parametrization_name, **{parametrization_name: value}
        )
        x = np.array([0.0, 0.1, 1.0, 2.0, 10.0])
        p = np.array([0.001, 0.25, 0.5, 0.75, 0.999])

        self.assert_arrays_almost_equal(ops.density(dist, x), expon.pdf(x, scale=2.0))
        self.assert_arrays_almost_equal(ops.log_density(dist, x), expon.logpdf(x, scale=2.0))
        self.assert_arrays_almost_equal(ops.cumulative(dist, x), expon.cdf(x, scale=2.0))
        self.assert_arrays_almost_equal(ops.quantile(dist, p), expon.ppf(p, scale=2.0))
        assert ops.mean(dist) == pytest.approx(2.0)
        assert ops.variance(dist) == pytest.approx(4.0)

    def test_support(self):
        dist = self.exponential_dist_example
        assert dist.support.shape == ContinuousSupportShape1D.RAY_RIGHT
        assert dist.support.left_closed
        assert ops.support(dist) == (0.0, float("inf"))

    def test_below_support(self):
        dist = self.exponential_dist_example
        x = np.array([-3.0, -1e-12])
        np.testing.assert_array_equal(ops.density(dist, x), [0.0, 0.0])
        np.testing.assert_array_equal(ops.cumulative(dist, x), [0.0, 0.0])
        np.testing.assert_array_equal(ops.log_density(dist, x), [-np.inf, -np.inf])

    def test_quantile_boundaries(self):
        assert ops.quantile(self.exponential_dist_example, 0.0) == 0.0
        assert ops.quantile(self.exponential_dist_example, 1.0) == np.inf

    def test_samples_are_non_negative(self):
        draws = ops.sample(self.exponential_dist_example, 5000, rng=1)
        assert np.all(draws >= 0.0)
        assert abs(draws.mean() - 2.0) < 0.15
