"""
Tests for the public operations: the support boundary policy, input
validation, option handling and the properties every family shares.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

import numpy as np
import pytest
from scipy import stats

from distfamilies import operations as ops
from distfamilies.errors import ArgumentError, ParameterError, UnusedArgumentWarning
from distfamilies.types import FamilyName, Kind

CONTINUOUS_FAMILIES = [
    "Beta",
    "Cauchy",
    "ChiSquare",
    "Exponential",
    "FisherF",
    "Frechet",
    "GEV",
    "Gamma",
    "Gumbel",
    "Logistic",
    "LogNormal",
    "Normal",
    "RevWeibull",
    "StudentsT",
    "Uniform",
    "Weibull",
]
DISCRETE_FAMILIES = [
    "Bernoulli",
    "Binomial",
    "Geometric",
    "HyperGeometric",
    "NegativeBinomial",
    "Poisson",
]
INNER_PROBABILITIES = np.array([0.01, 0.1, 0.3, 0.5, 0.7, 0.9, 0.99])


@pytest.fixture
def rev_weibull():
    return ops.construct("RevWeibull", location=1, scale=2, shape=1)


class TestConstruct:
    def test_every_family_is_constructible_with_defaults(self):
        for name in FamilyName:
            dist = ops.construct(name)
            assert dist.family_name == name

    def test_kind_follows_family(self):
        assert ops.construct("Normal").kind is Kind.CONTINUOUS
        assert ops.construct("Poisson").kind is Kind.DISCRETE

    @pytest.mark.parametrize(
        "params, message",
        [({"scale": -1}, "scale > 0"), ({"shape": 0}, "shape > 0")],
    )
    def test_rev_weibull_constraints(self, params, message):
        with pytest.raises(ParameterError, match=message) as excinfo:
            ops.construct("RevWeibull", **params)
        assert excinfo.value.family == "RevWeibull"
        assert excinfo.value.constraint == message

    @pytest.mark.parametrize(
        "family, params",
        [
            ("RevWeibull", {"shape": math.inf}),
            ("RevWeibull", {"location": math.inf}),
            ("RevWeibull", {"scale": math.inf}),
            ("Normal", {"sigma": math.inf}),
            ("Uniform", {"a": -math.inf}),
            ("Poisson", {"lambda_": math.inf}),
        ],
    )
    def test_infinite_parameters_are_rejected(self, family, params):
        (name,) = params
        with pytest.raises(ParameterError, match="must be finite") as excinfo:
            ops.construct(family, **params)
        assert excinfo.value.constraint == f"{name} is finite"

    def test_rev_weibull_describe(self):
        dist = ops.construct("RevWeibull", location=5, scale=2, shape=3)
        assert ops.describe(dist) == "RevWeibull distribution (location = 5, scale = 2, shape = 3)"
        assert str(dist) == ops.describe(dist)

    def test_named_parametrization(self):
        dist = ops.construct("Gamma", "shapeScale", shape=2.0, scale=3.0)
        assert dist.parametrization_name == "shapeScale"
        assert ops.mean(dist) == pytest.approx(6.0)

    def test_unknown_family(self):
        with pytest.raises(ValueError, match="No family Nope found"):
            ops.construct("Nope")

    def test_unknown_parametrization(self):
        with pytest.raises(KeyError):
            ops.construct("Normal", "meanVar", mu=0.0)


class TestBoundaryPolicy:
    def test_density_is_exactly_zero_at_and_beyond_upper_end(self, rev_weibull):
        np.testing.assert_array_equal(ops.density(rev_weibull, [1.0, 1.5, 100.0]), [0.0] * 3)
        np.testing.assert_array_equal(
            ops.log_density(rev_weibull, [1.0, 1.5, np.inf]), [-np.inf] * 3
        )

    def test_cumulative_is_exactly_one_at_and_beyond_upper_end(self, rev_weibull):
        np.testing.assert_array_equal(ops.cumulative(rev_weibull, [1.0, 1.5, np.inf]), [1.0] * 3)

    def test_cumulative_is_exactly_zero_below_lower_end(self):
        frechet = ops.construct("Frechet", location=1.0, scale=2.0, shape=3.0)
        np.testing.assert_array_equal(ops.cumulative(frechet, [-np.inf, 0.0, 1.0]), [0.0] * 3)
        np.testing.assert_array_equal(ops.density(frechet, [0.0, 1.0]), [0.0] * 2)

    def test_quantile_endpoints(self, rev_weibull):
        assert ops.quantile(rev_weibull, 0.0) == -np.inf
        assert ops.quantile(rev_weibull, 1.0) == 1.0

    def test_quantile_never_leaves_support(self, rev_weibull):
        q = ops.quantile(rev_weibull, np.array([1e-300, 0.5, 1.0 - 1e-16]))
        assert np.all(q <= 1.0)

    def test_reference_cdf_value(self, rev_weibull):
        assert ops.cumulative(rev_weibull, 0.7) == pytest.approx(math.exp(-0.15), rel=1e-12)

    def test_nan_propagates(self, rev_weibull):
        x = np.array([np.nan, 0.5])
        for operation in (ops.density, ops.log_density, ops.cumulative, ops.quantile):
            result = operation(rev_weibull, x)
            assert np.isnan(result[0])
            assert not np.isnan(result[1])


class TestShapes:
    def test_scalar_in_scalar_out(self, rev_weibull):
        result = ops.density(rev_weibull, 0.0)
        assert isinstance(result, np.float64)
        assert np.ndim(result) == 0

    @pytest.mark.parametrize("shape", [(0,), (5,), (2, 3)])
    def test_output_shape_matches_input(self, rev_weibull, shape):
        x = np.full(shape, 0.25)
        for operation in (ops.density, ops.log_density, ops.cumulative, ops.quantile):
            assert operation(rev_weibull, x).shape == shape

    def test_elementwise_independence(self, rev_weibull):
        x = np.array([-3.0, 0.0, 0.5])
        together = ops.cumulative(rev_weibull, x)
        one_by_one = [ops.cumulative(rev_weibull, v) for v in x]
        np.testing.assert_array_equal(together, one_by_one)

    def test_integer_input_is_accepted(self):
        dist = ops.construct("Binomial", size=4, p=0.5)
        np.testing.assert_allclose(ops.density(dist, [0, 2, 4]), [1 / 16, 6 / 16, 1 / 16])


class TestArgumentErrors:
    @pytest.mark.parametrize("p", [-0.1, 1.1, [0.5, 2.0], -np.inf])
    def test_quantile_outside_unit_interval(self, rev_weibull, p):
        with pytest.raises(ArgumentError, match=r"\[0, 1\]"):
            ops.quantile(rev_weibull, p)

    @pytest.mark.parametrize("x", [None, "abc", ["a", "b"], True, [True, False], {"x": 1}])
    def test_non_numeric_input(self, rev_weibull, x):
        with pytest.raises(ArgumentError, match="must be numeric"):
            ops.density(rev_weibull, x)

    @pytest.mark.parametrize("n", [-1, 2.5, True, "3", None])
    def test_bad_sample_size(self, rev_weibull, n):
        with pytest.raises(ArgumentError, match="non-negative integer"):
            ops.sample(rev_weibull, n)

    def test_argument_error_is_a_value_error(self, rev_weibull):
        with pytest.raises(ValueError):
            ops.cumulative(rev_weibull, "x")


class TestOptions:
    def test_unused_option_warns_and_changes_nothing(self, rev_weibull):
        expected = ops.cumulative(rev_weibull, 0.5)
        with pytest.warns(UnusedArgumentWarning, match="lower_tail"):
            actual = ops.cumulative(rev_weibull, 0.5, lower_tail=False)
        assert actual == expected

    def test_rng_is_unused_outside_sample(self, rev_weibull):
        with pytest.warns(UnusedArgumentWarning, match="rng"):
            ops.density(rev_weibull, 0.5, rng=1)

    def test_sample_accepts_rng_without_warning(self, rev_weibull):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            ops.sample(rev_weibull, 3, rng=np.random.default_rng(0))


class TestSample:
    @pytest.mark.parametrize("n", [0, 1, 17, np.int64(4)])
    @pytest.mark.parametrize("family", ["RevWeibull", "GEV", "Poisson", "Geometric"])
    def test_length(self, family, n):
        draws = ops.sample(ops.construct(family), n, rng=0)
        assert isinstance(draws, np.ndarray)
        assert draws.shape == (int(n),)

    def test_same_seed_same_draws(self, rev_weibull):
        np.testing.assert_array_equal(
            ops.sample(rev_weibull, 8, rng=7), ops.sample(rev_weibull, 8, rng=7)
        )

    def test_caller_owned_generators_are_independent(self, rev_weibull):
        a, b = np.random.default_rng(3), np.random.default_rng(3)
        first = ops.sample(rev_weibull, 4, rng=a)
        np.testing.assert_array_equal(first, ops.sample(rev_weibull, 4, rng=b))
        assert not np.array_equal(first, ops.sample(rev_weibull, 4, rng=a))

    def test_rev_weibull_draws_match_distribution(self, rev_weibull):
        draws = ops.sample(rev_weibull, 4000, rng=12)
        assert np.all(draws < 1.0)
        result = stats.kstest(draws, stats.weibull_max(1.0, loc=1.0, scale=2.0).cdf)
        assert result.pvalue > 1e-3

    def test_inverse_transform_family_draws_match_distribution(self):
        gev = ops.construct("GEV", location=0.0, scale=1.0, shape=0.2)
        draws = ops.sample(gev, 4000, rng=21)
        result = stats.kstest(draws, stats.genextreme(-0.2).cdf)
        assert result.pvalue > 1e-3


class TestSummaries:
    def test_rev_weibull(self, rev_weibull):
        assert ops.mean(rev_weibull) == pytest.approx(-1.0)
        assert ops.variance(rev_weibull) == pytest.approx(4.0)
        assert ops.median(rev_weibull) == pytest.approx(1.0 - 2.0 * math.log(2.0))
        assert ops.support(rev_weibull) == (-math.inf, 1.0)

    def test_summaries_are_plain_floats(self, rev_weibull):
        assert type(ops.mean(rev_weibull)) is float
        assert type(ops.variance(rev_weibull)) is float
        assert type(ops.median(rev_weibull)) is float


@pytest.mark.parametrize("family", CONTINUOUS_FAMILIES)
class TestContinuousProperties:
    def test_round_trip(self, family):
        dist = ops.construct(family)
        x = ops.quantile(dist, INNER_PROBABILITIES)
        np.testing.assert_allclose(ops.cumulative(dist, x), INNER_PROBABILITIES, rtol=1e-7)

    def test_inverse_round_trip(self, family):
        dist = ops.construct(family)
        x = ops.quantile(dist, np.array([0.2, 0.4, 0.6, 0.8]))
        back = ops.quantile(dist, ops.cumulative(dist, x))
        np.testing.assert_allclose(back, x, rtol=1e-7, atol=1e-9)

    def test_monotonicity(self, family):
        dist = ops.construct(family)
        lo, hi = ops.quantile(dist, np.array([1e-4, 1.0 - 1e-4]))
        x = np.linspace(lo - 1.0, hi + 1.0, 401)
        assert np.all(np.diff(ops.cumulative(dist, x)) >= 0.0)

    def test_log_consistency(self, family):
        dist = ops.construct(family)
        x = ops.quantile(dist, INNER_PROBABILITIES)
        values = ops.density(dist, x)
        assert np.all(values > 0.0)
        np.testing.assert_allclose(ops.log_density(dist, x), np.log(values), rtol=1e-9, atol=1e-12)


@pytest.mark.parametrize("family", DISCRETE_FAMILIES)
class TestDiscreteProperties:
    def test_round_trip_reaches_probability(self, family):
        dist = ops.construct(family)
        q = ops.quantile(dist, INNER_PROBABILITIES)
        assert np.all(ops.cumulative(dist, q) >= INNER_PROBABILITIES - 1e-12)

    def test_monotonicity(self, family):
        dist = ops.construct(family)
        x = np.linspace(-2.0, 12.0, 281)
        assert np.all(np.diff(ops.cumulative(dist, x)) >= 0.0)

    def test_masses_sum_to_one(self, family):
        dist = ops.construct(family)
        k = np.arange(0, 200)
        assert ops.density(dist, k).sum() == pytest.approx(1.0)

    def test_zero_off_lattice(self, family):
        dist = ops.construct(family)
        np.testing.assert_array_equal(ops.density(dist, [0.5, 1.5, -1.0]), [0.0] * 3)


class TestDeepTails:
    def test_rev_weibull_log_density_stays_finite(self):
        dist = ops.construct("RevWeibull", location=1.0, scale=2.0, shape=3.0)
        x = np.array([-1e3, -1e4])
        np.testing.assert_array_equal(ops.density(dist, x), [0.0, 0.0])
        log_values = ops.log_density(dist, x)
        assert np.all(np.isfinite(log_values))
        expected = stats.weibull_max(3.0, loc=1.0, scale=2.0).logpdf(x)
        np.testing.assert_allclose(log_values, expected, rtol=1e-10)

    def test_gev_lower_tail_log_density(self):
        dist = ops.construct("GEV", shape=0.0)
        x = np.array([-8.0])
        assert ops.density(dist, x)[0] == 0.0
        np.testing.assert_allclose(ops.log_density(dist, x), stats.gumbel_r.logpdf(x), rtol=1e-12)
