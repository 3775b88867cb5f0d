from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import Any, cast

import numpy as np
import pytest
from mypy_extensions import KwArg

from pysatl_variates.distributions import (
    AnalyticalComputation,
    AnalyticalComputationStrategy,
    ContinuousSupport,
    InverseTransformSamplingStrategy,
    VariateSamplingStrategy,
)
from pysatl_variates.types import Kind
from pysatl_variates.variates.sources import GeneratorSource, set_default_source
from tests.utils.mocks import SequenceSource, StandaloneEuclideanUnivariateDistribution


class StrategyTestBase:
    PDF = "pdf"
    PPF = "ppf"

    def make_uniform_ppf_distribution(
        self, kind: Kind = Kind.CONTINUOUS
    ) -> StandaloneEuclideanUnivariateDistribution:
        ppf_func = cast(Callable[[Any, KwArg(Any)], Any], lambda q, **kwargs: q)
        return StandaloneEuclideanUnivariateDistribution(
            kind=kind,
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=self.PPF, func=ppf_func),
            ],
            support=ContinuousSupport(0, 1),
        )

    def make_pdf_only_distribution(self) -> StandaloneEuclideanUnivariateDistribution:
        def uniform_pdf(x: float, **_: Any) -> float:
            return 1.0 if 0.0 <= x <= 1.0 else 0.0

        pdf_func = cast(Callable[[float, KwArg(Any)], float], uniform_pdf)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[float, float](target=self.PDF, func=pdf_func),
            ],
        )


class TestAnalyticalComputationStrategy(StrategyTestBase):
    def test_returns_provided_computation(self) -> None:
        distr = self.make_pdf_only_distribution()
        method = AnalyticalComputationStrategy().query_method(self.PDF, distr)
        assert method.target == self.PDF
        assert method(0.5) == 1.0

    def test_distribution_query_and_calculate(self) -> None:
        distr = self.make_pdf_only_distribution()
        assert distr.query_method(self.PDF)(2.0) == 0.0
        assert distr.calculate_characteristic(self.PDF, 0.25) == 1.0

    def test_missing_characteristic_lists_available(self) -> None:
        distr = self.make_pdf_only_distribution()
        with pytest.raises(RuntimeError, match=r"'cdf'.*available: pdf"):
            AnalyticalComputationStrategy().query_method("cdf", distr)


class TestInverseTransformSamplingStrategy(StrategyTestBase):
    def test_applies_ppf_to_source_uniforms(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        source = SequenceSource(uniforms=[0.1, 0.2, 0.3])
        sample = InverseTransformSamplingStrategy().sample(3, distr, source=source)
        assert sample.shape == (3, 1)
        np.testing.assert_array_equal(sample.array[:, 0], [0.1, 0.2, 0.3])

    def test_uses_default_source(self) -> None:
        set_default_source(SequenceSource(uniforms=[0.75]))
        sample = self.make_uniform_ppf_distribution().sample(1)
        assert sample.array[0, 0] == 0.75

    def test_shape_bounds_and_mean(self) -> None:
        sample = self.make_uniform_ppf_distribution().sample(1000, source=GeneratorSource(4))
        arr = sample.array
        assert ((arr > 0.0) & (arr < 1.0)).all()
        assert float(arr.mean()) == pytest.approx(0.5, abs=0.1)

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            self.make_uniform_ppf_distribution().sample(-1)

    def test_zero_size(self) -> None:
        assert self.make_uniform_ppf_distribution().sample(0).shape == (0, 1)

    def test_unknown_option_warns(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        with pytest.warns(UserWarning, match="colour") as record:
            distr.sample(2, source=GeneratorSource(1), colour="red")
        assert record[0].filename == __file__

    def test_requires_ppf(self) -> None:
        with pytest.raises(RuntimeError, match="ppf"):
            self.make_pdf_only_distribution().sample(1)


class TestVariateSamplingStrategy(StrategyTestBase):
    @staticmethod
    def make_counting_factory(calls: list[dict[str, Any]]):
        def factory(distr: Any, source: Any, **options: Any) -> Callable[[], float]:
            calls.append({"source": source, **options})
            return source.uniform

        return factory

    def test_draws_one_variate_per_row(self) -> None:
        calls: list[dict[str, Any]] = []
        strategy = VariateSamplingStrategy(self.make_counting_factory(calls))
        source = SequenceSource(uniforms=[0.5, 0.25])

        sample = strategy.sample(2, self.make_uniform_ppf_distribution(), source=source)

        assert sample.shape == (2, 1)
        assert sample.array.dtype == np.float64
        np.testing.assert_array_equal(sample.array[:, 0], [0.5, 0.25])
        assert calls == [{"source": source}]

    def test_fresh_generator_per_call(self) -> None:
        calls: list[dict[str, Any]] = []
        strategy = VariateSamplingStrategy(self.make_counting_factory(calls))
        distr = self.make_uniform_ppf_distribution()
        strategy.sample(1, distr, source=GeneratorSource(1))
        strategy.sample(1, distr, source=GeneratorSource(2))
        assert len(calls) == 2

    def test_discrete_distributions_give_integers(self) -> None:
        strategy = VariateSamplingStrategy(lambda distr, source, **_: lambda: 3)
        distr = self.make_uniform_ppf_distribution(kind=Kind.DISCRETE)
        sample = strategy.sample(4, distr)
        assert sample.array.dtype == np.int64
        np.testing.assert_array_equal(sample.array[:, 0], [3, 3, 3, 3])

    def test_known_options_are_forwarded(self) -> None:
        calls: list[dict[str, Any]] = []
        strategy = VariateSamplingStrategy(self.make_counting_factory(calls), options=("method",))
        source = GeneratorSource(1)
        strategy.sample(1, self.make_uniform_ppf_distribution(), source=source, method="x")
        assert calls == [{"source": source, "method": "x"}]

    def test_unknown_options_warn_and_are_dropped(self) -> None:
        calls: list[dict[str, Any]] = []
        strategy = VariateSamplingStrategy(self.make_counting_factory(calls))
        source = GeneratorSource(1)
        with pytest.warns(UserWarning, match="method"):
            strategy.sample(1, self.make_uniform_ppf_distribution(), source=source, method="x")
        assert calls == [{"source": source}]

    def test_negative_size_rejected(self) -> None:
        strategy = VariateSamplingStrategy(lambda distr, source, **_: source.uniform)
        with pytest.raises(ValueError, match="non-negative"):
            strategy.sample(-3, self.make_uniform_ppf_distribution())

    def test_default_source_resolved_once(self) -> None:
        default = SequenceSource(uniforms=[0.5])
        set_default_source(default)
        calls: list[dict[str, Any]] = []
        VariateSamplingStrategy(self.make_counting_factory(calls)).sample(
            1, self.make_uniform_ppf_distribution()
        )
        assert calls[0]["source"] is default
