from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_variates.variates.sources import (
    GeneratorSource,
    RandomSource,
    get_default_source,
    reset_default_source,
    resolve_source,
    seed_default_source,
    set_default_source,
)
from tests.utils.mocks import SequenceSource


class TestGeneratorSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(GeneratorSource(1), RandomSource)

    def test_same_seed_same_stream(self) -> None:
        a, b = GeneratorSource(123), GeneratorSource(123)
        assert [a.uniform() for _ in range(5)] == [b.uniform() for _ in range(5)]
        assert a.exponential() == b.exponential()
        assert a.gamma(2.5) == b.gamma(2.5)
        assert a.beta(2.0, 3.0) == b.beta(2.0, 3.0)

    def test_uniform_in_open_interval(self) -> None:
        source = GeneratorSource(0)
        draws = np.array([source.uniform() for _ in range(2000)])
        assert ((draws > 0.0) & (draws < 1.0)).all()

    def test_wraps_existing_generator(self) -> None:
        rng = np.random.default_rng(5)
        assert GeneratorSource(rng).generator is rng

    def test_draw_ranges(self) -> None:
        source = GeneratorSource(11)
        assert source.exponential() >= 0.0
        assert source.gamma(3.0) >= 0.0
        assert 0.0 <= source.beta(2.0, 2.0) <= 1.0

    @pytest.mark.parametrize("a", [-1.0, math.nan])
    def test_gamma_out_of_domain_shape_is_nan(self, a: float) -> None:
        assert math.isnan(GeneratorSource(2).gamma(a))

    @pytest.mark.parametrize("a, b", [(0.0, 1.0), (1.0, -2.0), (math.nan, 1.0)])
    def test_beta_out_of_domain_shapes_are_nan(self, a: float, b: float) -> None:
        assert math.isnan(GeneratorSource(2).beta(a, b))


class TestDefaultSource:
    def test_created_lazily_and_shared(self) -> None:
        first = get_default_source()
        assert isinstance(first, GeneratorSource)
        assert get_default_source() is first

    def test_set_default_source(self) -> None:
        scripted = SequenceSource(uniforms=[0.5])
        set_default_source(scripted)
        assert get_default_source() is scripted
        assert resolve_source(None) is scripted

    def test_set_rejects_non_sources(self) -> None:
        with pytest.raises(TypeError, match="RandomSource"):
            set_default_source(object())  # type: ignore[arg-type]

    def test_seed_default_source_is_reproducible(self) -> None:
        seed_default_source(42)
        first = [get_default_source().uniform() for _ in range(3)]
        seed_default_source(42)
        second = [get_default_source().uniform() for _ in range(3)]
        assert first == second

    def test_reset_creates_new_source(self) -> None:
        first = get_default_source()
        reset_default_source()
        assert get_default_source() is not first

    def test_resolve_prefers_explicit_source(self) -> None:
        explicit = GeneratorSource(3)
        assert resolve_source(explicit) is explicit
