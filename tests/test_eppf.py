"""Tests de las EPPF de Dirichlet y Pitman-Yor."""

import itertools
import math

import numpy as np
import pytest

from model_eppf import (
    InvalidParameter,
    eppf_dirichlet,
    eppf_pitman_yor,
    log_eppf_dirichlet,
    log_eppf_pitman_yor,
)


def _dirichlet_reference(counts, alpha):
    n, k = sum(counts), len(counts)
    out = k * math.log(alpha) + math.lgamma(alpha) - math.lgamma(alpha + n)
    out += sum(math.lgamma(c) for c in counts)
    return math.exp(out)


def _pitman_yor_direct(counts, alpha, sigma):
    n, k = sum(counts), len(counts)
    num = np.prod([alpha + i * sigma for i in range(k)])
    den = np.prod([alpha + i for i in range(n)])
    blocks = np.prod([math.gamma(c - sigma) / math.gamma(1 - sigma) for c in counts])
    return num / den * blocks


@pytest.mark.parametrize(
    "counts, alpha",
    [
        ([1], 0.5),
        ([3, 1, 1], 1.0),
        ([5, 2, 2, 1], 2.5),
        ([10, 10, 3], 0.1),
        ([1] * 12, 7.0),
    ],
)
def test_dirichlet_in_unit_interval(counts, alpha):
    p = eppf_dirichlet(counts, alpha)
    assert 0 < p <= 1


@pytest.mark.parametrize("n", [1, 2, 5, 17, 100])
def test_dirichlet_single_block_alpha_one(n):
    assert eppf_dirichlet([n], 1.0) == pytest.approx(1.0 / n, rel=1e-12)


def test_dirichlet_singletons_reference_value():
    # 2^4 Γ(2) / Γ(6) = 16 / 120
    p = eppf_dirichlet([1, 1, 1, 1], 2.0)
    assert p == pytest.approx(16.0 / 120.0, rel=1e-9)
    assert p == pytest.approx(_dirichlet_reference([1, 1, 1, 1], 2.0), rel=1e-9)


def test_dirichlet_single_block_reference_value():
    # 2 Γ(2) Γ(4) / Γ(6) = 12 / 120
    p = eppf_dirichlet([4], 2.0)
    assert 0 < p <= 1
    assert p == pytest.approx(0.1, rel=1e-9)


def test_pitman_yor_reference_value():
    # (1 · 1.5) / 3! · Γ(1.5)/Γ(0.5)
    assert eppf_pitman_yor([2, 1], 1.0, 0.5) == pytest.approx(0.125, rel=1e-12)


@pytest.mark.parametrize(
    "counts, alpha, sigma",
    [
        ([2, 1], 1.0, 0.5),
        ([4, 2, 1, 1], 0.7, 0.3),
        ([3, 3, 3], 5.0, 0.9),
        ([6, 1], -0.2, 0.4),
    ],
)
def test_pitman_yor_matches_direct_product(counts, alpha, sigma):
    expected = _pitman_yor_direct(counts, alpha, sigma)
    assert eppf_pitman_yor(counts, alpha, sigma) == pytest.approx(expected, rel=1e-9)


@pytest.mark.parametrize(
    "counts, alpha",
    [
        ([1], 1.0),
        ([3, 1, 1], 0.3),
        ([7, 4, 2, 2, 1], 3.0),
        ([50, 20, 1, 1], 12.5),
    ],
)
def test_pitman_yor_reduces_to_dirichlet(counts, alpha):
    assert eppf_pitman_yor(counts, alpha, 0.0) == pytest.approx(
        eppf_dirichlet(counts, alpha), rel=1e-9
    )


@pytest.mark.parametrize("sigma", [0.0, 0.25])
def test_exchangeability(sigma):
    counts = [4, 1, 3, 2]
    values = [
        eppf_pitman_yor(list(perm), 1.3, sigma)
        for perm in itertools.permutations(counts)
    ]
    assert np.allclose(values, values[0], rtol=1e-12)
    assert eppf_dirichlet([2, 3, 1, 4], 1.3) == pytest.approx(
        eppf_dirichlet([4, 1, 3, 2], 1.3), rel=1e-12
    )


@pytest.mark.parametrize("n", [1, 3, 6])
@pytest.mark.parametrize("alpha", [0.5, 2.0])
def test_dirichlet_sums_to_one_over_set_partitions(partitions_of, n, alpha):
    total = sum(mult * eppf_dirichlet(p, alpha) for p, mult in partitions_of(n))
    assert total == pytest.approx(1.0, rel=1e-10)


@pytest.mark.parametrize("n", [2, 5, 7])
@pytest.mark.parametrize("alpha, sigma", [(1.0, 0.5), (-0.3, 0.6), (4.0, 0.1)])
def test_pitman_yor_sums_to_one_over_set_partitions(partitions_of, n, alpha, sigma):
    total = sum(mult * eppf_pitman_yor(p, alpha, sigma) for p, mult in partitions_of(n))
    assert total == pytest.approx(1.0, rel=1e-10)


def test_log_eppf_is_finite_for_large_partitions():
    counts = [500] * 400
    log_dp = log_eppf_dirichlet(counts, 10.0)
    log_py = log_eppf_pitman_yor(counts, 10.0, 0.5)
    assert np.isfinite(log_dp) and log_dp < 0
    assert np.isfinite(log_py) and log_py < 0
    # El valor exponenciado subdesborda a 0 sin errores
    assert eppf_dirichlet(counts, 10.0) == 0.0


def test_log_and_plain_agree():
    counts = [3, 2, 2]
    assert math.exp(log_eppf_pitman_yor(counts, 1.5, 0.2)) == pytest.approx(
        eppf_pitman_yor(counts, 1.5, 0.2), rel=1e-14
    )


def test_accepts_numpy_and_integral_floats():
    expected = eppf_dirichlet([3, 2], 1.0)
    assert eppf_dirichlet(np.array([3, 2], dtype=np.int32), 1.0) == expected
    assert eppf_dirichlet((3.0, 2.0), 1.0) == expected


def test_deterministic():
    values = {eppf_pitman_yor([5, 3, 1], 2.0, 0.4) for _ in range(20)}
    assert len(values) == 1


@pytest.mark.parametrize(
    "counts, alpha",
    [
        ([3, -1], 2.0),
        ([3, 0], 2.0),
        ([], 2.0),
        ([2, 1.5], 2.0),
        ([[1, 2], [3, 4]], 1.0),
        ([True, True], 1.0),
        ([2, 1], 0.0),
        ([2, 1], -1.0),
        ([2, 1], float("nan")),
        ([2, 1], float("inf")),
        ([2, 1], "a"),
    ],
)
def test_dirichlet_invalid_parameter(counts, alpha):
    with pytest.raises(InvalidParameter):
        eppf_dirichlet(counts, alpha)


@pytest.mark.parametrize(
    "counts, alpha, sigma",
    [
        ([2, 3], 1.0, 1.0),
        ([2, 3], 1.0, -0.1),
        ([2, 3], 1.0, 1.5),
        ([2, 3], -0.5, 0.5),
        ([2, 3], -0.7, 0.5),
        ([2, 3], 0.0, 0.0),
        ([2, -3], 1.0, 0.5),
        ([], 1.0, 0.5),
        ([2, 3], 1.0, float("nan")),
    ],
)
def test_pitman_yor_invalid_parameter(counts, alpha, sigma):
    with pytest.raises(InvalidParameter):
        eppf_pitman_yor(counts, alpha, sigma)


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError, match="tamaño >= 1"):
        eppf_dirichlet([3, -1], 2.0)
