import math

import numpy as np
import pytest

from orrery import geometry_buffers, sequential_accelerations, softened_accelerations, softened_potential


KERNEL_FUNCS = [softened_accelerations, sequential_accelerations]


@pytest.mark.parametrize("kernel", KERNEL_FUNCS)
@pytest.mark.parametrize("softening", [0.0, 0.15, 10.0])
def test_single_body_has_zero_acceleration(kernel, softening) -> None:
    pos = np.array([[0.3, -0.2, 0.1]])
    acc = kernel(pos, np.array([2.0]), 39.5, softening)
    assert acc.shape == (1, 3)
    assert np.array_equal(acc, np.zeros((1, 3)))


@pytest.mark.parametrize("kernel", KERNEL_FUNCS)
def test_pair_obeys_newtons_third_law(kernel) -> None:
    pos = np.array([[0.1, 0.2, -0.3], [1.4, -0.7, 0.5]])
    m = np.array([3.0, 0.25])
    acc = kernel(pos, m, 1.7, 0.0)

    np.testing.assert_allclose(m[0] * acc[0], -m[1] * acc[1], rtol=1e-12)
    assert np.all(acc[0] * (pos[1] - pos[0]) >= 0.0)


@pytest.mark.parametrize("kernel", KERNEL_FUNCS)
def test_softening_only_under_the_root(kernel) -> None:
    d = 0.5
    soft = 0.3
    G = 2.0
    pos = np.array([[0.0, 0.0, 0.0], [d, 0.0, 0.0]])
    m = np.array([1.0, 4.0])

    acc = kernel(pos, m, G, soft)

    expected = d * G * 4.0 / (d * d * math.sqrt(d * d + soft))
    plummer = d * G * 4.0 / (d * d + soft) ** 1.5
    assert acc[0, 0] == pytest.approx(expected, rel=1e-14)
    assert acc[0, 0] != pytest.approx(plummer, rel=1e-3)
    assert acc[0, 1] == 0.0 and acc[0, 2] == 0.0


def test_acceleration_is_independent_of_own_mass() -> None:
    pos = np.array([[0.0, 0.0, 0.0], [0.0, 2.0, 0.0]])
    a_light = softened_accelerations(pos, np.array([1.0, 1e-9]), 1.0, 0.0)
    a_heavy = softened_accelerations(pos, np.array([1.0, 5.0]), 1.0, 0.0)
    assert a_light[1, 1] == a_heavy[1, 1] == -0.25


def test_kernels_agree_on_many_bodies() -> None:
    rng = np.random.default_rng(7)
    pos = rng.normal(size=(12, 3))
    m = rng.uniform(0.1, 2.0, size=12)

    a_vec = softened_accelerations(pos, m, 39.5, 0.15)
    a_seq = sequential_accelerations(pos, m, 39.5, 0.15)
    np.testing.assert_allclose(a_vec, a_seq, rtol=1e-12, atol=1e-15)


@pytest.mark.parametrize("kernel", KERNEL_FUNCS)
def test_output_buffer_is_overwritten(kernel) -> None:
    pos = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    m = np.array([1.0, 1.0])
    out = np.full((2, 3), 123.0)

    res = kernel(pos, m, 1.0, 0.0, out=out)

    assert res is out
    np.testing.assert_array_equal(out, [[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])


@pytest.mark.parametrize("kernel", KERNEL_FUNCS)
def test_coincident_bodies_blow_up_silently(kernel) -> None:
    pos = np.zeros((2, 3))
    acc = kernel(pos, np.array([1.0, 1.0]), 1.0, 0.1)
    assert not np.all(np.isfinite(acc))


def test_geometry_buffers_orientation() -> None:
    pos = np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 2.0]])
    diff, r2 = geometry_buffers(pos)
    np.testing.assert_array_equal(diff[0, 1], [1.0, 2.0, 2.0])
    np.testing.assert_array_equal(diff[1, 0], [-1.0, -2.0, -2.0])
    assert r2[0, 1] == r2[1, 0] == 9.0
    assert r2[0, 0] == 0.0


def test_softened_potential_pair() -> None:
    pos = np.array([[0.0, 0.0, 0.0], [3.0, 4.0, 0.0]])
    m = np.array([2.0, 3.0])
    assert softened_potential(pos, m, 1.0, 0.0) == pytest.approx(-6.0 / 5.0)
    assert softened_potential(pos, m, 1.0, 11.0) == pytest.approx(-6.0 / 6.0)
    assert softened_potential(pos[:1], m[:1], 1.0, 0.0) == 0.0
