import pytest

from orrery import Manifestation, ManifestationRegistry, to_screen


def test_trail_keeps_most_recent_points() -> None:
    m = Manifestation(trail_length=3, radius=4.0)
    for k in range(5):
        m.store_position(k, -k)
    assert list(m.positions) == [(2.0, -2.0), (3.0, -3.0), (4.0, -4.0)]


def test_markers_fade_with_age() -> None:
    m = Manifestation(trail_length=4, radius=4.0)
    for k in range(4):
        m.store_position(k, 0.0)

    markers = m.markers()
    assert markers[-1] == (3.0, 0.0, 4.0, 1.0)
    assert markers[0] == (0.0, 0.0, 0.0, 0.0)
    assert markers[2] == (2.0, 0.0, 2.0, 0.25)


def test_single_point_is_drawn_full_size() -> None:
    m = Manifestation(radius=4.0)
    m.store_position(1.0, 1.0)
    assert m.markers() == [(1.0, 1.0, 4.0, 1.0)]


def test_trail_length_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Manifestation(trail_length=0)


def test_to_screen_centres_origin() -> None:
    assert to_screen(0.0, 0.0, 800, 600) == (400.0, 300.0)
    assert to_screen(1.0, -1.0, 800, 600, scale=70.0) == (470.0, 230.0)


def test_registry_records_and_resets(solar_sim) -> None:
    reg = ManifestationRegistry(solar_sim.n_bodies, trail_length=10)
    for _ in range(4):
        solar_sim.step()
        placed = reg.record(solar_sim, 800, 600)

    assert len(reg) == 5
    assert all(len(reg[i]) == 4 for i in range(5))
    assert [name for _, _, name in placed] == ["Sun", "Mercury", "Venus", "Earth", "Mars"]
    earth = solar_sim.bodies[3]
    assert placed[3][:2] == to_screen(earth.x, earth.y, 800, 600)

    solar_sim.reset()
    reg.reset()
    assert all(len(reg[i]) == 0 for i in range(5))


def test_registry_follows_body_count_change(solar_sim) -> None:
    reg = ManifestationRegistry(solar_sim.n_bodies)
    reg.record(solar_sim, 100, 100)
    solar_sim.reset(solar_sim.initial_bodies()[:2])
    reg.record(solar_sim, 100, 100)
    assert len(reg) == 2
    assert len(reg[0]) == 1
