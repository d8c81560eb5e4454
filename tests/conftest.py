import pytest

from orrery import Body, NBodySimulation, SimConfig, SpecializedGenerators


@pytest.fixture
def quiet_cfg() -> SimConfig:
    return SimConfig(diag_prints=False)


@pytest.fixture
def sun_and_test_particle() -> list:
    return [
        Body(1.0, 0.0, 0.0, 0.0, name="primary"),
        Body(1.0e-6, 1.0, 0.0, 0.0, name="test"),
    ]


@pytest.fixture
def scenario_sim(sun_and_test_particle) -> NBodySimulation:
    cfg = SimConfig(gravitational_constant=39.5, timestep=0.008, softening_constant=0.0)
    return NBodySimulation(sun_and_test_particle, cfg)


@pytest.fixture
def solar_bodies() -> list:
    return SpecializedGenerators.inner_solar_system()


@pytest.fixture
def solar_sim(solar_bodies) -> NBodySimulation:
    return NBodySimulation(solar_bodies, SpecializedGenerators.inner_solar_system_config())
