import numpy as np
import pytest

from celestial import constants as C
from celestial.body import Body
from celestial.config import SimulationConfig
from celestial.errors import ConfigurationError
from celestial.simulation import Simulation


def _config(**overrides):
    values = dict(
        body_count=8,
        seed=7,
        initial_speed=5.0,
        prediction_steps=300,
        prediction_interval=30,
    )
    values.update(overrides)
    return SimulationConfig(**values)


def _state(sim):
    return [(b.id, b.pos.tolist(), b.vel.tolist(), b.mass) for b in sim.store]


def _initialized(**overrides):
    sim = Simulation(_config(**overrides))
    sim.initialize()
    return sim


def test_initialize_uses_config():
    sim = _initialized()
    assert len(sim.store) == 9
    assert sim.store.get(C.SUN_ID).sun


def test_initialize_with_invalid_config_keeps_old_state():
    sim = _initialized()
    before = _state(sim)
    with pytest.raises(ConfigurationError):
        sim.initialize(SimulationConfig(body_count=0))
    assert _state(sim) == before
    assert sim.config.body_count == 8


def test_pause_freezes_physics():
    sim = _initialized()
    sim.pause()
    before = _state(sim)
    for _ in range(5):
        sim.tick()
    assert _state(sim) == before


def test_tick_moves_bodies_when_running():
    sim = _initialized()
    before = _state(sim)
    sim.tick()
    assert _state(sim) != before


def test_click_selects_exactly_one_body_and_empty_click_clears():
    sim = _initialized()
    target = sim.store.get(3)
    sim.click(target.pos)
    selected = [b.id for b in sim.store if b.selected]
    assert len(selected) == 1
    assert sim.store.find_nearest_within(target.pos, C.SELECTION_TOLERANCE) == selected[0]

    sim.click((-1e6, -1e6))
    assert not any(b.selected for b in sim.store)


def test_prediction_is_cached_while_paused():
    sim = _initialized()
    sim.click(sim.store.get(C.SUN_ID).pos)
    sim.pause()
    sim.tick()
    first = sim.predicted_orbit
    # 300 steps sampled every 30th
    assert len(first) == 10
    sim.tick()
    assert sim.predicted_orbit is first


def test_prediction_is_deterministic_and_leaves_store_untouched():
    sim = _initialized()
    sim.click(sim.store.get(0).pos)
    before = _state(sim)
    sim.pause()
    sim.tick()
    first = list(sim.predicted_orbit)
    sim.resume()
    assert sim.predicted_orbit is None
    sim.pause()
    sim.tick()
    assert sim.predicted_orbit == first
    assert _state(sim) == before


def test_click_invalidates_prediction():
    sim = _initialized()
    sim.click(sim.store.get(C.SUN_ID).pos)
    sim.pause()
    sim.tick()
    assert sim.predicted_orbit is not None
    sim.click(sim.store.get(1).pos)
    assert sim.predicted_orbit is None
    sim.tick()
    assert sim.predicted_orbit is not None


def test_prediction_without_selection_is_empty_and_cached():
    sim = _initialized()
    sim.pause()
    sim.tick()
    assert sim.predicted_orbit == []
    _, orbit = sim.render_snapshot()
    assert orbit == []


def test_toggle_pause():
    sim = _initialized()
    assert not sim.paused
    sim.toggle_pause()
    assert sim.paused
    sim.toggle_pause()
    assert not sim.paused


def test_render_snapshot_adds_selection_marker():
    sim = _initialized()
    drawables, orbit = sim.render_snapshot()
    assert len(drawables) == 9
    assert sum(d.sun for d in drawables) == 1
    assert not any(d.select_marker for d in drawables)
    assert orbit == []

    sim.click(sim.store.get(2).pos)
    drawables, _ = sim.render_snapshot()
    markers = [d for d in drawables if d.select_marker]
    assert len(drawables) == 10
    assert len(markers) == 1
    selected = next(b for b in sim.store if b.selected)
    assert markers[0].position == (float(selected.pos[0]), float(selected.pos[1]))
    assert not markers[0].sun


def test_tick_applies_merges_to_store():
    sim = Simulation(SimulationConfig(gravitational_constant=0.0))
    sim.store.load(
        [
            Body(0, 10.0, [100.0, 100.0], [0.0, 0.0]),
            Body(1, 3.0, [101.0, 100.0], [0.0, 0.0]),
        ]
    )
    sim.tick(0.01)
    assert 1 not in sim.store
    assert sim.store.get(0).mass == 13.0


def test_camera_offset_translates_after_physics():
    sim = Simulation(SimulationConfig(gravitational_constant=0.0))
    sim.store.load(
        [
            Body(0, 1.0, [0.0, 0.0], [1.0, 0.0]),
            Body(1, 1.0, [50.0, 0.0], [0.0, 0.0]),
        ]
    )
    sim.tick(1.0, camera_offset=(5.0, -2.0))
    assert np.allclose(sim.store.get(0).pos, [6.0, -2.0])
    assert np.allclose(sim.store.get(1).pos, [55.0, -2.0])
    assert np.allclose(sim.store.get(0).vel, [1.0, 0.0])
