"""Tests for parameter files."""

import json

import pytest

from pendulab import PhysicalParameters, SimulationController
from pendulab.io import load_parameters, save_parameters


def test_parameters_json(tmp_path) -> None:
    params = PhysicalParameters(g=3.7, l=2.5, damping=0.2, dt=0.005, initial_angle=0.7)
    path = tmp_path / "cfg" / "mars.json"
    save_parameters(params, path)
    assert load_parameters(path) == params


def test_partial_parameter_file_uses_defaults(tmp_path) -> None:
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"l": 2.0}), encoding="utf-8")
    params = load_parameters(path)
    assert params.l == 2.0
    assert params.g == 9.81


def test_unknown_parameter_key_rejected(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"l": 2.0, "mass": 1.0}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_parameters(path)


def test_non_object_file_rejected(tmp_path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_parameters(path)


def test_loaded_parameters_drive_controller(tmp_path) -> None:
    path = tmp_path / "slow.json"
    save_parameters(PhysicalParameters(dt=0.002, initial_angle=0.4), path)
    sim = SimulationController(load_parameters(path))
    assert sim.state.angle == 0.4
    sim.play()
    sim.tick()
    assert sim.state.elapsed_time == pytest.approx(0.002)
