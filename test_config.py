# test_config.py

import dataclasses
import json

import numpy as np
import pytest

from config import DEFAULT_CONFIG, PlannerConfig
from demo import load_config


def test_defaults():
    cfg = PlannerConfig()
    assert cfg == DEFAULT_CONFIG
    assert cfg.curvature_sample == 0.02
    assert cfg.distance_sample == 40.0
    assert cfg.distance_offset == 45.0
    assert cfg.explore_margin == 75.0
    assert cfg.finish_distance == 40.0
    assert cfg.draw_depth == 30
    assert cfg.orbit_step == pytest.approx(np.pi / 500)


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.draw_depth = 3


@pytest.mark.parametrize("field, value", [
    ("curvature_sample", -0.1),
    ("explore_margin", -1.0),
    ("agent_step", -2.0),
    ("draw_depth", 0),
    ("search_interval", 0),
    ("target_interval", -40),
])
def test_rejects_bad_values(field, value):
    with pytest.raises(ValueError, match=field):
        PlannerConfig(**{field: value})


def test_from_dict():
    cfg = PlannerConfig.from_dict({"draw_depth": 12, "finish_distance": 3.5})
    assert cfg.draw_depth == 12
    assert cfg.finish_distance == 3.5
    assert cfg.explore_margin == DEFAULT_CONFIG.explore_margin
    assert cfg.to_dict()["draw_depth"] == 12


def test_from_dict_unknown_key():
    with pytest.raises(ValueError, match="robot_length"):
        PlannerConfig.from_dict({"robot_length": 40})


class TestLoadConfig:

    def test_no_file_gives_defaults(self):
        assert load_config() == DEFAULT_CONFIG

    def test_missing_file_gives_defaults(self, tmp_path, capsys):
        assert load_config(str(tmp_path / "nope.json")) == DEFAULT_CONFIG
        assert "not found" in capsys.readouterr().out

    def test_json_file(self, tmp_path):
        path = tmp_path / "planner.json"
        path.write_text(json.dumps({"explore_margin": 50.0, "agent_step": 3.0}))
        cfg = load_config(str(path))
        assert cfg.explore_margin == 50.0
        assert cfg.agent_step == 3.0

    def test_invalid_json_values(self, tmp_path):
        path = tmp_path / "planner.json"
        path.write_text(json.dumps({"draw_depth": 0}))
        with pytest.raises(ValueError):
            load_config(str(path))
