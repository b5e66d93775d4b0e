import json

import pytest

from moeadkit.engine.algorithm.config import MOEADConfig
from moeadkit.engine.config.loader import load_config_file


def test_load_json(tmp_path):
    path = tmp_path / "moead.json"
    path.write_text(json.dumps({"num_problems": 50, "similarity": "cosine"}), encoding="utf-8")
    cfg = MOEADConfig.from_dict({"num_objectives": 3, **load_config_file(str(path))})
    assert cfg.num_problems == 50
    assert cfg.similarity == "cosine"


def test_load_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "moead.yaml"
    path.write_text("num_problems: 40\ncrossover:\n  method: sbx\n  prob: 0.8\n", encoding="utf-8")
    data = load_config_file(str(path))
    assert data == {"num_problems": 40, "crossover": {"method": "sbx", "prob": 0.8}}
    assert MOEADConfig.from_dict({"num_objectives": 2, **data}).crossover == ("sbx", {"prob": 0.8})


def test_empty_yaml_is_empty_mapping(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(str(path)) == {}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config_file(str(tmp_path / "nope.json"))
