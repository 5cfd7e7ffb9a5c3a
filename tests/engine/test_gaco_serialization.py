import json
import pickle

import pytest

from gaco import GACO, HockSchittkowsky71Problem, Population, RosenbrockProblem
from gaco.engine.algorithm.gaco.log import logs_match
from gaco.foundation.checkpoint import load_checkpoint, save_checkpoint


def _evolved(memory=False):
    algo = GACO(10, 13, 1.0, 1e9, 0.01, 1, None, 7, 1000, 1000, 0.0, memory, 0.9, 23)
    algo.set_verbosity(1)
    algo.evolve(Population(RosenbrockProblem(2), 25, seed=23))
    return algo


def test_json_roundtrip_preserves_configuration_and_log():
    algo = _evolved()
    restored = GACO.from_json(algo.to_json())
    assert str(restored) == str(algo)
    assert restored.cfg == algo.cfg
    assert restored.get_seed() == algo.get_seed()
    assert restored.get_verbosity() == 1
    assert logs_match(restored.get_log(), algo.get_log())
    assert restored.get_log() == algo.get_log()


def test_pickle_roundtrip():
    algo = _evolved()
    restored = pickle.loads(pickle.dumps(algo))
    assert str(restored) == str(algo)
    assert restored.get_log() == algo.get_log()


def test_state_is_plain_json():
    data = json.loads(_evolved().to_json())
    assert data["version"] == 1
    assert data["config"]["kernel_size"] == 13
    assert len(data["log"]) == 10
    assert len(data["context"]["archive"]["X"]) == 13


def test_unfitted_engine_roundtrip():
    algo = GACO(5, 3, seed=4)
    restored = GACO.from_dict(algo.to_dict())
    assert restored.state is None
    assert str(restored) == str(algo)


def test_unknown_state_version_is_rejected():
    data = GACO(seed=1).to_dict()
    data["version"] = 99
    with pytest.raises(ValueError, match="version"):
        GACO.from_dict(data)


def test_checkpoint_file_roundtrip(tmp_path):
    algo = _evolved()
    path = algo.save(tmp_path / "gaco_run")
    assert path.suffix == ".json"
    restored = GACO.load(path)
    assert str(restored) == str(algo)
    assert restored.get_log() == algo.get_log()


def test_checkpoint_helpers(tmp_path):
    path = save_checkpoint(tmp_path / "nested" / "state.json", {"a": 1})
    assert load_checkpoint(path) == {"a": 1}
    with pytest.raises(FileNotFoundError):
        load_checkpoint(tmp_path / "missing.json")
    path.write_text(json.dumps({"version": 7, "state": {}}), encoding="utf-8")
    with pytest.raises(ValueError, match="checkpoint version"):
        load_checkpoint(path)


def test_restored_memory_run_continues_identically(tmp_path):
    original = _evolved(memory=True)
    restored = GACO.load(original.save(tmp_path / "memory.json"))

    for algo in (original, restored):
        algo.evolve(Population(RosenbrockProblem(2), 25, seed=5))

    assert len(original.get_log()) == 20
    assert original.get_log() == restored.get_log()
    assert original.current_oracle == restored.current_oracle
    assert str(original) == str(restored)


def test_constrained_state_roundtrip():
    prob = HockSchittkowsky71Problem()
    pop = Population(prob, 20, seed=23)
    algo = GACO(5, 13, 1.0, 1500.0, 0.01, 1, None, 7, 1000, 1000, 0.0, True, 0.9, 23)
    algo.evolve(pop)
    restored = GACO.from_json(algo.to_json())
    archive, copy = algo.state.archive, restored.state.archive
    assert copy.G.tolist() == archive.G.tolist()
    assert copy.H.tolist() == archive.H.tolist()
    assert copy.ids.tolist() == archive.ids.tolist()
    assert restored.current_oracle == algo.current_oracle
