import pytest

from tablut.config import build_search_config, load_yaml_config


def test_load_yaml_config(tmp_path):
    path = tmp_path / "search.yaml"
    path.write_text("search:\n  depth: 2\n  heuristic: material\nmove_limit: 40\n")

    cfg = load_yaml_config(str(path))
    config = build_search_config(cfg)

    assert cfg["move_limit"] == 40
    assert config.depth == 2
    assert config.heuristic == "material"
    assert config.prune


def test_overrides_and_missing_file(tmp_path):
    assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}
    config = build_search_config({"search": {"depth": 2}}, depth=4, heuristic=None)
    assert config.depth == 4
    assert config.heuristic == "flat"


def test_unknown_search_option(tmp_path):
    with pytest.raises(ValueError):
        build_search_config({"search": {"threads": 4}})
    path = tmp_path / "bad.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_yaml_config(str(path))
