from __future__ import annotations

import os
from pathlib import Path

import pytest

from bingo_sim.config import resolve_parameters


def test_defaults_resolve_against_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    resolved, params_hash, cfg = resolve_parameters(config_path_str=None, cli_overrides={}, env={})
    assert cfg is None
    assert resolved["winner"] == "last"
    assert resolved["draws"] is None
    assert Path(resolved["boards"]) == (tmp_path / "input_data.txt").resolve()
    assert params_hash.startswith("sha256:")


def test_env_precedence_over_config(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("winner: last\n", encoding="utf-8")
    monkeypatch.setenv("BINGO_SIM_WINNER", "first")

    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={}, env=os.environ
    )
    assert resolved["winner"] == "first"


def test_cli_precedence_over_env(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "config.json"
    cfg.write_text('{"winner": "first"}', encoding="utf-8")
    monkeypatch.setenv("BINGO_SIM_WINNER", "first")

    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={"winner": "last", "draws": None}, env=os.environ
    )
    assert resolved["winner"] == "last"


def test_path_normalization_cli_vs_config(tmp_path: Path, monkeypatch):
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    cfg = cfg_dir / "conf.yaml"
    cfg.write_text("boards: boards.txt\ndraws: draws.txt\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg),
        cli_overrides={"draws": "mine.txt"},
        env={},
    )
    assert Path(resolved["boards"]).parent == cfg_dir.resolve()
    assert Path(resolved["draws"]).parent == tmp_path.resolve()


def test_params_hash_ignores_logging_keys(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _, h1, _ = resolve_parameters(config_path_str=None, cli_overrides={"log_level": "INFO"}, env={})
    _, h2, _ = resolve_parameters(config_path_str=None, cli_overrides={"log_level": "DEBUG"}, env={})
    _, h3, _ = resolve_parameters(config_path_str=None, cli_overrides={"winner": "first"}, env={})
    assert h1 == h2
    assert h1 != h3


def test_bad_config_files(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        resolve_parameters(config_path_str=str(tmp_path / "none.yaml"), cli_overrides={}, env={})
    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(listing), cli_overrides={}, env={})
    toml = tmp_path / "conf.toml"
    toml.write_text("winner = 'last'\n", encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(toml), cli_overrides={}, env={})


def test_invalid_yaml_is_value_error(tmp_path: Path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("winner: [last\n", encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(broken), cli_overrides={}, env={})
