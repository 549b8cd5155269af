# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from docio.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture()
def user_dir(monkeypatch, tmp_path) -> Path:
    """Point platformdirs at an empty per-test directory."""
    d = tmp_path / "usercfg"
    monkeypatch.setattr(
        "docio.services.config.ini_config_service.user_config_dir",
        lambda appname: str(d),
    )
    return d


def test_defaults_when_no_config_files(user_dir):
    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get_int("recent", "max_entries", 42) == 42
    assert cfg.get_bool("app", "nope", False) is False
    assert cfg.as_dict() == {}


def test_project_root_config_is_used_when_present(user_dir, tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[recent]\nmax_entries = 4\n[ui]\nwrap = true\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get_int("recent", "max_entries") == 4
    assert cfg.get_bool("ui", "wrap", None) is True
    assert cfg.loaded_from == ini


def test_user_dir_preferred_over_project_root(user_dir, tmp_path):
    plat_path = user_dir / IniConfigService.DEFAULT_FILE
    proj_root = tmp_path / "repo"
    write_ini(plat_path, "[recent]\nmax_entries = 2\n")
    write_ini(proj_root / "config" / "config.ini", "[recent]\nmax_entries = 1\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get_int("recent", "max_entries") == 2
    assert cfg.loaded_from == plat_path


def test_explicit_path_overrides_everything(user_dir, tmp_path):
    write_ini(user_dir / IniConfigService.DEFAULT_FILE, "[recent]\nmax_entries = 2\n")
    explicit = tmp_path / "explicit.ini"
    write_ini(explicit, "[recent]\nmax_entries = 9\n")

    cfg = IniConfigService(explicit_path=explicit)
    assert cfg.get_int("recent", "max_entries") == 9
    assert cfg.loaded_from == explicit


def test_malformed_file_falls_through_to_next_candidate(user_dir, tmp_path):
    explicit = tmp_path / "broken.ini"
    write_ini(explicit, "this is not = [an ini\n")
    write_ini(user_dir / IniConfigService.DEFAULT_FILE, "[recent]\nmax_entries = 3\n")

    cfg = IniConfigService(explicit_path=explicit)
    assert cfg.get_int("recent", "max_entries") == 3
    assert cfg.loaded_from == user_dir / IniConfigService.DEFAULT_FILE


def test_percent_signs_are_not_interpolated(user_dir, tmp_path):
    explicit = tmp_path / "c.ini"
    write_ini(explicit, "[messages]\noverwrite_message = Replace %filename%?\n")
    cfg = IniConfigService(explicit_path=explicit)
    assert cfg.get("messages", "overwrite_message") == "Replace %filename%?"


@pytest.mark.parametrize(
    "raw, expected",
    [("yes", True), ("On", True), ("0", False), ("off", False), ("maybe", None)],
)
def test_get_bool_parsing(user_dir, tmp_path, raw, expected):
    explicit = tmp_path / "b.ini"
    write_ini(explicit, f"[ui]\nflag = {raw}\n")
    assert IniConfigService(explicit_path=explicit).get_bool("ui", "flag") is expected


def test_get_int_invalid_returns_default(user_dir, tmp_path):
    explicit = tmp_path / "i.ini"
    write_ini(explicit, "[recent]\nmax_entries = lots\n")
    assert IniConfigService(explicit_path=explicit).get_int("recent", "max_entries", 7) == 7
