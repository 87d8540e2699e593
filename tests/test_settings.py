from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from digger.core.settings import Settings
from digger.exceptions import SettingsError


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Settings, "default_user_path", staticmethod(lambda: tmp_path / "missing.yaml"))


def write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_packaged_defaults() -> None:
    settings = Settings.load()
    assert settings.seed is None
    assert settings.dig.object_chance == pytest.approx(0.33)
    assert settings.aliases == {}


def test_user_file_overrides(tmp_path: Path) -> None:
    path = write(
        tmp_path,
        """
        seed: 99
        dig:
          object_chance: 0.5
        aliases:
          Take: [Grab, get]
          look: peek
        """,
    )
    settings = Settings.load(user_path=path)
    assert settings.seed == 99
    assert settings.dig.object_chance == 0.5
    assert settings.aliases == {"take": ["grab", "get"], "look": ["peek"]}


def test_partial_override_keeps_defaults(tmp_path: Path) -> None:
    settings = Settings.load(user_path=write(tmp_path, "seed: 3\n"))
    assert settings.seed == 3
    assert settings.dig.object_chance == pytest.approx(0.33)


def test_chance_is_clamped(tmp_path: Path) -> None:
    settings = Settings.load(user_path=write(tmp_path, "dig:\n  object_chance: 4\n"))
    assert settings.dig.object_chance == 1.0


def test_missing_user_file_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    settings = Settings.load(user_path=tmp_path / "nope.yaml")
    assert settings.seed is None
    assert "User settings file not found" in caplog.text


def test_default_user_location_is_used(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = write(tmp_path, "seed: 11\n")
    monkeypatch.setattr(Settings, "default_user_path", staticmethod(lambda: path))
    assert Settings.load().seed == 11


@pytest.mark.parametrize(
    "body",
    [
        "seed: [unclosed\n",
        "- just\n- a list\n",
        "seed: lots\n",
        "dig:\n  object_chance: often\n",
        "aliases: [take]\n",
        "aliases:\n  take: {grab: 1}\n",
        "aliases:\n  take: [pick up]\n",
        "aliases:\n  take: \"\"\n",
    ],
)
def test_bad_files_raise(tmp_path: Path, body: str) -> None:
    with pytest.raises(SettingsError):
        Settings.load(user_path=write(tmp_path, body))
