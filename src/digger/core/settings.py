from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from platformdirs import user_config_dir

from ..exceptions import SettingsError
from ..world.room import DEFAULT_OBJECT_CHANCE

logger = logging.getLogger(__name__)

APP_SLUG = "digger"
SETTINGS_FILENAME = "settings.yaml"


@dataclass
class DigSettings:
    object_chance: float = DEFAULT_OBJECT_CHANCE


@dataclass
class Settings:
    seed: Optional[int] = None
    dig: DigSettings = field(default_factory=DigSettings)
    # command word -> extra words that should resolve like it
    aliases: Dict[str, List[str]] = field(default_factory=dict)

    @staticmethod
    def default_user_path() -> Path:
        return Path(user_config_dir(APP_SLUG)) / SETTINGS_FILENAME

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise SettingsError(f"seed must be an integer, got {seed!r}")

        dig = data.get("dig") or {}
        if not isinstance(dig, dict):
            raise SettingsError("dig must be a mapping")
        try:
            chance = float(dig.get("object_chance", DEFAULT_OBJECT_CHANCE))
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"dig.object_chance must be a number: {exc}") from exc
        chance = max(0.0, min(1.0, chance))

        raw_aliases = data.get("aliases") or {}
        if not isinstance(raw_aliases, dict):
            raise SettingsError("aliases must be a mapping of command to word list")
        aliases: Dict[str, List[str]] = {}
        for name, words in raw_aliases.items():
            if isinstance(words, str):
                words = [words]
            if not isinstance(words, list):
                raise SettingsError(f"aliases.{name} must be a word or a list of words")
            cleaned = [str(w).strip().lower() for w in words]
            for word in cleaned:
                # input is split on whitespace, so such a word could never be typed
                if not word or len(word.split()) != 1:
                    raise SettingsError(f"aliases.{name}: {word!r} must be a single word")
            aliases[str(name).lower()] = cleaned

        return Settings(seed=seed, dig=DigSettings(object_chance=chance), aliases=aliases)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and an optional user override file.

        Without an explicit ``user_path`` the per-user config directory is
        checked and used when a settings file exists there.
        """
        try:
            with resources.files("digger.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)
        else:
            candidate = cls.default_user_path()
            if candidate.exists():
                user_data = cls._load_yaml(candidate)
                logger.info("Loaded user settings from %s", candidate)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
