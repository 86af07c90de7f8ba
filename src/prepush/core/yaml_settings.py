"""Layered YAML configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from platformdirs import user_config_dir
from pydantic_settings import BaseSettings, YamlConfigSettingsSource

from prepush.core.log import logger

CONFIG_FILENAME = "prepush.yaml"

DEFAULTS_FILE = Path(__file__).parent.parent / "defaults" / "default.yaml"


def user_config_file() -> Path:
    """Platform-specific per-user configuration file."""
    return Path(user_config_dir("prepush", appauthor=False)) / CONFIG_FILENAME


class LayeredYamlSettingsSource(YamlConfigSettingsSource):
    """YAML settings source that merges several files.

    Files are deep-merged, later ones winning:
        package defaults < user config < project config < yaml_file
    Missing files are skipped.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file=None,
        project_dir: Path | None = None,
    ):
        """Initialize the source.

        Args:
            settings_cls: The Settings class being initialized
            yaml_file: Optional extra file(s) merged last
            project_dir: Directory holding the project config
                (current directory when None)
        """
        self.project_dir = project_dir or Path.cwd()
        super().__init__(settings_cls, yaml_file)

    def _config_files(self, files) -> list[Path]:
        candidates = [
            DEFAULTS_FILE,
            user_config_file(),
            self.project_dir / CONFIG_FILENAME,
        ]
        if files:
            if isinstance(files, (str, os.PathLike)):
                files = [files]
            candidates.extend(Path(f).expanduser() for f in files)
        return candidates

    def _read_files(self, files, *args, **kwargs):
        result: dict = {}
        for file_path in self._config_files(files):
            if not file_path.is_file():
                logger.debug(
                    "Configuration file not found (skipping)",
                    file=str(file_path),
                )
                continue
            logger.debug("Loading configuration", file=str(file_path))
            result = self._deep_merge(result, self._load_file(file_path))
        return result

    @staticmethod
    def _load_file(file_path: Path) -> dict:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(
                f"{file_path}: expected a mapping at the top level"
            )
        return data

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge override into base (override wins).

        Returns:
            New dictionary; neither input is modified
        """
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
