"""Application configuration."""

from __future__ import annotations

from pathlib import Path

import platformdirs
from pydantic import Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from prepush.core.base import BaseConfig
from prepush.core.log import Logger
from prepush.core.options import Options, default_options
from prepush.core.yaml_settings import LayeredYamlSettingsSource


class Config(BaseConfig):
    """Configuration loaded from YAML/env/CLI."""

    logger: Logger = Field(
        default=None,
        description="Logger configuration and runtime instance",
    )
    checks: Options = Field(
        default_factory=default_options,
        description="Which checks run and how results are reported",
    )
    log_root: Path = Field(
        default_factory=(
            lambda: Path(platformdirs.user_state_dir("prepush", appauthor=False))
        ),
        description="Root directory for log files",
    )

    @model_validator(mode='after')
    def _setup_logger(self) -> Config:
        """Initialize the global logger once configuration is loaded."""
        from prepush.core.log import setup_logger

        if self.logger is None:
            self.logger = Logger()

        setup_logger(
            log_root=self.log_root,
            level=self.logger.level,
            console=self.logger.console,
            file=self.logger.file,
            logfire=self.logger.logfire,
        )
        return self

    def close(self):
        """Close the global logger as well as child sections."""
        from prepush.core.log import logger
        logger.close()
        super().close()


class State(BaseSettings):
    """Complete application state.

    Sources, highest priority first:
    1. Direct instantiation arguments (and CLI, through CliApp)
    2. Environment variables (PREPUSH_CONFIG__CHECKS__VERBOSE=true)
    3. .env file
    4. YAML files: package defaults < user config < ./prepush.yaml
    5. File secrets

    Environment sits above YAML because the package defaults file
    sets every option.
    """

    config: Config = Field(
        default_factory=Config,
        description="Application configuration (from YAML/env/CLI)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PREPUSH_",
        env_nested_delimiter="__",
        cli_implicit_flags=True,
        cli_kebab_case=True,
        cli_use_class_docs_for_groups=True,
        arbitrary_types_allowed=True,
        extra='ignore',
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            LayeredYamlSettingsSource(settings_cls),
            file_secret_settings,
        )


__all__ = ["Config", "State"]
