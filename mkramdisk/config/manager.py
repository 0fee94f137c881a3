#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration management module for mkramdisk.
This module handles loading of the optional user configuration file.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from mkramdisk.errors import ConfigError
from mkramdisk.models import DEFAULT_FILESYSTEM, DEFAULT_NAME, DEFAULT_VOLUMES_ROOT, MountWait

logger = logging.getLogger("mkramdisk")

CONFIG_ENV = "MKRAMDISK_CONFIG"
VOLUMES_ROOT_ENV = "MKRAMDISK_VOLUMES_ROOT"
DEFAULT_CONFIG_PATH = "~/.config/mkramdisk/config.json"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class DefaultsSection(BaseModel):
    name: str = DEFAULT_NAME
    filesystem: str = DEFAULT_FILESYSTEM


class MountWaitSection(BaseModel):
    attempts: int = Field(default=50, ge=1)
    interval: float = Field(default=0.1, gt=0)


class LoggingSection(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{v}' (expected one of {', '.join(LOG_LEVELS)})")
        return v


class AgentConfig(BaseModel):
    """Schema of the JSON configuration file. Unknown keys are ignored."""

    defaults: DefaultsSection = Field(default_factory=DefaultsSection)
    volumes_root: str = DEFAULT_VOLUMES_ROOT
    mount_wait: MountWaitSection = Field(default_factory=MountWaitSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)

    def mount_wait_budget(self) -> MountWait:
        return MountWait(attempts=self.mount_wait.attempts, interval=self.mount_wait.interval)


class ConfigManager:
    """Manager for configuration operations."""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def config_path(self) -> Path:
        return Path(self.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH).expanduser()

    def load(self) -> AgentConfig:
        """Load the config file (if any) and apply environment overrides.
        Precedence: env > JSON file > built-in defaults.
        A missing file yields the defaults; invalid JSON or a schema mismatch is fatal.
        """
        cfg_path = self.config_path()
        raw: Dict[str, Any] = {}
        if cfg_path.exists():
            try:
                with cfg_path.open("r", encoding="utf-8") as f:
                    raw = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigError(f"Invalid JSON in config file '{cfg_path}': {e}") from e
            if not isinstance(raw, dict):
                raise ConfigError(f"Config file '{cfg_path}' must contain a JSON object")
            logger.debug("Loaded configuration from %s", cfg_path)
        volumes_root = self.environ.get(VOLUMES_ROOT_ENV)
        if volumes_root:
            raw["volumes_root"] = volumes_root
        try:
            return AgentConfig.model_validate(raw)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigError(f"Invalid config file '{cfg_path}': {problems}") from e
