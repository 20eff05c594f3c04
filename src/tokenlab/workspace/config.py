# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the TokenLab configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tokenlab.samples import DEMO_LITERALS

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".tokenlab.yaml"

ReportSection = Literal["tokens", "symbols", "diagnostics"]

ALL_REPORT_SECTIONS: tuple[ReportSection, ...] = ("tokens", "symbols", "diagnostics")


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, written, or is invalid."""


class TokenLabConfig(BaseModel):
    """Settings for the command-line interface.

    Attributes:
        automaton_literals: Literals used by ``tokenlab automaton`` when none
            are given on the command line.
        reports: Report sections printed by ``tokenlab scan``, in order.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    automaton_literals: list[str] = Field(alias="automaton-literals", default_factory=lambda: list(DEMO_LITERALS))
    reports: list[ReportSection] = Field(default_factory=lambda: list(ALL_REPORT_SECTIONS))


def load_config(path: Path) -> TokenLabConfig:
    """Load and validate a configuration file.

    An empty file is treated as a configuration with all defaults.

    Args:
        path: Path to the ``.tokenlab.yaml`` file.

    Returns:
        A validated TokenLabConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML, or
            does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return TokenLabConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def save_config(config: TokenLabConfig, path: Path) -> None:
    """Write *config* to *path* as YAML.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = config.model_dump(by_alias=True)
    try:
        path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write config file '{path}': {exc}") from exc
