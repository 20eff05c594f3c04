# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the TokenLab command-line interface."""

from tokenlab.workspace.config import (
    ALL_REPORT_SECTIONS,
    CONFIG_FILE_NAME,
    ConfigError,
    TokenLabConfig,
    load_config,
    save_config,
)

__all__ = [
    "ALL_REPORT_SECTIONS",
    "CONFIG_FILE_NAME",
    "ConfigError",
    "TokenLabConfig",
    "load_config",
    "save_config",
]
