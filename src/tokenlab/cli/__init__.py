# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for TokenLab."""
