# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token recognition, symbol tables, and literal automata for a small teaching language."""

__version__ = "0.1.0"
