# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Built-in sample programs and automaton demo literals."""

# ###############
# Public Interface
# ###############

DECLARATIONS_SAMPLE = """\
define x as wholenum = 10;
define y as fractnum = 3.14;
define z as truthval = true;
"""

ERROR_PHASE_SAMPLE = """\
define x as wholenum = 10;
define y as fractnum = 3.14;
define z as truthval = true;
define x as singlechar = 'A'; -- Redeclaration Error
define invalidvar = 100; -- Invalid declaration
define a as wholenum = 5
"""

SAMPLE_PROGRAMS: dict[str, str] = {
    "declarations": DECLARATIONS_SAMPLE,
    "error-phase": ERROR_PHASE_SAMPLE,
}

# Includes two-character operators that the scanner itself never produces.
DEMO_LITERALS: tuple[str, ...] = (
    "define",
    "show",
    "if",
    "return",
    "+",
    "-",
    "*",
    "/",
    "<=",
    ">=",
    "true",
    "false",
)
