# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the TokenLab command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from yachalk import chalk

from tokenlab.automata.artifact import dfa_to_dict, nfa_to_dict, scan_result_to_dict
from tokenlab.automata.dfa import construct_dfa
from tokenlab.automata.nfa import build_nfa
from tokenlab.lexer.scanner import ScanResult, scan
from tokenlab.report.render import render_dfa, render_diagnostics, render_nfa, render_symbol_table, render_tokens
from tokenlab.samples import SAMPLE_PROGRAMS
from tokenlab.workspace.config import CONFIG_FILE_NAME, ConfigError, TokenLabConfig, load_config, save_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the TokenLab CLI."""
    parser = argparse.ArgumentParser(
        prog="tokenlab",
        description="TokenLab: token scanner, symbol table, and literal automata",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a configuration file (default: ./{CONFIG_FILE_NAME} when present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a {CONFIG_FILE_NAME} file with default settings.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Tokenize source files and build their symbol tables",
        description="Scan source files and report tokens, symbols, and errors.",
    )
    scan_parser.add_argument("files", nargs="+", help="Source files to scan")
    scan_parser.add_argument("--json", action="store_true", help="Print results as JSON")

    # automaton subcommand
    automaton_parser = subparsers.add_parser(
        "automaton",
        help="Build the NFA and DFA for literal strings",
        description="Build a literal-matching NFA per string and determinize it into a DFA.",
    )
    automaton_parser.add_argument(
        "literals",
        nargs="*",
        help="Literal strings (default: the configured automaton literals)",
    )
    automaton_parser.add_argument("--json", action="store_true", help="Print automata as JSON")

    # demo subcommand
    subparsers.add_parser(
        "demo",
        help="Run the built-in sample programs and the automaton demo",
        description="Scan every built-in sample program, then build automata for the demo literals.",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)

    try:
        config = _load_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "scan":
        return _cmd_scan(args, config)
    if args.command == "automaton":
        return _cmd_automaton(args, config)
    if args.command == "demo":
        return _cmd_demo(config)
    return 0


def _load_config(explicit: str | None) -> TokenLabConfig:
    """Load the explicit config file, the one in the working directory, or defaults."""
    if explicit is not None:
        return load_config(Path(explicit))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_config(default_path)
    return TokenLabConfig()


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    try:
        save_config(TokenLabConfig(), config_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _cmd_scan(args: argparse.Namespace, config: TokenLabConfig) -> int:
    """Handle the scan subcommand."""
    has_errors = False
    json_results: list[dict[str, object]] = []

    for name in args.files:
        path = Path(name)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
            has_errors = True
            continue

        result = scan(source)
        if result.has_errors:
            has_errors = True

        if args.json:
            json_results.append({"path": str(path), **scan_result_to_dict(result)})
            continue
        if len(args.files) > 1:
            print(chalk.blue(f"== {path} =="))
        _print_scan_reports(result, config)

    if args.json:
        print(json.dumps(json_results, indent=2))
    return 1 if has_errors else 0


def _cmd_automaton(args: argparse.Namespace, config: TokenLabConfig) -> int:
    """Handle the automaton subcommand."""
    literals = args.literals or config.automaton_literals
    if args.json:
        automata = []
        for literal in literals:
            nfa = build_nfa(literal)
            automata.append({"literal": literal, "nfa": nfa_to_dict(nfa), "dfa": dfa_to_dict(construct_dfa(nfa))})
        print(json.dumps(automata, indent=2))
        return 0

    _print_automata(literals)
    return 0


def _cmd_demo(config: TokenLabConfig) -> int:
    """Handle the demo subcommand."""
    for name, source in SAMPLE_PROGRAMS.items():
        print(chalk.blue(f"== Sample: {name} =="))
        _print_scan_reports(scan(source), config)
        print()
    print(chalk.blue("== Automata =="))
    _print_automata(config.automaton_literals)
    return 0


def _print_scan_reports(result: ScanResult, config: TokenLabConfig) -> None:
    """Print the configured report sections once the whole input has been scanned."""
    for section in config.reports:
        if section == "tokens":
            print(render_tokens(result.tokens))
        elif section == "symbols":
            print(render_symbol_table(result.symbols))
        elif section == "diagnostics":
            report = render_diagnostics(result.diagnostics)
            print(chalk.red(report) if result.has_errors else chalk.green(report))
        print()


def _print_automata(literals: list[str]) -> None:
    for literal in literals:
        nfa = build_nfa(literal)
        print(render_nfa(literal, nfa))
        print()
        print(render_dfa(literal, construct_dfa(nfa)))
        print()
