#!/usr/bin/env python3
# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for checking configuration files against a schema."""

import argparse
import json
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from ..config import CheckerConfig
from ..exceptions import SchemaError
from ..file_io.json_schema_export import to_json_schema, write_json_schema
from ..models.schema_tree import SchemaTree
from ..parsers.config_loader import CONFIG_FORMATS
from ..parsers.schema_parser import load_schema_file
from ..template.config_template_generator import ConfigTemplateGenerator
from . import check_files
from .report import format_github_actions, format_human, results_to_dict

EXIT_OK = 0
EXIT_VIOLATIONS = 1
# 2 is left to argparse usage errors.
EXIT_SCHEMA_ERROR = 3
EXIT_CONFIG_ERROR = 4
EXIT_COMMAND_NOT_FOUND = 127

CONFIG_EXTENSIONS = ['.conf', '.yaml', '.yml']


def split_command(argv: List[str]) -> Tuple[List[str], List[str]]:
    """Split ``argv`` at the first ``--`` into (checker args, downstream command)."""
    if '--' not in argv:
        return argv, []
    index = argv.index('--')
    return argv[:index], argv[index + 1:]


def find_config_files(paths: List[str]) -> List[Path]:
    """Expand directories into the configuration files they contain."""
    config_files = []

    for path_str in paths:
        path = Path(path_str)

        if path.is_dir():
            for ext in CONFIG_EXTENSIONS:
                config_files.extend(sorted(path.rglob(f'*{ext}')))
        else:
            # Missing files are reported by the checker itself.
            config_files.append(path)

    return list(dict.fromkeys(config_files))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sysctl-schema',
        description='Validate sysctl-style configuration files against a typed schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "exit status: 0 valid, 1 schema violations, 3 invalid schema, "
            "4 unreadable configuration.\n"
            "A command given after '--' runs only when every file is valid."
        ),
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: $SYSCTL_SCHEMA_LOG_LEVEL or INFO)',
    )
    subparsers = parser.add_subparsers(dest='command_name', required=True)

    check = subparsers.add_parser('check', help='Check configuration files')
    check.add_argument('--schema', required=True, help='Schema file (<path> -> <type> lines)')
    check.add_argument('configs', nargs='+', help='Configuration files or directories')
    check.add_argument(
        '--strict',
        action='store_true',
        default=None,
        help='Also report keys the schema does not declare',
    )
    check.add_argument(
        '--config-format',
        choices=CONFIG_FORMATS,
        default=None,
        help='Configuration format (default: detect by file suffix)',
    )
    check.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )

    template = subparsers.add_parser('template', help='Render a configuration skeleton from a schema')
    template.add_argument('--schema', required=True, help='Schema file')
    template.add_argument('-o', '--output', default=None, help='Output file (default: stdout)')

    export = subparsers.add_parser('json-schema', help='Export the schema as JSON Schema')
    export.add_argument('--schema', required=True, help='Schema file')
    export.add_argument('-o', '--output', default=None, help='Output file (default: stdout)')
    export.add_argument(
        '--strict',
        action='store_true',
        help='Disallow keys the schema does not declare',
    )

    return parser


def _load_schema(schema_path: str) -> Optional[SchemaTree]:
    try:
        return load_schema_file(schema_path)
    except SchemaError as e:
        print(f"Schema error in {schema_path}: {e}", file=sys.stderr)
        return None


def run_command(command: List[str]) -> int:
    """Run the downstream program and return its exit status."""
    try:
        return subprocess.run(command).returncode
    except FileNotFoundError:
        print(f"Command not found: {command[0]}", file=sys.stderr)
        return EXIT_COMMAND_NOT_FOUND


def _run_check(args: argparse.Namespace, config: CheckerConfig, command: List[str]) -> int:
    tree = _load_schema(args.schema)
    if tree is None:
        return EXIT_SCHEMA_ERROR

    config_files = find_config_files(args.configs)
    if not config_files:
        print("No configuration files found.", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    strict = config.strict if args.strict is None else args.strict
    results = check_files(tree, config_files, strict=strict, config_format=args.config_format)

    if args.format == 'json':
        print(json.dumps(results_to_dict(results), indent=2))
    elif args.format == 'github-actions':
        for line in format_github_actions(results):
            print(line)
    else:  # human-readable
        for line in format_human(results):
            print(line)

    if any(r.load_failed for r in results):
        return EXIT_CONFIG_ERROR
    if any(r.errors for r in results):
        return EXIT_VIOLATIONS

    if args.format == 'human':
        print("Check succeeded with no errors.")

    if command:
        return run_command(command)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the checker CLI."""
    if argv is None:
        argv = sys.argv[1:]
    argv, command = split_command(list(argv))

    parser = build_parser()
    args = parser.parse_args(argv)

    config = CheckerConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level
    config.set_logging()

    if command and args.command_name != 'check':
        parser.error("a command after '--' is only supported by 'check'")

    if args.command_name == 'check':
        return _run_check(args, config, command)

    tree = _load_schema(args.schema)
    if tree is None:
        return EXIT_SCHEMA_ERROR

    schema_name = Path(args.schema).name
    if args.command_name == 'template':
        generator = ConfigTemplateGenerator(tree)
        if args.output:
            generator.generate_to_file(args.output, schema_name=schema_name)
        else:
            sys.stdout.write(generator.render(schema_name=schema_name))
    elif args.output:
        write_json_schema(tree, args.output, strict=args.strict, title=schema_name)
    else:
        document = to_json_schema(tree, strict=args.strict, title=schema_name)
        print(json.dumps(document, indent=2))
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
