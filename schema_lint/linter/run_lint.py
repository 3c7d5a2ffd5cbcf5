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

"""CLI entry point for linting API description documents."""

import argparse
import json
import sys
from pathlib import Path
from typing import List

from ..config import lint_config
from ..exceptions import UnknownRuleError
from ..validation.registry import RuleSet
from . import lint_files, LintResult

DOCUMENT_EXTENSIONS = ['.yaml', '.yml', '.json']


def find_document_files(paths: List[str]) -> List[Path]:
    """Find all description documents in given paths."""
    files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            if path.suffix.lower() in DOCUMENT_EXTENSIONS:
                files.append(path)
            else:
                print(f"Warning: File is not a YAML/JSON document: {path}", file=sys.stderr)
        elif path.is_dir():
            for ext in DOCUMENT_EXTENSIONS:
                files.extend(path.rglob(f'*{ext}'))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(files))


def _print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [
                {
                    'file': str(r.file_path),
                    'errors': r.errors,
                    'warnings': r.warnings,
                }
                for r in results
            ]
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    else:  # human-readable
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    line_info = f":{error['line']}" if 'line' in error else ""
                    rule_info = f" [{error['rule']}]" if 'rule' in error else ""
                    print(f"  ERROR{line_info}{rule_info}: {error['message']}")
                for warning in result.warnings:
                    line_info = f":{warning['line']}" if 'line' in warning else ""
                    print(f"  WARNING{line_info}: {warning['message']}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        description='Lint schema defaults, examples, enums and discriminators in API description documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--rules',
        default=None,
        help='Comma-separated rule names to run, in order (default: all built-in rules)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level for linter diagnostics (default: SCHEMA_LINT_LOG_LEVEL or INFO)',
    )

    args = parser.parse_args(argv)

    if args.log_level:
        lint_config.log_level = args.log_level
    lint_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    rule_names = lint_config.rule_names
    if args.rules is not None:
        rule_names = [name.strip() for name in args.rules.split(',') if name.strip()]

    try:
        rule_set = RuleSet.from_names(rule_names) if rule_names else RuleSet.default()
    except UnknownRuleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    files = find_document_files(args.paths)

    if not files:
        print("No API description documents found.", file=sys.stderr)
        sys.exit(1)

    results = lint_files(files, rule_set)

    _print_results(results, args.format)

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
