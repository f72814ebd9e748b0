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

"""Error reporting for the checker."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..models.violations import Violation


class CheckResult:
    """Container for check results for a single configuration file."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the configuration file being checked
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.violations: List[Violation] = []
        self.load_failed = False

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        key_path: Optional[str] = None,
    ):
        """Add an error message.

        Args:
            message: Error message
            line: Optional line number where error occurred
        """
        error = {'message': message}
        if line is not None:
            error['line'] = line
        if column is not None:
            error['column'] = column
        if key_path is not None:
            error['key_path'] = key_path
        self.errors.append(error)


def results_to_dict(results: Sequence[CheckResult]) -> Dict[str, Any]:
    return {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'results': [
            {
                'file': str(r.file_path),
                'errors': r.errors,
            }
            for r in results
        ],
    }


def format_human(results: Sequence[CheckResult]) -> List[str]:
    lines: List[str] = []
    for result in results:
        if result.errors:
            lines.append(f"{result.file_path}:")
            for error in result.errors:
                line_info = f":{error['line']}" if 'line' in error else ""
                lines.append(f"  ERROR{line_info}: {error['message']}")
    return lines


def format_github_actions(results: Sequence[CheckResult]) -> List[str]:
    lines: List[str] = []
    for result in results:
        for error in result.errors:
            lines.append(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
    return lines
