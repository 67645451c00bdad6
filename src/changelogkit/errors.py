# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Structured error system for changelogkit.

Every error has a unique ``CK-NAMED-KEY`` code, a human-readable message,
and an optional hint with a suggested fix.

Key Concepts (ELI5)::

    ┌─────────────────────┬────────────────────────────────────────────────┐
    │ Concept             │ ELI5 Explanation                               │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ErrorCode           │ A unique named ID like "CK-REPO-NOT-FOUND"     │
    │                     │ for each error. Readable at a glance.          │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ErrorInfo           │ A bundle of code + message + hint.             │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ChangelogKitError   │ The exception you raise. Carries the           │
    │                     │ ErrorInfo so renderers can display it.         │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ explain()           │ Looks up an error code and prints details.     │
    └─────────────────────┴────────────────────────────────────────────────┘

Code categories::

    CK-REPO-*      Repository discovery errors
    CK-GIT-*       Failures running the git CLI
    CK-LOG-*       Malformed git log output
    CK-CONFIG-*    changelogkit.toml errors
    CK-OUTPUT-*    Writing the changelog file

Commit message parsing never raises: a message that does not follow the
convention is classified as "unknown" instead.

Usage::

    from changelogkit.errors import ChangelogKitError, E

    raise ChangelogKitError(
        code=E.REPO_NOT_FOUND,
        message='/tmp/foo is not a git repository',
        hint='Pass --dir with the path to a git checkout.',
    )
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.markup import escape as rich_escape


class ErrorCode(str, Enum):
    """Enumeration of all changelogkit diagnostic codes."""

    # Repository
    REPO_NOT_FOUND = 'CK-REPO-NOT-FOUND'

    # Git CLI
    GIT_NOT_FOUND = 'CK-GIT-NOT-FOUND'
    GIT_COMMAND_FAILED = 'CK-GIT-COMMAND-FAILED'
    GIT_TIMEOUT = 'CK-GIT-TIMEOUT'

    # Git log output
    LOG_RECORD_MALFORMED = 'CK-LOG-RECORD-MALFORMED'

    # Configuration
    CONFIG_INVALID_KEY = 'CK-CONFIG-INVALID-KEY'
    CONFIG_INVALID_VALUE = 'CK-CONFIG-INVALID-VALUE'
    CONFIG_PARSE_ERROR = 'CK-CONFIG-PARSE-ERROR'

    # Output
    OUTPUT_WRITE_FAILED = 'CK-OUTPUT-WRITE-FAILED'


# Convenience alias for shorter imports.
E = ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Metadata for a single error code.

    Attributes:
        code: The ``CK-NAMED-KEY`` error code.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    code: ErrorCode
    message: str
    hint: str = ''


class ChangelogKitError(Exception):
    """Base exception for all changelogkit errors.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for fixing this error, or empty string."""
        return self.info.hint


ERRORS: dict[ErrorCode, ErrorInfo] = {
    E.REPO_NOT_FOUND: ErrorInfo(
        code=E.REPO_NOT_FOUND,
        message='The target directory is not inside a git repository.',
        hint='Run from a git checkout or pass --dir <path>.',
    ),
    E.GIT_NOT_FOUND: ErrorInfo(
        code=E.GIT_NOT_FOUND,
        message='The git executable could not be found.',
        hint='Install git and make sure it is on PATH.',
    ),
    E.GIT_COMMAND_FAILED: ErrorInfo(
        code=E.GIT_COMMAND_FAILED,
        message='A git command exited with a non-zero status.',
        hint='Check that --from and --to name existing refs (tags, branches or SHAs).',
    ),
    E.GIT_TIMEOUT: ErrorInfo(
        code=E.GIT_TIMEOUT,
        message='A git command did not finish within the time limit.',
        hint='Check for a stale lock or a credential prompt, or narrow the range with --from.',
    ),
    E.LOG_RECORD_MALFORMED: ErrorInfo(
        code=E.LOG_RECORD_MALFORMED,
        message='A git log record had fewer fields than expected.',
        hint='This usually means a commit subject contains the field separator "|||".',
    ),
    E.CONFIG_INVALID_KEY: ErrorInfo(
        code=E.CONFIG_INVALID_KEY,
        message='changelogkit.toml contains an unknown key.',
        hint='Remove the key or fix its spelling.',
    ),
    E.CONFIG_INVALID_VALUE: ErrorInfo(
        code=E.CONFIG_INVALID_VALUE,
        message='A value in changelogkit.toml has the wrong type.',
    ),
    E.CONFIG_PARSE_ERROR: ErrorInfo(
        code=E.CONFIG_PARSE_ERROR,
        message='changelogkit.toml is not valid TOML.',
    ),
    E.OUTPUT_WRITE_FAILED: ErrorInfo(
        code=E.OUTPUT_WRITE_FAILED,
        message='The changelog file could not be read or written.',
        hint='Check the path passed to -o/--output and its permissions.',
    ),
}


def explain(code: str) -> str | None:
    """Return a detailed explanation for an error code.

    Args:
        code: The error code string, e.g. ``"CK-REPO-NOT-FOUND"``.

    Returns:
        A formatted explanation string, or ``None`` if the code is unknown.
    """
    try:
        error_code = ErrorCode(code)
    except ValueError:
        return None

    info = ERRORS.get(error_code)
    if info is None:
        return f'{code}: No detailed explanation available.'

    lines = [f'{code}: {info.message}']
    if info.hint:
        lines.append(f'  Hint: {info.hint}')
    return '\n'.join(lines)


def render_error(exc: ChangelogKitError, *, file: TextIO | None = None) -> None:
    """Render an error in Rust-compiler style.

    Output format::

        error[CK-REPO-NOT-FOUND]: /tmp/foo is not a git repository
          |
          = hint: Pass --dir with the path to a git checkout.

    Args:
        exc: The error to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    out = file or sys.stderr

    if out.isatty():
        console = Console(file=out, highlight=False)
        msg = rich_escape(exc.info.message)
        console.print(
            f'[bold red]error[/bold red][bold red]\\[{exc.code.value}][/bold red][bold]: {msg}[/bold]',
        )
        if exc.hint:
            hint = rich_escape(exc.hint)
            console.print('  [dim]|[/dim]')
            console.print(f'  [dim]=[/dim] [cyan]hint[/cyan]: {hint}')
        console.print()
    else:
        print(f'error[{exc.code.value}]: {exc.info.message}', file=out)  # noqa: T201 - CLI output
        if exc.hint:
            print('  |', file=out)  # noqa: T201 - CLI output
            print(f'  = hint: {exc.hint}', file=out)  # noqa: T201 - CLI output
        print(file=out)  # noqa: T201 - CLI output


__all__ = [
    'E',
    'ERRORS',
    'ChangelogKitError',
    'ErrorCode',
    'ErrorInfo',
    'explain',
    'render_error',
]
