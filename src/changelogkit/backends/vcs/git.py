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

"""Git VCS backend for changelogkit.

The :class:`GitCLIBackend` implements the :class:`VCS` protocol by
delegating to ``git`` via :func:`run_command`.

All methods are async; blocking subprocess calls are dispatched to
``asyncio.to_thread()``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from changelogkit.backends._run import CommandResult, TimeoutExpired, run_command
from changelogkit.commit_parsing import LOG_FORMAT, RECORD_SEPARATOR
from changelogkit.errors import ChangelogKitError, E
from changelogkit.forge import normalize_remote_url
from changelogkit.logging import get_logger

log = get_logger('changelogkit.backends.git')


class GitCLIBackend:
    """Default :class:`~changelogkit.backends.vcs.VCS` implementation using ``git``.

    Args:
        repo_root: Path to the repository (or any directory inside it).
    """

    def __init__(self, repo_root: Path) -> None:
        """Initialize with the repository path."""
        self._root = repo_root

    def _git(self, *args: str) -> CommandResult:
        """Run a git command synchronously (called via to_thread)."""
        try:
            return run_command(['git', *args], cwd=self._root)
        except FileNotFoundError as exc:
            raise ChangelogKitError(
                code=E.GIT_NOT_FOUND,
                message=f'Could not run git: {exc}',
                hint='Install git and make sure it is on PATH.',
            ) from exc
        except TimeoutExpired as exc:
            raise ChangelogKitError(
                code=E.GIT_TIMEOUT,
                message=f'git {" ".join(args)} did not finish within {exc.timeout:g}s',
                hint='Check for a stale lock or a credential prompt, or narrow the range with --from.',
            ) from exc

    async def is_repository(self) -> bool:
        """Return ``True`` if the root is inside a git work tree.

        Raises:
            ChangelogKitError: If git is missing (CK-GIT-NOT-FOUND) or
                times out (CK-GIT-TIMEOUT).
        """
        if not self._root.is_dir():
            return False
        result = await asyncio.to_thread(self._git, 'rev-parse', '--is-inside-work-tree')
        return result.ok and result.stdout.strip() == 'true'

    async def latest_tag(self, ref: str = 'HEAD') -> str | None:
        """Return the most recent tag reachable from ``ref``, or ``None``."""
        result = await asyncio.to_thread(self._git, 'describe', '--tags', '--abbrev=0', ref)
        if not result.ok:
            log.debug('no_tag_found', ref=ref, stderr=result.stderr.strip())
            return None
        return result.stdout.strip() or None

    async def remote_url(self, remote: str = 'origin') -> str | None:
        """Return the HTTPS page URL of ``remote``, or ``None`` if unset."""
        result = await asyncio.to_thread(self._git, 'config', '--get', f'remote.{remote}.url')
        if not result.ok:
            return None
        return normalize_remote_url(result.stdout)

    async def log(self, *, from_ref: str | None = None, to_ref: str = 'HEAD') -> list[str]:
        """Return raw log records for ``from_ref..to_ref``, newest first.

        Merge commits are excluded. Each record uses
        :data:`~changelogkit.commit_parsing.LOG_FORMAT` without its
        trailing record separator.

        Raises:
            ChangelogKitError: If git exits with a non-zero status.
        """
        rev_range = f'{from_ref}..{to_ref}' if from_ref else to_ref
        result = await asyncio.to_thread(
            self._git,
            'log',
            rev_range,
            f'--pretty=format:{LOG_FORMAT}',
            '--no-merges',
        )
        if not result.ok:
            raise ChangelogKitError(
                code=E.GIT_COMMAND_FAILED,
                message=f'{result.command_str} failed with exit code {result.return_code}: {result.stderr.strip()}',
                hint=f"Check that '{rev_range}' names existing refs.",
            )
        return [record.strip('\n') for record in result.stdout.split(RECORD_SEPARATOR) if record.strip()]


__all__ = [
    'GitCLIBackend',
]
