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

"""VCS protocol for changelogkit.

The :class:`VCS` protocol defines the read-only history operations the
changelog generator needs. Implementations:

- :class:`~changelogkit.backends.vcs.git.GitCLIBackend`: ``git`` CLI
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from changelogkit.backends.vcs.git import GitCLIBackend as GitCLIBackend

__all__ = [
    'GitCLIBackend',
    'VCS',
]


@runtime_checkable
class VCS(Protocol):
    """Protocol for reading version control history.

    All methods are async so the CLI can run them on one event loop.
    """

    async def is_repository(self) -> bool:
        """Return ``True`` if the configured directory is under version control."""
        ...

    async def latest_tag(self, ref: str = 'HEAD') -> str | None:
        """Return the most recent tag reachable from ``ref``.

        Args:
            ref: Where to start looking.

        Returns:
            The tag name, or ``None`` if the history has no tags.
        """
        ...

    async def remote_url(self, remote: str = 'origin') -> str | None:
        """Return the web URL of a remote.

        SSH-style URLs are converted to HTTPS and a trailing ``.git`` is
        removed.

        Args:
            remote: Remote name.

        Returns:
            The normalized URL, or ``None`` if the remote is not configured.
        """
        ...

    async def log(self, *, from_ref: str | None = None, to_ref: str = 'HEAD') -> list[str]:
        """Return raw log records, newest first, excluding merges.

        Args:
            from_ref: Exclusive start of the range. ``None`` means the
                whole history reachable from ``to_ref``.
            to_ref: Inclusive end of the range.

        Raises:
            ChangelogKitError: If the history cannot be read.
        """
        ...
