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

"""Fake VCS backend for tests.

Provides a configurable :class:`FakeVCS` that satisfies the
:class:`~changelogkit.backends.vcs.VCS` protocol. Constructor keyword
arguments let callers inject the state each test needs without
subclassing. Calls are recorded so tests can assert on the range that
was requested.
"""

from __future__ import annotations

from changelogkit.commit_parsing import FIELD_SEPARATOR


def log_record(
    *,
    subject: str,
    body: str = '',
    sha: str = 'a' * 40,
    short_sha: str = 'aaaaaaa',
    author_name: str = 'Alice',
    author_email: str = 'alice@example.com',
    date: str = '2026-02-10 12:00:00 +0000',
) -> str:
    """Build one raw log record in the ``git log`` pretty format."""
    return FIELD_SEPARATOR.join([sha, short_sha, author_name, author_email, date, subject, body])


class FakeVCS:
    """Configurable VCS test double.

    ``tags`` maps a ref to the tag :meth:`latest_tag` returns for it;
    refs not in the mapping have no tag.
    """

    def __init__(
        self,
        *,
        is_repo: bool = True,
        records: list[str] | None = None,
        tags: dict[str, str] | None = None,
        remote: str | None = None,
    ) -> None:
        """Initialize with configurable state.

        Args:
            is_repo: Value returned by ``is_repository()``.
            records: Raw records returned by ``log()``.
            tags: Mapping of ref to latest tag for ``latest_tag()``.
            remote: Value returned by ``remote_url()``.
        """
        self._is_repo = is_repo
        self._records = records or []
        self._tags = tags or {}
        self._remote = remote
        self.log_calls: list[tuple[str | None, str]] = []
        self.tag_calls: list[str] = []

    async def is_repository(self) -> bool:
        """Return configured repository state."""
        return self._is_repo

    async def latest_tag(self, ref: str = 'HEAD') -> str | None:
        """Return the configured tag for ``ref``."""
        self.tag_calls.append(ref)
        return self._tags.get(ref)

    async def remote_url(self, remote: str = 'origin') -> str | None:
        """Return the configured remote URL."""
        return self._remote

    async def log(self, *, from_ref: str | None = None, to_ref: str = 'HEAD') -> list[str]:
        """Record the range and return canned records."""
        self.log_calls.append((from_ref, to_ref))
        return list(self._records)


__all__ = [
    'FakeVCS',
    'log_record',
]
