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

"""Contributor list for a changelog.

A contributor is identified by the string that will be printed:
``"Ada Lovelace <ada@example.com>"``, or just ``"Ada Lovelace"`` when
emails are hidden. Two commits count as the same contributor when these
strings are equal, so hiding emails can merge entries.

The list is in first-seen order. Commits arrive newest first, so the
most recent contributor is listed first.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from changelogkit.commit_parsing import Commit
from changelogkit.grouping import filter_commits


class ContributorPolicy(Protocol):
    """Settings the aggregator reads; satisfied by ``ChangelogConfig``."""

    @property
    def exclude_authors(self) -> Sequence[str]:
        """Author names or emails to drop."""
        ...

    @property
    def hide_author_email(self) -> bool:
        """List contributors by name only."""
        ...


def contributor_identity(commit: Commit, *, hide_author_email: bool = False) -> str:
    """Return the display identity for a commit's author."""
    if hide_author_email:
        return commit.author_name
    return f'{commit.author_name} <{commit.author_email}>'


def collect_contributors(commits: Iterable[Commit], config: ContributorPolicy) -> list[str]:
    """Return unique contributor identities in first-seen order.

    Excluded authors are dropped with the same rule the grouper uses.

    Args:
        commits: Parsed commits, newest first.
        config: Provides ``exclude_authors`` and ``hide_author_email``.
    """
    seen: dict[str, None] = {}
    for commit in filter_commits(commits, config.exclude_authors):
        seen.setdefault(contributor_identity(commit, hide_author_email=config.hide_author_email), None)
    return list(seen)


__all__ = [
    'ContributorPolicy',
    'collect_contributors',
    'contributor_identity',
]
