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

"""Grouping parsed commits into changelog sections.

Key Concepts (ELI5)::

    ┌─────────────────────────┬─────────────────────────────────────────────┐
    │ Concept                 │ Plain-English                               │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ Section                 │ All commits of one type under one heading,  │
    │                         │ e.g. "🐛 Bug Fixes".                        │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ SECTION_ORDER           │ The fixed order headings appear in. It does │
    │                         │ not depend on which types occur.            │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ Excluded author         │ A name or email whose commits are dropped   │
    │                         │ before grouping (e.g. bots).                │
    └─────────────────────────┴─────────────────────────────────────────────┘

Grouping flow::

    commits (newest first, as git log returns them)
         │
         ▼
    drop excluded authors
         │
         ▼
    append each commit to the bucket for its type (stable)
         │
         ▼
    walk SECTION_ORDER, emit non-empty buckets → list[Section]
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from changelogkit.commit_parsing import Commit, CommitType

# Display order of sections. Every CommitType appears exactly once.
SECTION_ORDER: tuple[CommitType, ...] = (
    CommitType.FEAT,
    CommitType.FIX,
    CommitType.PERF,
    CommitType.REFACTOR,
    CommitType.DOCS,
    CommitType.STYLE,
    CommitType.TEST,
    CommitType.BUILD,
    CommitType.CI,
    CommitType.CHORE,
    CommitType.REVERT,
    CommitType.UNKNOWN,
)


class ExclusionPolicy(Protocol):
    """Anything that carries an author exclusion list.

    :class:`~changelogkit.config.ChangelogConfig` satisfies this.
    """

    @property
    def exclude_authors(self) -> Sequence[str]:
        """Author names or emails to drop."""
        ...


@dataclass
class Section:
    """Commits of a single type, in the order they were read.

    Attributes:
        type: The commit type this section collects.
        commits: Member commits, newest first.
    """

    type: CommitType
    commits: list[Commit] = field(default_factory=list)

    @property
    def title(self) -> str:
        """Section heading, e.g. ``"🚀 Features"``."""
        return self.type.title


def is_excluded(commit: Commit, exclude_authors: Iterable[str]) -> bool:
    """Return ``True`` if the author's name or email is in ``exclude_authors``.

    Matching is exact and case-sensitive.
    """
    return any(commit.author_name == excluded or commit.author_email == excluded for excluded in exclude_authors)


def filter_commits(commits: Iterable[Commit], exclude_authors: Iterable[str]) -> list[Commit]:
    """Return the commits not written by an excluded author, in input order."""
    excluded = tuple(exclude_authors)
    return [commit for commit in commits if not is_excluded(commit, excluded)]


def group_commits(commits: Iterable[Commit], config: ExclusionPolicy) -> list[Section]:
    """Group commits into sections in :data:`SECTION_ORDER`.

    Commits by excluded authors are dropped first. Within a section the
    input order is preserved; empty sections are omitted.

    Args:
        commits: Parsed commits, newest first.
        config: Provides ``exclude_authors``. An empty list is valid.

    Returns:
        Non-empty sections in display order.
    """
    buckets: dict[CommitType, list[Commit]] = {commit_type: [] for commit_type in SECTION_ORDER}
    for commit in filter_commits(commits, config.exclude_authors):
        buckets[commit.type].append(commit)

    return [Section(type=commit_type, commits=buckets[commit_type]) for commit_type in SECTION_ORDER if buckets[commit_type]]


__all__ = [
    'SECTION_ORDER',
    'ExclusionPolicy',
    'Section',
    'filter_commits',
    'group_commits',
    'is_excluded',
]
