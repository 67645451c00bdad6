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

"""Pure types for commit message parsing.

Everything here is a frozen dataclass, enum, or protocol. No I/O, no
logging, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class CommitType(Enum):
    """Closed set of Conventional Commit types.

    The member value is the token that appears in a commit prefix
    (``feat`` in ``feat(api): ...``). ``UNKNOWN`` is the catch-all for
    messages without a recognized prefix.
    """

    FEAT = 'feat'
    FIX = 'fix'
    DOCS = 'docs'
    STYLE = 'style'
    REFACTOR = 'refactor'
    PERF = 'perf'
    TEST = 'test'
    BUILD = 'build'
    CI = 'ci'
    CHORE = 'chore'
    REVERT = 'revert'
    UNKNOWN = 'unknown'

    @property
    def token(self) -> str:
        """The prefix token for this type."""
        return self.value

    @property
    def title(self) -> str:
        """The section heading for this type."""
        return _TITLES[self]

    @classmethod
    def from_token(cls, token: str) -> CommitType:
        """Map a prefix token to a type.

        Matching is exact and case-sensitive. Anything that is not one of
        the known tokens, including the empty string and the literal
        ``"unknown"``, maps to :attr:`UNKNOWN`.
        """
        return _BY_TOKEN.get(token, cls.UNKNOWN)


_TITLES: dict[CommitType, str] = {
    CommitType.FEAT: '🚀 Features',
    CommitType.FIX: '🐛 Bug Fixes',
    CommitType.DOCS: '📚 Documentation',
    CommitType.STYLE: '💅 Styles',
    CommitType.REFACTOR: '♻️ Code Refactoring',
    CommitType.PERF: '⚡ Performance Improvements',
    CommitType.TEST: '🧪 Tests',
    CommitType.BUILD: '📦 Build System',
    CommitType.CI: '🤖 Continuous Integration',
    CommitType.CHORE: '🧹 Chores',
    CommitType.REVERT: '⏪ Reverts',
    CommitType.UNKNOWN: 'Other Changes',
}

_BY_TOKEN: dict[str, CommitType] = {t.value: t for t in CommitType if t is not CommitType.UNKNOWN}


@dataclass(frozen=True)
class ParsedCommit:
    """Result of parsing one commit message.

    Attributes:
        type: The classified commit type.
        description: The subject with the ``type(scope):`` prefix removed,
            or the whole subject when there is no prefix.
        scope: The text between the parentheses, or ``None``.
        breaking: Whether the commit is marked as a breaking change.
    """

    type: CommitType
    description: str
    scope: str | None = None
    breaking: bool = False


@dataclass(frozen=True)
class Commit:
    """One commit from the history reader, with its parsed message.

    Attributes:
        sha: Full commit hash.
        short_sha: Abbreviated hash, used for display.
        author_name: Author display name.
        author_email: Author email address.
        date: Commit date exactly as git formatted it.
        subject: First line of the commit message.
        body: Remaining message text, or ``None`` if empty.
        type: Parsed commit type.
        scope: Parsed scope, or ``None``.
        description: Parsed description.
        breaking: Whether this is a breaking change.
    """

    sha: str
    short_sha: str
    author_name: str
    author_email: str
    date: str
    subject: str
    body: str | None = None
    type: CommitType = CommitType.UNKNOWN
    scope: str | None = None
    description: str = ''
    breaking: bool = False

    @classmethod
    def from_parsed(
        cls,
        parsed: ParsedCommit,
        *,
        sha: str,
        short_sha: str,
        author_name: str,
        author_email: str,
        date: str,
        subject: str,
        body: str | None = None,
    ) -> Commit:
        """Combine raw record fields with a :class:`ParsedCommit`."""
        return cls(
            sha=sha,
            short_sha=short_sha,
            author_name=author_name,
            author_email=author_email,
            date=date,
            subject=subject,
            body=body,
            type=parsed.type,
            scope=parsed.scope,
            description=parsed.description,
            breaking=parsed.breaking,
        )


@runtime_checkable
class CommitParser(Protocol):
    """Protocol for commit message parsers.

    A parser receives the subject line and the optional body and always
    returns a :class:`ParsedCommit`. Parsers must be total: a message
    they do not understand becomes :attr:`CommitType.UNKNOWN`.

    Built-in implementations:

    - :class:`~changelogkit.commit_parsing.ConventionalCommitParser`

    Example custom parser::

        class JiraCommitParser:
            def parse(self, subject: str, body: str | None = None) -> ParsedCommit:
                # Parse "[PROJ-123] fix: description" format
                ...
    """

    def parse(self, subject: str, body: str | None = None) -> ParsedCommit:
        """Parse a commit message.

        Args:
            subject: The commit subject line.
            body: The rest of the message, if any.

        Returns:
            A :class:`ParsedCommit`. Never ``None``.
        """
        ...
