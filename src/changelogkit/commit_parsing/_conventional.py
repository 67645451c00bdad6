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

"""Conventional Commits parser.

Pure implementation, depends only on :mod:`._types`. No I/O, no
logging, no side effects.

The parser splits on delimiters instead of matching a strict regex, and
every subject produces a result::

    "feat(api)!: drop v1"     →  feat, scope="api", breaking
    "fix: null pointer"       →  fix, no scope
    "refactor(parser"         →  no ':' at all → unknown, raw subject
    "Update README"           →  unknown, raw subject

The ``!:`` marker is searched for anywhere in the subject, not only
right after the header. A subject such as ``fix: wow!: really`` is
therefore split at ``!:``, which makes the header ``fix: wow`` (an
unknown type) and marks the commit breaking.
"""

from __future__ import annotations

from changelogkit.commit_parsing._types import CommitType, ParsedCommit

BREAKING_MARKER = '!:'
HEADER_SEPARATOR = ':'
BREAKING_FOOTER = 'BREAKING CHANGE'


def _parse_header(header: str) -> tuple[CommitType, str | None]:
    """Split a ``type(scope)`` header into its type and optional scope.

    An unterminated ``(`` drops the scope; the type token is always the
    text before the first ``(``.
    """
    open_idx = header.find('(')
    if open_idx == -1:
        return CommitType.from_token(header), None

    commit_type = CommitType.from_token(header[:open_idx])
    close_idx = header.find(')', open_idx)
    if close_idx == -1:
        return commit_type, None
    return commit_type, header[open_idx + 1 : close_idx]


class ConventionalCommitParser:
    """Parser for `Conventional Commits <https://www.conventionalcommits.org/>`_.

    Parses subjects in the format ``type(scope)!: description`` and scans
    the full message for a ``BREAKING CHANGE`` footer.
    """

    def parse(self, subject: str, body: str | None = None) -> ParsedCommit:
        """Parse a commit message as a Conventional Commit.

        Args:
            subject: The commit subject line.
            body: The rest of the commit message, if any.

        Returns:
            A :class:`ParsedCommit`. Subjects without a prefix are
            classified as :attr:`CommitType.UNKNOWN` with the subject
            unchanged as the description.
        """
        breaking = False
        commit_type = CommitType.UNKNOWN
        scope: str | None = None
        description = subject

        marker_idx = subject.find(BREAKING_MARKER)
        if marker_idx != -1:
            breaking = True
            commit_type, scope = _parse_header(subject[:marker_idx].strip())
            # Keep the raw subject when nothing follows the marker.
            description = subject[marker_idx + len(BREAKING_MARKER) :].strip() or subject
        else:
            colon_idx = subject.find(HEADER_SEPARATOR)
            if colon_idx != -1:
                commit_type, scope = _parse_header(subject[:colon_idx].strip())
                description = subject[colon_idx + len(HEADER_SEPARATOR) :].strip() or subject

        if BREAKING_FOOTER in subject or (body is not None and BREAKING_FOOTER in body):
            breaking = True

        return ParsedCommit(
            type=commit_type,
            description=description,
            scope=scope,
            breaking=breaking,
        )
