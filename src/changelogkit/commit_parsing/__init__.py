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

"""Commit message parsing.

The :class:`CommitParser` protocol lets callers plug in their own
commit message format while keeping the same grouping and rendering
machinery.

Built-in parsers:

- :class:`ConventionalCommitParser`: ``type(scope)!: description``

Usage::

    from changelogkit.commit_parsing import CommitType, parse_conventional_commit

    cc = parse_conventional_commit('feat(auth): add OAuth2')
    assert cc.type is CommitType.FEAT
    assert cc.scope == 'auth'

    cc = parse_conventional_commit('Update README')
    assert cc.type is CommitType.UNKNOWN
    assert cc.description == 'Update README'
"""

from changelogkit.commit_parsing._conventional import ConventionalCommitParser
from changelogkit.commit_parsing._record import (
    FIELD_SEPARATOR,
    LOG_FORMAT,
    RECORD_SEPARATOR,
    parse_log_output,
    parse_log_record,
)
from changelogkit.commit_parsing._types import (
    Commit,
    CommitParser,
    CommitType,
    ParsedCommit,
)

# Module-level singleton for convenience.
_DEFAULT_PARSER = ConventionalCommitParser()


def parse_conventional_commit(subject: str, body: str | None = None) -> ParsedCommit:
    """Parse a single commit message as a Conventional Commit.

    Convenience wrapper around :meth:`ConventionalCommitParser.parse`.

    Args:
        subject: The commit subject line.
        body: The rest of the commit message, if any.

    Returns:
        A :class:`ParsedCommit`. This function never raises.
    """
    return _DEFAULT_PARSER.parse(subject, body)


__all__ = [
    'FIELD_SEPARATOR',
    'LOG_FORMAT',
    'RECORD_SEPARATOR',
    'Commit',
    'CommitParser',
    'CommitType',
    'ConventionalCommitParser',
    'ParsedCommit',
    'parse_conventional_commit',
    'parse_log_output',
    'parse_log_record',
]
