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

r"""Splitting ``git log`` output into :class:`Commit` records.

The history reader asks git for one record per commit::

    %H|||%h|||%an|||%ae|||%ci|||%s|||%b%x1e
     │    │    │    │    │    │    └── body (optional, may span lines)
     │    │    │    │    │    └─────── subject
     │    │    │    │    └──────────── committer date, passed through verbatim
     │    │    │    └───────────────── author email
     │    │    └────────────────────── author name
     │    └─────────────────────────── abbreviated hash
     └──────────────────────────────── full hash

Records end with ``\x1e`` (ASCII record separator) so multi-line bodies
stay inside their record.
"""

from __future__ import annotations

from changelogkit.commit_parsing._conventional import ConventionalCommitParser
from changelogkit.commit_parsing._types import Commit, CommitParser
from changelogkit.errors import ChangelogKitError, E

FIELD_SEPARATOR = '|||'
RECORD_SEPARATOR = '\x1e'

LOG_FORMAT = FIELD_SEPARATOR.join(['%H', '%h', '%an', '%ae', '%ci', '%s', '%b']) + '%x1e'

# hash, short hash, author name, author email, date, subject.
_REQUIRED_FIELDS = 6

_DEFAULT_PARSER = ConventionalCommitParser()


def parse_log_record(
    record: str,
    *,
    separator: str = FIELD_SEPARATOR,
    parser: CommitParser | None = None,
) -> Commit:
    """Parse one ``git log`` record into a :class:`Commit`.

    Args:
        record: A single record, without the record separator.
        separator: The field separator used in the log format.
        parser: Commit message parser. Defaults to
            :class:`ConventionalCommitParser`.

    Returns:
        The parsed :class:`Commit`.

    Raises:
        ChangelogKitError: If the record has fewer than six fields.
    """
    parts = record.strip('\r\n').split(separator, _REQUIRED_FIELDS)
    if len(parts) < _REQUIRED_FIELDS:
        raise ChangelogKitError(
            code=E.LOG_RECORD_MALFORMED,
            message=f'Expected at least {_REQUIRED_FIELDS} fields in git log record, got {len(parts)}: {record!r}',
            hint='Check that no commit subject contains the field separator.',
        )

    sha, short_sha, author_name, author_email, date, subject = parts[:_REQUIRED_FIELDS]
    body: str | None = None
    if len(parts) > _REQUIRED_FIELDS and parts[_REQUIRED_FIELDS].strip():
        body = parts[_REQUIRED_FIELDS].strip()

    parsed = (parser or _DEFAULT_PARSER).parse(subject, body)
    return Commit.from_parsed(
        parsed,
        sha=sha,
        short_sha=short_sha,
        author_name=author_name,
        author_email=author_email,
        date=date,
        subject=subject,
        body=body,
    )


def parse_log_output(
    output: str,
    *,
    parser: CommitParser | None = None,
) -> list[Commit]:
    """Parse the full output of ``git log --pretty=format:LOG_FORMAT``.

    Blank records are skipped; input order is preserved.

    Raises:
        ChangelogKitError: If any record is malformed. No partial list
            is returned.
    """
    commits: list[Commit] = []
    for record in output.split(RECORD_SEPARATOR):
        if not record.strip():
            continue
        commits.append(parse_log_record(record, parser=parser))
    return commits
