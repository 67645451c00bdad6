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

"""Markdown changelog generation from Conventional Commits.

Key Concepts (ELI5)::

    ┌─────────────────────────┬─────────────────────────────────────────────┐
    │ Concept                 │ Plain-English                               │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ Commit                  │ One parsed commit: type, scope, description │
    │                         │ and breaking flag.                          │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ Section                 │ A group of commits under one heading, e.g.  │
    │                         │ "🚀 Features" or "🐛 Bug Fixes".            │
    ├─────────────────────────┼─────────────────────────────────────────────┤
    │ ChangelogResult         │ The rendered markdown plus the sections     │
    │                         │ and contributors it was built from.         │
    └─────────────────────────┴─────────────────────────────────────────────┘

Changelog generation flow::

    vcs.log(from_ref=last_tag, to_ref='HEAD')
         │
         ▼
    parse_log_record(record)  →  Commit
         │
         ├──▶ group_commits(commits, config)         →  list[Section]
         └──▶ collect_contributors(commits, config)  →  list[str]
         │
         ▼
    render_changelog(sections, config)  →  markdown string

Usage::

    from changelogkit.changelog import generate_changelog

    result = await generate_changelog(
        vcs=GitCLIBackend(Path('.')),
        config=ChangelogConfig(from_ref='v0.4.0', repo_url='https://github.com/o/r'),
    )
    print(result.content)
    # ## [HEAD] - 2026-02-10
    #
    # [HEAD]: https://github.com/o/r/compare/v0.4.0...HEAD
    #
    # ### 🚀 Features
    #
    # - **streaming**: add real-time event streaming ([def4567](https://github.com/o/r/commit/def4567...))
    #
    # ### 🐛 Bug Fixes
    #
    # - fix race condition in publisher ([789abcd](https://github.com/o/r/commit/789abcd...)) ⚠️ BREAKING
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from changelogkit.backends.vcs import VCS
from changelogkit.commit_parsing import Commit, CommitParser, parse_log_record
from changelogkit.config import ChangelogConfig
from changelogkit.contributors import collect_contributors
from changelogkit.errors import ChangelogKitError, E
from changelogkit.forge import commit_url, compare_url
from changelogkit.grouping import Section, group_commits
from changelogkit.logging import get_logger
from changelogkit.utils.date import utc_today

logger = get_logger(__name__)

CHANGELOG_TITLE = '# Changelog'
CONTRIBUTORS_HEADING = '👥 Contributors'
BREAKING_SUFFIX = ' ⚠️ BREAKING'

# First "## " heading line in an existing changelog file.
_VERSION_HEADING_PATTERN: re.Pattern[str] = re.compile(r'^## ', re.MULTILINE)


@dataclass
class ChangelogResult:
    """A rendered changelog and the structure it was rendered from.

    Attributes:
        content: The markdown text.
        sections: Non-empty sections in display order.
        contributors: Unique contributor identities, first-seen order.
        from_ref: The resolved start of the range, or ``None`` for the
            whole history.
        to_ref: The end of the range.
    """

    content: str
    sections: list[Section] = field(default_factory=list)
    contributors: list[str] = field(default_factory=list)
    from_ref: str | None = None
    to_ref: str = 'HEAD'


def _render_entry(commit: Commit, repo_url: str | None) -> str:
    """Render one commit as a markdown bullet point.

    Format: ``- **scope**: description ([short](url)) ⚠️ BREAKING``
    """
    parts: list[str] = ['- ']

    if commit.scope:
        parts.append(f'**{commit.scope}**: ')

    parts.append(commit.description)

    if repo_url:
        parts.append(f' ([{commit.short_sha}]({commit_url(repo_url, commit.sha)}))')
    else:
        parts.append(f' ({commit.short_sha})')

    if commit.breaking:
        parts.append(BREAKING_SUFFIX)

    return ''.join(parts)


def render_changelog(
    sections: Sequence[Section],
    config: ChangelogConfig,
    *,
    compare_link: str | None = None,
    contributors: Sequence[str] = (),
    today: str | None = None,
) -> str:
    """Render sections as a markdown changelog entry.

    Args:
        sections: Sections from :func:`~changelogkit.grouping.group_commits`.
            Empty sections are skipped.
        config: Supplies ``to_ref``, ``include_dates``, ``repo_url`` and
            ``include_contributors``.
        compare_link: Precomputed compare URL for the range, if any.
        contributors: Contributor identities to list.
        today: Date for the heading. Defaults to today's UTC date.

    Returns:
        Markdown text ending with a blank line.
    """
    lines: list[str] = []

    heading = f'## [{config.to_ref}]'
    if config.include_dates:
        heading += f' - {today or utc_today()}'
    lines.extend([heading, ''])

    if compare_link:
        lines.extend([f'[{config.to_ref}]: {compare_link}', ''])

    for section in sections:
        if not section.commits:
            continue
        lines.extend([f'### {section.title}', ''])
        lines.extend(_render_entry(commit, config.repo_url) for commit in section.commits)
        lines.append('')

    if config.include_contributors and contributors:
        lines.extend([f'### {CONTRIBUTORS_HEADING}', ''])
        lines.extend(f'- {contributor}' for contributor in contributors)
        lines.append('')

    return '\n'.join(lines) + '\n'


async def _resolve_from_ref(vcs: VCS, to_ref: str) -> str | None:
    """Return the latest tag before ``to_ref``, or ``None`` if untagged.

    When ``to_ref`` is itself a tag, the tag before it is used so the
    range is not empty.
    """
    tag = await vcs.latest_tag(to_ref)
    if tag is not None and tag == to_ref:
        tag = await vcs.latest_tag(f'{to_ref}^')
    return tag


async def generate_changelog(
    *,
    vcs: VCS,
    config: ChangelogConfig,
    commit_parser: CommitParser | None = None,
    today: str | None = None,
) -> ChangelogResult:
    """Generate a changelog for a commit range.

    Args:
        vcs: VCS backend to read history from.
        config: Range, exclusions and rendering options. ``repo_url``
            is used as given; the CLI fills it from the git remote.
        commit_parser: Optional custom commit parser. Defaults to
            :class:`~changelogkit.commit_parsing.ConventionalCommitParser`.
        today: Date for the heading. Defaults to today's UTC date.

    Returns:
        A :class:`ChangelogResult`.

    Raises:
        ChangelogKitError: If the directory is not a repository, git
            fails, or a log record is malformed.
    """
    if not await vcs.is_repository():
        raise ChangelogKitError(
            code=E.REPO_NOT_FOUND,
            message='Not a git repository.',
            hint='Run from a git checkout or pass --dir <path>.',
        )

    from_ref = config.from_ref if config.from_ref is not None else await _resolve_from_ref(vcs, config.to_ref)
    logger.info('changelog_range', from_ref=from_ref or '(start)', to_ref=config.to_ref)

    records = await vcs.log(from_ref=from_ref, to_ref=config.to_ref)
    commits = [parse_log_record(record, parser=commit_parser) for record in records]
    logger.info('changelog_commits_found', count=len(commits))

    sections = group_commits(commits, config)
    contributors = collect_contributors(commits, config)

    compare_link = None
    if config.repo_url and from_ref:
        compare_link = compare_url(config.repo_url, from_ref, config.to_ref)

    content = render_changelog(
        sections,
        config,
        compare_link=compare_link,
        contributors=contributors,
        today=today,
    )

    logger.info(
        'changelog_generated',
        sections=len(sections),
        entries=sum(len(s.commits) for s in sections),
        contributors=len(contributors),
    )

    return ChangelogResult(
        content=content,
        sections=sections,
        contributors=contributors,
        from_ref=from_ref,
        to_ref=config.to_ref,
    )


def splice_changelog(existing: str | None, rendered: str) -> str:
    """Insert a rendered entry into changelog text.

    - No existing file: the ``# Changelog`` title, a blank line, then
      the entry.
    - Existing text with a ``## `` heading line: the entry goes right
      before the first such line, followed by a blank line.
    - Otherwise the entry is appended after a blank line.

    Args:
        existing: Current file contents, or ``None`` if there is no file.
        rendered: Output of :func:`render_changelog`.

    Returns:
        The new file contents.
    """
    if existing is None:
        return f'{CHANGELOG_TITLE}\n\n{rendered}'

    match = _VERSION_HEADING_PATTERN.search(existing)
    if match:
        idx = match.start()
        return existing[:idx] + rendered + '\n' + existing[idx:]

    separator = '' if existing.endswith('\n\n') else '\n'
    return existing + separator + rendered


def write_changelog(
    changelog_path: Path,
    rendered: str,
    *,
    dry_run: bool = False,
) -> str:
    """Splice a rendered entry into a changelog file.

    Args:
        changelog_path: Path to the changelog file. Created if missing.
        rendered: Rendered markdown from :func:`render_changelog`.
        dry_run: Compute the new contents without writing them.

    Returns:
        The new file contents.

    Raises:
        ChangelogKitError: If the file cannot be read or written.
    """
    try:
        existing = changelog_path.read_text(encoding='utf-8') if changelog_path.exists() else None
        new_content = splice_changelog(existing, rendered)

        if dry_run:
            logger.info('changelog_dry_run', path=str(changelog_path))
            return new_content

        changelog_path.parent.mkdir(parents=True, exist_ok=True)
        changelog_path.write_text(new_content, encoding='utf-8')
    except OSError as exc:
        raise ChangelogKitError(
            code=E.OUTPUT_WRITE_FAILED,
            message=f'Failed to update {changelog_path}: {exc}',
            hint='Check the path passed to -o/--output and its permissions.',
        ) from exc

    logger.info('changelog_written', path=str(changelog_path), created=existing is None)
    return new_content


__all__ = [
    'CHANGELOG_TITLE',
    'ChangelogResult',
    'generate_changelog',
    'render_changelog',
    'splice_changelog',
    'write_changelog',
]
