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

"""Configuration reader for changelogkit.

Reads ``changelogkit.toml`` from the repository root and returns a
validated :class:`ChangelogConfig`. The file uses flat top-level keys.
Command-line flags are layered on top with :meth:`ChangelogConfig.merged`.

Precedence::

    CLI flags  >  changelogkit.toml  >  built-in defaults

Supported keys in ``changelogkit.toml``::

    to_ref               = "HEAD"                      # end of the commit range
    exclude_authors      = ["dependabot[bot]"]         # name or email, exact match
    hide_author_email    = false                       # contributors without emails
    include_dates        = true                        # date in the version heading
    include_contributors = true                        # render a Contributors section
    repo_url             = "https://github.com/o/r"    # overrides the git remote
    output               = "CHANGELOG.md"              # default -o/--output

Usage::

    from changelogkit.config import load_config

    cfg = load_config(Path('/path/to/repo'))
    cfg = cfg.merged(from_ref='v1.0.0', verbose=True)
"""

from __future__ import annotations

import dataclasses
import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from changelogkit.errors import ChangelogKitError, E
from changelogkit.logging import get_logger

logger = get_logger(__name__)

# The config file name at the repository root.
CONFIG_FILENAME = 'changelogkit.toml'

DEFAULT_TO_REF = 'HEAD'

# All recognized keys in changelogkit.toml.
VALID_KEYS: frozenset[str] = frozenset({
    'exclude_authors',
    'hide_author_email',
    'include_contributors',
    'include_dates',
    'output',
    'repo_url',
    'to_ref',
})

_TYPE_MAP: dict[str, type] = {
    'exclude_authors': list,
    'hide_author_email': bool,
    'include_contributors': bool,
    'include_dates': bool,
    'output': str,
    'repo_url': str,
    'to_ref': str,
}


@dataclass(frozen=True)
class ChangelogConfig:
    """Settings for one changelog run.

    Attributes:
        from_ref: Start of the commit range (exclusive). ``None`` means
            "latest tag, or the whole history if there are no tags".
        to_ref: End of the commit range (inclusive).
        exclude_authors: Author names or emails whose commits are dropped.
            Matching is exact and case-sensitive.
        hide_author_email: List contributors by name only.
        include_dates: Put today's date in the version heading.
        include_contributors: Render a Contributors section.
        repo_url: Repository web URL used for commit and compare links.
        output: Changelog file to update. ``None`` means stdout.
        verbose: Log progress at debug level.
        config_path: Path to the changelogkit.toml that was loaded.
    """

    from_ref: str | None = None
    to_ref: str = DEFAULT_TO_REF
    exclude_authors: tuple[str, ...] = ()
    hide_author_email: bool = False
    include_dates: bool = True
    include_contributors: bool = True
    repo_url: str | None = None
    output: str | None = None
    verbose: bool = False
    config_path: Path | None = None

    def merged(self, **overrides: Any) -> ChangelogConfig:  # noqa: ANN401 - mirrors dataclass fields
        """Return a copy with the non-``None`` overrides applied.

        ``None`` means "not given on the command line", so it never
        replaces a value from the config file.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        if 'exclude_authors' in changes:
            changes['exclude_authors'] = tuple(changes['exclude_authors'])
        return dataclasses.replace(self, **changes)


def _validate_key(key: str) -> None:
    """Raise with a "did you mean" hint if the key is unknown."""
    if key in VALID_KEYS:
        return
    suggestion = difflib.get_close_matches(key, VALID_KEYS, n=1, cutoff=0.6)
    hint = f"Did you mean '{suggestion[0]}'?" if suggestion else f'Valid keys: {", ".join(sorted(VALID_KEYS))}.'
    raise ChangelogKitError(
        code=E.CONFIG_INVALID_KEY,
        message=f"Unknown key '{key}' in {CONFIG_FILENAME}",
        hint=hint,
    )


def _validate_value(key: str, value: Any) -> None:  # noqa: ANN401 - dynamic config values
    """Raise if a config value has the wrong type."""
    expected = _TYPE_MAP[key]
    if not isinstance(value, expected):
        raise ChangelogKitError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be {expected.__name__}, got {type(value).__name__}",
            hint=f'Check the value of {key} in {CONFIG_FILENAME}.',
        )
    if expected is list:
        for item in value:
            if not isinstance(item, str):
                raise ChangelogKitError(
                    code=E.CONFIG_INVALID_VALUE,
                    message=f"'{key}' items must be strings, got {type(item).__name__}: {item!r}",
                    hint=f'Each {key} entry should be an author name or email.',
                )


def load_config(repo_root: Path) -> ChangelogConfig:
    """Load and validate ``changelogkit.toml`` from ``repo_root``.

    A missing file is not an error; defaults are returned.

    Args:
        repo_root: Directory that may contain ``changelogkit.toml``.

    Returns:
        A validated :class:`ChangelogConfig`.

    Raises:
        ChangelogKitError: If the file cannot be parsed or contains
            unknown keys or wrongly typed values.
    """
    config_path = repo_root / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug('no_changelogkit_config', path=str(config_path))
        return ChangelogConfig()

    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as exc:
        raise ChangelogKitError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to read {config_path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise ChangelogKitError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to parse {config_path}: {exc}',
        ) from exc

    raw: dict[str, Any] = doc.unwrap()  # noqa: ANN401

    for key, value in raw.items():
        _validate_key(key)
        _validate_value(key, value)

    if 'exclude_authors' in raw:
        raw['exclude_authors'] = tuple(raw['exclude_authors'])

    logger.debug('changelogkit_config_loaded', path=str(config_path), keys=sorted(raw))
    return ChangelogConfig(**raw, config_path=config_path)


__all__ = [
    'CONFIG_FILENAME',
    'ChangelogConfig',
    'VALID_KEYS',
    'load_config',
]
