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

"""Web links for commits and commit ranges on a code forge.

Remote URLs come in several shapes; all of them are reduced to the
repository's HTTPS page before links are built::

    git@github.com:owner/repo.git          →  https://github.com/owner/repo
    ssh://git@gitlab.com:22/group/repo.git →  https://gitlab.com/group/repo
    https://bitbucket.org/team/repo.git    →  https://bitbucket.org/team/repo

Link shapes per forge::

    ┌───────────┬─────────────────────────────────┬──────────────────────┐
    │ Forge     │ compare                         │ commit               │
    ├───────────┼─────────────────────────────────┼──────────────────────┤
    │ GitHub    │ /compare/<from>...<to>          │ /commit/<sha>        │
    │ GitLab    │ /-/compare/<from>...<to>        │ /-/commit/<sha>      │
    │ Bitbucket │ /branches/compare/<to>%0D<from> │ /commits/<sha>       │
    │ other     │ /compare/<from>...<to>          │ /commit/<sha>        │
    └───────────┴─────────────────────────────────┴──────────────────────┘
"""

from __future__ import annotations

import enum
from urllib.parse import urlsplit


class Forge(enum.Enum):
    """Code hosting providers with distinct URL schemes."""

    GITHUB = 'github'
    GITLAB = 'gitlab'
    BITBUCKET = 'bitbucket'
    GENERIC = 'generic'


def detect_forge(repo_url: str) -> Forge:
    """Guess the forge from a substring of the host in ``repo_url``.

    Self-hosted instances match too, e.g. ``gitlab.example.com``.
    """
    host = (urlsplit(repo_url).hostname or repo_url).lower()
    for forge in (Forge.GITHUB, Forge.GITLAB, Forge.BITBUCKET):
        if forge.value in host:
            return forge
    return Forge.GENERIC


def normalize_remote_url(url: str) -> str | None:
    """Turn a git remote URL into the repository's HTTPS page URL.

    Args:
        url: The value of ``remote.<name>.url``.

    Returns:
        An ``https://`` URL without credentials, a ``.git`` suffix or a
        trailing slash, or ``None`` for an empty value. ``http://``
        remotes keep their scheme and port.
    """
    url = url.strip()
    if not url:
        return None

    if '://' in url:
        # Credentials in the netloc (CI tokens) never reach the output.
        parts = urlsplit(url)
        host = parts.hostname or ''
        if parts.scheme in ('http', 'https'):
            scheme = parts.scheme
            if parts.port:
                host = f'{host}:{parts.port}'
        else:
            scheme = 'https'
        url = f'{scheme}://{host}{parts.path}'
    elif '@' in url and ':' in url:
        # scp-like syntax: user@host:path
        user_host, path = url.split(':', 1)
        host = user_host.rsplit('@', 1)[1]
        url = f'https://{host}/{path.lstrip("/")}'

    url = url.rstrip('/')
    url = url.removesuffix('.git')
    return url.rstrip('/') or None


def compare_url(repo_url: str, from_ref: str, to_ref: str) -> str:
    """Return the forge page comparing ``from_ref`` with ``to_ref``."""
    forge = detect_forge(repo_url)
    if forge is Forge.GITLAB:
        return f'{repo_url}/-/compare/{from_ref}...{to_ref}'
    if forge is Forge.BITBUCKET:
        return f'{repo_url}/branches/compare/{to_ref}%0D{from_ref}'
    return f'{repo_url}/compare/{from_ref}...{to_ref}'


def commit_url(repo_url: str, sha: str) -> str:
    """Return the forge page for a single commit."""
    forge = detect_forge(repo_url)
    if forge is Forge.GITLAB:
        return f'{repo_url}/-/commit/{sha}'
    if forge is Forge.BITBUCKET:
        return f'{repo_url}/commits/{sha}'
    return f'{repo_url}/commit/{sha}'


__all__ = [
    'Forge',
    'commit_url',
    'compare_url',
    'detect_forge',
    'normalize_remote_url',
]
