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

"""changelogkit: markdown changelogs from Conventional Commits."""

__version__ = '0.1.0'

from changelogkit.changelog import (  # noqa: E402
    ChangelogResult as ChangelogResult,
    generate_changelog as generate_changelog,
    render_changelog as render_changelog,
    splice_changelog as splice_changelog,
    write_changelog as write_changelog,
)
from changelogkit.commit_parsing import (  # noqa: E402
    Commit as Commit,
    CommitType as CommitType,
    parse_conventional_commit as parse_conventional_commit,
)
from changelogkit.config import ChangelogConfig as ChangelogConfig, load_config as load_config  # noqa: E402
from changelogkit.errors import ChangelogKitError as ChangelogKitError  # noqa: E402

__all__ = [
    'ChangelogConfig',
    'ChangelogKitError',
    'ChangelogResult',
    'Commit',
    'CommitType',
    '__version__',
    'generate_changelog',
    'load_config',
    'parse_conventional_commit',
    'render_changelog',
    'splice_changelog',
    'write_changelog',
]
