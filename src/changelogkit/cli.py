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

"""CLI entry point for changelogkit.

Loads ``changelogkit.toml``, layers command-line flags on top, builds a
:class:`~changelogkit.backends.vcs.GitCLIBackend` and runs
:func:`~changelogkit.changelog.generate_changelog`.

Usage::

    # Changes since the latest tag, printed to stdout:
    uvx changelogkit

    # An explicit range, spliced into CHANGELOG.md:
    uvx changelogkit --from v0.4.0 --to v0.5.0 -o CHANGELOG.md

    # Skip bots and list contributors by name only:
    uvx changelogkit --exclude-author 'dependabot[bot]' --hide-author-email

    # Explain an error:
    uvx changelogkit --explain CK-REPO-NOT-FOUND
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from rich_argparse import RichHelpFormatter

from changelogkit import __version__
from changelogkit.backends.vcs import GitCLIBackend
from changelogkit.changelog import generate_changelog, write_changelog
from changelogkit.config import ChangelogConfig, load_config
from changelogkit.errors import ChangelogKitError, explain, render_error
from changelogkit.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    RichHelpFormatter.styles['argparse.groups'] = 'bold yellow'
    parser = argparse.ArgumentParser(
        prog='changelogkit',
        description='Generate a markdown changelog from Conventional Commits.',
        formatter_class=RichHelpFormatter,
    )
    parser.add_argument(
        '-v',
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )

    range_group = parser.add_argument_group('range')
    range_group.add_argument(
        '--from',
        dest='from_ref',
        metavar='REF',
        default=None,
        help='Start of the range (exclusive). Defaults to the latest tag.',
    )
    range_group.add_argument(
        '--to',
        dest='to_ref',
        metavar='REF',
        default=None,
        help='End of the range (inclusive). Defaults to HEAD.',
    )
    range_group.add_argument(
        '--dir',
        dest='directory',
        metavar='PATH',
        type=Path,
        default=Path('.'),
        help='Repository directory (default: current directory).',
    )

    output_group = parser.add_argument_group('output')
    output_group.add_argument(
        '-o',
        '--output',
        metavar='FILE',
        default=None,
        help='Changelog file to update. Prints to stdout when omitted.',
    )
    output_group.add_argument(
        '--hide-author-email',
        action='store_const',
        const=True,
        default=None,
        help='List contributors by name only.',
    )
    output_group.add_argument(
        '--no-dates',
        dest='include_dates',
        action='store_const',
        const=False,
        default=None,
        help="Omit today's date from the version heading.",
    )
    output_group.add_argument(
        '--no-contributors',
        dest='include_contributors',
        action='store_const',
        const=False,
        default=None,
        help='Omit the Contributors section.',
    )
    output_group.add_argument(
        '--exclude-author',
        dest='exclude_authors',
        metavar='NAME_OR_EMAIL',
        action='append',
        default=None,
        help='Drop commits by this author name or email (exact match). Repeatable.',
    )
    output_group.add_argument(
        '--repo-url',
        metavar='URL',
        default=None,
        help='Repository web URL for links. Defaults to the origin remote.',
    )
    output_group.add_argument(
        '--dry-run',
        action='store_true',
        help=(
            'Print the updated file instead of writing it. Only applies when an output file '
            'is set by -o or changelogkit.toml; otherwise it has no effect.'
        ),
    )

    log_group = parser.add_argument_group('logging')
    log_group.add_argument(
        '--verbose',
        action='store_true',
        help='Show debug logs on stderr.',
    )
    log_group.add_argument(
        '--quiet',
        '-q',
        action='store_true',
        help='Only show errors.',
    )
    log_group.add_argument(
        '--json-log',
        action='store_true',
        help='Emit logs as JSON lines.',
    )

    parser.add_argument(
        '--explain',
        metavar='CODE',
        default=None,
        help='Explain an error code (e.g., CK-REPO-NOT-FOUND) and exit.',
    )

    return parser


def _cmd_explain(code: str) -> int:
    """Print the catalog entry for ``code``."""
    result = explain(code)
    if result is None:
        print(f'Unknown error code: {code}')  # noqa: T201 - CLI output
        return 1
    print(result)  # noqa: T201 - CLI output
    return 0


def _resolve_config(args: argparse.Namespace) -> ChangelogConfig:
    """Merge command-line flags over ``changelogkit.toml``."""
    file_config = load_config(args.directory)
    return file_config.merged(
        from_ref=args.from_ref,
        to_ref=args.to_ref,
        output=args.output,
        hide_author_email=args.hide_author_email,
        include_dates=args.include_dates,
        include_contributors=args.include_contributors,
        exclude_authors=args.exclude_authors,
        repo_url=args.repo_url,
        verbose=args.verbose or None,
    )


async def _cmd_generate(args: argparse.Namespace) -> int:
    """Generate the changelog and print or write it."""
    config = _resolve_config(args)
    vcs = GitCLIBackend(args.directory)

    if config.repo_url is None and await vcs.is_repository():
        config = config.merged(repo_url=await vcs.remote_url())

    result = await generate_changelog(vcs=vcs, config=config)

    if config.output is None:
        if args.dry_run:
            logger.warning('dry_run_ignored', reason='no output file; the changelog goes to stdout')
        sys.stdout.write(result.content)
        return 0

    output_path = Path(config.output)
    new_content = write_changelog(output_path, result.content, dry_run=args.dry_run)
    if args.dry_run:
        sys.stdout.write(new_content)
    else:
        print(f'Changelog written to {output_path}')  # noqa: T201 - CLI output
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        if args.explain is not None:
            return _cmd_explain(args.explain)
        return asyncio.run(_cmd_generate(args))
    except ChangelogKitError as exc:
        render_error(exc)
        return 1
    except KeyboardInterrupt:
        logger.info('interrupted')
        return 130


def _main() -> None:
    """Wrapper for pyproject.toml [project.scripts] entry point."""
    sys.exit(main())


__all__ = [
    'build_parser',
    'main',
]
