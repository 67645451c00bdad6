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

"""Structured logging for changelogkit.

stdout belongs to the changelog (``changelogkit > notes.md``), so every
log line goes to stderr through the root stdlib handler, rendered by
`structlog <https://www.structlog.org/>`_:

    ┌──────────────┬───────────┬─────────────────────────────────────────┐
    │ Flags        │ Level     │ What a run shows on stderr              │
    ├──────────────┼───────────┼─────────────────────────────────────────┤
    │ (none)       │ WARNING   │ Only problems, e.g. dry_run_ignored     │
    │ --verbose    │ DEBUG     │ Every git command, range and count      │
    │ --quiet      │ ERROR     │ Nothing but failures (wins over -v)     │
    │ --json-log   │ unchanged │ Same events as JSON lines, timestamped  │
    └──────────────┴───────────┴─────────────────────────────────────────┘

Event names are snake_case (``changelog_range``, ``command_ok``) with the
details as key/value pairs.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _level_for(*, verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Route structlog events to stderr at the level the flags ask for.

    Safe to call more than once; each call replaces the previous handler.

    Args:
        verbose: Show debug events.
        quiet: Only show errors. Takes precedence over ``verbose``.
        json_log: Render one JSON object per line instead of console text.
    """
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=_level_for(verbose=verbose, quiet=quiet),
        force=True,
    )

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if json_log:
        # Only JSON lines carry timestamps.
        processors.append(structlog.processors.TimeStamper(fmt='iso'))
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'changelogkit') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named ``name``."""
    return structlog.get_logger(name)


__all__ = [
    'configure_logging',
    'get_logger',
]
