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

"""Tests for the commit_parsing subpackage.

All tests are pure: no I/O and no async.
"""

from __future__ import annotations

import pytest
from changelogkit.commit_parsing import (
    Commit,
    CommitParser,
    CommitType,
    ConventionalCommitParser,
    ParsedCommit,
    parse_conventional_commit,
)

# ---------------------------------------------------------------------------
# CommitType
# ---------------------------------------------------------------------------


class TestCommitType:
    """Tests for CommitType enum."""

    def test_tokens(self) -> None:
        """Test tokens."""
        assert CommitType.FEAT.token == 'feat'
        assert CommitType.CI.token == 'ci'
        assert CommitType.UNKNOWN.token == 'unknown'

    def test_titles(self) -> None:
        """Test titles."""
        assert CommitType.FEAT.title == '🚀 Features'
        assert CommitType.FIX.title == '🐛 Bug Fixes'
        assert CommitType.CHORE.title == '🧹 Chores'
        assert CommitType.UNKNOWN.title == 'Other Changes'

    def test_every_type_has_a_title(self) -> None:
        """Test every type has a title."""
        for commit_type in CommitType:
            assert commit_type.title

    @pytest.mark.parametrize(
        'token',
        ['feat', 'fix', 'docs', 'style', 'refactor', 'perf', 'test', 'build', 'ci', 'chore', 'revert'],
    )
    def test_from_token_known(self, token: str) -> None:
        """Every known token maps to its own type."""
        assert CommitType.from_token(token).token == token

    @pytest.mark.parametrize('token', ['Feat', 'FEAT', 'feature', '', 'unknown', ' feat'])
    def test_from_token_is_exact(self, token: str) -> None:
        """Matching is case-sensitive and exact."""
        assert CommitType.from_token(token) is CommitType.UNKNOWN


# ---------------------------------------------------------------------------
# parse_conventional_commit
# ---------------------------------------------------------------------------


class TestParseConventionalCommit:
    """Tests for parse_conventional_commit function."""

    def test_type_and_scope(self) -> None:
        """Test type and scope."""
        cc = parse_conventional_commit('feat(api): add login')
        assert cc == ParsedCommit(type=CommitType.FEAT, description='add login', scope='api', breaking=False)

    def test_type_only(self) -> None:
        """Test type only."""
        cc = parse_conventional_commit('fix: null pointer')
        assert cc.type is CommitType.FIX
        assert cc.scope is None
        assert cc.description == 'null pointer'
        assert not cc.breaking

    def test_description_is_trimmed(self) -> None:
        """Whitespace around the description is trimmed."""
        cc = parse_conventional_commit('docs(readme):    fix typo   ')
        assert cc.description == 'fix typo'
        assert cc.scope == 'readme'

    def test_bang_marks_breaking(self) -> None:
        """Test bang marks breaking."""
        cc = parse_conventional_commit('feat!: drop v1 endpoints')
        assert cc.type is CommitType.FEAT
        assert cc.breaking
        assert cc.scope is None
        assert cc.description == 'drop v1 endpoints'

    def test_bang_with_scope(self) -> None:
        """Test bang with scope."""
        cc = parse_conventional_commit('refactor(core)!: rename Session')
        assert cc.type is CommitType.REFACTOR
        assert cc.scope == 'core'
        assert cc.breaking
        assert cc.description == 'rename Session'

    def test_breaking_change_in_body(self) -> None:
        """A BREAKING CHANGE footer marks the commit breaking."""
        cc = parse_conventional_commit('fix: tighten config', 'Details.\n\nBREAKING CHANGE: drops the old key')
        assert cc.type is CommitType.FIX
        assert cc.breaking

    def test_breaking_change_in_subject(self) -> None:
        """Test breaking change in subject."""
        cc = parse_conventional_commit('chore: BREAKING CHANGE ahead')
        assert cc.breaking

    def test_breaking_change_is_case_sensitive(self) -> None:
        """Test breaking change is case sensitive."""
        cc = parse_conventional_commit('fix: x', 'breaking change: lowercase does not count')
        assert not cc.breaking

    def test_breaking_change_without_prefix(self) -> None:
        """The footer scan applies even to unknown commits."""
        cc = parse_conventional_commit('Rewrite everything', 'BREAKING CHANGE')
        assert cc.type is CommitType.UNKNOWN
        assert cc.breaking

    def test_no_colon_is_unknown(self) -> None:
        """Test no colon is unknown."""
        cc = parse_conventional_commit('Update README')
        assert cc.type is CommitType.UNKNOWN
        assert cc.description == 'Update README'
        assert cc.scope is None
        assert not cc.breaking

    def test_no_colon_keeps_subject_verbatim(self) -> None:
        """Without a delimiter the subject is not trimmed."""
        cc = parse_conventional_commit('  spaced out  ')
        assert cc.description == '  spaced out  '

    def test_scope_without_colon_is_unknown(self) -> None:
        """Test scope without colon is unknown."""
        cc = parse_conventional_commit('refactor(parser)')
        assert cc.type is CommitType.UNKNOWN
        assert cc.description == 'refactor(parser)'
        assert cc.scope is None

    def test_unknown_type_keeps_scope(self) -> None:
        """An unrecognized type token still yields a scope."""
        cc = parse_conventional_commit('feature(ui): new button')
        assert cc.type is CommitType.UNKNOWN
        assert cc.scope == 'ui'
        assert cc.description == 'new button'

    def test_uppercase_type_is_unknown(self) -> None:
        """Test uppercase type is unknown."""
        cc = parse_conventional_commit('Feat: shout')
        assert cc.type is CommitType.UNKNOWN
        assert cc.description == 'shout'

    def test_unterminated_scope(self) -> None:
        """An unterminated scope is dropped; the type comes from before '('."""
        cc = parse_conventional_commit('fix(parser: handle eof')
        assert cc.type is CommitType.FIX
        assert cc.scope is None
        assert cc.description == 'handle eof'

    def test_empty_scope(self) -> None:
        """Test empty scope."""
        cc = parse_conventional_commit('ci(): tweak')
        assert cc.type is CommitType.CI
        assert cc.scope == ''

    def test_scope_is_verbatim(self) -> None:
        """Test scope is verbatim."""
        cc = parse_conventional_commit('fix( a b ): x')
        assert cc.scope == ' a b '

    def test_empty_type_token(self) -> None:
        """Test empty type token."""
        cc = parse_conventional_commit(': nothing before the colon')
        assert cc.type is CommitType.UNKNOWN
        assert cc.description == 'nothing before the colon'

    def test_first_colon_wins(self) -> None:
        """Test first colon wins."""
        cc = parse_conventional_commit('fix: handle a: b case')
        assert cc.type is CommitType.FIX
        assert cc.description == 'handle a: b case'

    def test_bang_marker_anywhere_in_subject(self) -> None:
        """The '!:' marker splits the subject even after a plain colon."""
        cc = parse_conventional_commit('fix: wow!: really')
        assert cc.type is CommitType.UNKNOWN
        assert cc.breaking
        assert cc.description == 'really'

    def test_empty_description_falls_back_to_subject(self) -> None:
        """Test empty description falls back to subject."""
        cc = parse_conventional_commit('feat:   ')
        assert cc.type is CommitType.FEAT
        assert cc.description == 'feat:   '

    def test_empty_subject(self) -> None:
        """Test empty subject."""
        cc = parse_conventional_commit('')
        assert cc.type is CommitType.UNKNOWN
        assert cc.description == ''
        assert not cc.breaking

    @pytest.mark.parametrize(
        ('subject', 'expected_type'),
        [
            ('feat: a', CommitType.FEAT),
            ('fix: a', CommitType.FIX),
            ('perf: a', CommitType.PERF),
            ('refactor: a', CommitType.REFACTOR),
            ('docs: a', CommitType.DOCS),
            ('style: a', CommitType.STYLE),
            ('test: a', CommitType.TEST),
            ('build: a', CommitType.BUILD),
            ('ci: a', CommitType.CI),
            ('chore: a', CommitType.CHORE),
            ('revert: a', CommitType.REVERT),
        ],
    )
    def test_all_types(self, subject: str, expected_type: CommitType) -> None:
        """Every known type token is recognized."""
        assert parse_conventional_commit(subject).type is expected_type


# ---------------------------------------------------------------------------
# CommitParser protocol
# ---------------------------------------------------------------------------


class _EverythingIsAFix:
    """Custom parser used to exercise the protocol."""

    def parse(self, subject: str, body: str | None = None) -> ParsedCommit:
        return ParsedCommit(type=CommitType.FIX, description=subject.upper())


class TestCommitParserProtocol:
    """Tests for CommitParser protocol."""

    def test_conventional_parser_satisfies_protocol(self) -> None:
        """Test conventional parser satisfies protocol."""
        assert isinstance(ConventionalCommitParser(), CommitParser)

    def test_custom_parser_satisfies_protocol(self) -> None:
        """Test custom parser satisfies protocol."""
        assert isinstance(_EverythingIsAFix(), CommitParser)

    def test_parser_is_reusable(self) -> None:
        """Test parser is reusable."""
        parser = ConventionalCommitParser()
        first = parser.parse('feat: one')
        second = parser.parse('fix: two')
        assert first.type is CommitType.FEAT
        assert second.type is CommitType.FIX


# ---------------------------------------------------------------------------
# Commit
# ---------------------------------------------------------------------------


class TestCommit:
    """Tests for Commit dataclass."""

    def test_from_parsed(self) -> None:
        """Test from parsed."""
        parsed = parse_conventional_commit('feat(api)!: add login')
        commit = Commit.from_parsed(
            parsed,
            sha='f' * 40,
            short_sha='fffffff',
            author_name='Bob',
            author_email='bob@example.com',
            date='2026-02-10 12:00:00 +0000',
            subject='feat(api)!: add login',
        )
        assert commit.type is CommitType.FEAT
        assert commit.scope == 'api'
        assert commit.description == 'add login'
        assert commit.breaking
        assert commit.body is None
        assert commit.author_name == 'Bob'

    def test_frozen(self) -> None:
        """Test frozen."""
        commit = Commit(
            sha='a',
            short_sha='a',
            author_name='n',
            author_email='e',
            date='d',
            subject='s',
        )
        with pytest.raises(AttributeError):
            commit.subject = 'other'  # type: ignore[misc]

    def test_defaults(self) -> None:
        """Test defaults."""
        commit = Commit(sha='a', short_sha='a', author_name='n', author_email='e', date='d', subject='s')
        assert commit.type is CommitType.UNKNOWN
        assert commit.scope is None
        assert not commit.breaking
