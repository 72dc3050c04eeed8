"""Shared pytest fixtures for the diagtest test suite."""

from __future__ import annotations

import pytest

from tests.helpers import BROKEN_FIXTURE, FAILING_FIXTURE, PASSING_FIXTURE


@pytest.fixture
def tmp_project(tmp_path):
    """A project with a config pointing at the toy frontend and three fixtures."""
    (tmp_path / "diagtest.toml").write_text(
        '[frontend]\nentry = "tests.helpers:toy_frontend"\n'
        '[tests]\nroot = "fixtures"\npattern = "*.sol"\n'
        '[output]\ncolor = false\nline_prefix = "  "\n'
    )
    fixtures = tmp_path / "fixtures"
    fixtures.mkdir()
    (fixtures / "pass.sol").write_text(PASSING_FIXTURE)
    (fixtures / "fail.sol").write_text(FAILING_FIXTURE)
    (fixtures / "broken.sol").write_text(BROKEN_FIXTURE)
    return tmp_path
