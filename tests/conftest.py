"""Shared fixtures: an 18-hole course and a round builder."""

import pytest

from golfscore.config import CONFIG_DIR_ENV, clear_config_cache
from golfscore.models import Course, Hole, Round


def build_course(pars=None, name='Test Course'):
    """18 holes, par 4 unless given, stroke index equal to the hole number."""
    pars = pars or [4] * 18
    return Course(
        name=name,
        holes=tuple(
            Hole(number=number, par=par, stroke_index=number)
            for number, par in enumerate(pars, 1)
        ),
    )


@pytest.fixture
def course():
    return build_course()


@pytest.fixture
def make_round(course):
    """Factory for rounds on the test course."""

    def _make(players, scores=None, teams=None, **kwargs):
        return Round(
            course=course,
            players=tuple(players),
            scores=scores or {},
            teams=teams or {},
            **kwargs,
        )

    return _make


@pytest.fixture(autouse=True)
def fresh_config_cache(tmp_path, monkeypatch):
    """Every test starts without a cached Stableford table or saved user config."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / 'golfscore_config'))
    clear_config_cache()
    yield
    clear_config_cache()
