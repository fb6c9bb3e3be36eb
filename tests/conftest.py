"""
Pytest configuration and fixtures for arthroprod tests.
"""

import logging

import pytest

from arthroprod.algebra import ALLOWED, Alpha, Axis, Sign, Term, MultiVector


@pytest.fixture
def all_alphas():
    """Every registry element with a positive sign, in registry order."""
    return [Alpha(f) for f in ALLOWED]


@pytest.fixture
def all_signed_alphas(all_alphas):
    """Every registry element with both signs."""
    return all_alphas + [-a for a in all_alphas]


@pytest.fixture
def axes():
    """The four axes."""
    return list(Axis)


@pytest.fixture
def point():
    """+ap"""
    return Alpha("p")


@pytest.fixture
def neg_point():
    """-ap"""
    return Alpha("p", Sign.NEG)


@pytest.fixture
def two_term_mvec():
    """ξa.ap + ξa.a23: invertible, with a scalar phi."""
    return MultiVector([Term(Alpha("p"), "a"), Term(Alpha("23"), "a")])


@pytest.fixture
def debug_logging(caplog):
    """Capture arthroprod debug records."""
    caplog.set_level(logging.DEBUG, logger="arthroprod")
    return caplog


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
