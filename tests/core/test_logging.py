"""
Tests for the package logging setup.
"""

import logging

import pytest
from combat_odds.core.logging import LOGGER_NAMESPACE, get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAMESPACE)
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_relative_names_are_placed_under_the_package():
    assert get_logger("content").name == "combat_odds.content"


def test_qualified_names_are_kept():
    assert get_logger("combat_odds.core.content").name == "combat_odds.core.content"
    assert get_logger("combat_odds").name == "combat_odds"


def test_similar_prefix_is_not_treated_as_qualified():
    assert get_logger("combat_oddsx").name == "combat_odds.combat_oddsx"


def test_setup_sets_the_package_level(package_logger):
    logger = setup_logging(logging.DEBUG)
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert get_logger("content").isEnabledFor(logging.DEBUG)
