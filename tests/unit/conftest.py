"""Unit-level fixtures for translator tests."""

import pytest

from hgts import BabelPluralCategorizer
from tests.factories.resources import make_resources, make_translator


@pytest.fixture
def sample_resources():
    """Raw resources for en, es and fr."""
    return make_resources()


@pytest.fixture
def translator(sample_resources):
    """Translator in English with the context-free plural rule."""
    return make_translator(resources=sample_resources)


@pytest.fixture
def cldr_translator(sample_resources):
    """Translator in English using CLDR plural rules from Babel."""
    return make_translator(
        resources=sample_resources,
        categorizer=BabelPluralCategorizer(),
    )


@pytest.fixture
def hello_world_resources():
    """The minimal two-locale scenario used in end-to-end tests."""
    return {
        "en": {
            "greeting": "Hello, World!",
            "welcome": "Welcome, {{name}}!",
        },
        "es": {
            "greeting": "¡Hola, Mundo!",
        },
    }
