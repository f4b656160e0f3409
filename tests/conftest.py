"""
Shared pytest fixtures for the Content Manager test suite.

Fixtures here are used by every sub-suite: the active configuration class
and a seeded Faker instance for generated test data.
"""

import pytest
from faker import Faker

from cms_e2e.config import Config, get_config


@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """
    Provide the configuration class for the current environment.

    Selected by ``E2E_ENV`` (``local`` or ``ci``).
    """
    return get_config()


@pytest.fixture(scope="session")
def fake() -> Faker:
    """
    Provide a Faker instance for generated test data.

    Seeded so a failing run can be replayed with the same values.
    """
    faker = Faker()
    faker.seed_instance(1337)
    return faker
