import pytest

from bootstrap_se.settings import generate_population


@pytest.fixture
def small_population():
    """Population of 100 values, Normal(100, 10), seed 42"""
    return generate_population(100, 100.0, 10.0, random_seed=42)


@pytest.fixture(scope="session")
def large_population():
    """Population of 10000 values, Normal(100, 10), seed 42"""
    return generate_population(10000, 100.0, 10.0, random_seed=42)
