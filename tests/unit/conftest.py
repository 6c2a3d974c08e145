"""
Unit test fixtures - factory-built employees.
"""

import pytest

from tests.factories.employee_factories import make_employees


@pytest.fixture
def it_hr_employees():
    """IT(100), it(200), HR(300) in source order."""
    return make_employees([("IT", 100), ("it", 200), ("HR", 300)])


@pytest.fixture
def sixty_it_employees():
    """60 IT employees with salaries 1..60."""
    return make_employees([("IT", salary) for salary in range(1, 61)])
