"""
Root pytest configuration for the Django project.

This module configures pytest-django and provides project-wide fixtures.
App-specific fixtures are defined in each app's tests/conftest.py.
"""

import os

import django
import pytest

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


def pytest_configure():
    """Configure Django settings before tests run."""
    django.setup()

    from django.conf import settings

    # Collaborator URLs are mocked per test; keep them deterministic
    settings.CANCEL_COURSE_URL = "https://courses.test/api/cancel-course"
    settings.MAGENTO_API_URL = "https://magento.test/api"
    settings.MAGENTO_API_TOKEN = "magento-token"
    settings.BIFROST_API_URL = "https://bifrost.test/api"
    settings.BIFROST_API_KEY = "bifrost-key"
    settings.MAROL_API_URL = "https://marol.test/api"
    settings.MAROL_API_KEY = "marol-key"


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_integration.py → e2e (full expiry workflow against the database)
    - test_expiry_service.py, test_expiry_worker.py, etc. → integration
    - test_models.py, test_locks.py, test_state_transitions.py, etc. → unit
    - Unmatched files → integration (safe default for Django)

    Explicit markers on test functions/classes take precedence.
    """
    e2e_patterns = ["test_integration.py"]

    unit_patterns = [
        "test_models.py",
        "test_state_transitions.py",
        "test_locks.py",
        "test_types.py",
        "test_services_core.py",
        "test_exceptions.py",
    ]

    for item in items:
        # Skip if already has a category marker
        if any(item.get_closest_marker(m) for m in ["unit", "integration", "e2e"]):
            continue

        filename = item.fspath.basename

        if filename in e2e_patterns:
            item.add_marker(pytest.mark.e2e)
        elif filename in unit_patterns:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def mock_redis(mocker):
    """
    Mock Redis client for distributed lock tests.

    Returns a MagicMock configured for basic lock operations.
    """
    mock_client = mocker.MagicMock()
    mock_client.set.return_value = True
    mock_client.get.return_value = None
    mock_client.eval.return_value = 1

    mocker.patch(
        "epayment.locks.get_redis_connection",
        return_value=mock_client,
    )

    return mock_client
