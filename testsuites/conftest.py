"""
================================================================================
Root Pytest Configuration
================================================================================

Registers markers for the whole test tree and tags tests by suite.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "unit: Fast tests against in-memory Playwright fakes"
    )
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )


def pytest_collection_modifyitems(config, items):
    """Tag tests with their suite marker based on location."""
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "page-kit: Playwright Page Object Framework",
        "=" * 60,
        "",
    ]
