"""Shared pytest configuration for the TreeKit test suite."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees; skipped by run_tests.py unless --all")
