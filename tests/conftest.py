"""Pytest configuration and shared fixtures."""
import pytest

from correios.modules.store.store import CodeStore


@pytest.fixture
def store_path(tmp_path):
	return tmp_path / 'correios'


@pytest.fixture
def store(store_path):
	return CodeStore(store_path)
