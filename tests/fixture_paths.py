"""Shared fixture helpers for tests."""
import os.path

FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'fixtures')


def read_fixture(name: str) -> bytes:
	"""Raw bytes of a file under tests/fixtures."""
	with open(os.path.join(FIXTURES_DIR, name), 'rb') as file:
		return file.read()
