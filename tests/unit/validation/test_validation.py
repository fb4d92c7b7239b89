"""Unit tests for tracking code and label validation."""
import pytest

from correios.validation.tracker import (
	CODE_LENGTH_MESSAGE,
	InvalidCodeError,
	InvalidLabelError,
	is_valid_code,
	validate_code,
	validate_label,
)


@pytest.mark.parametrize('code', ['short', 'ABCD1234567890', ''])
def test_code_of_wrong_length_is_rejected(code) -> None:
	"""Only codes of exactly 13 characters are accepted."""
	with pytest.raises(InvalidCodeError) as info:
		validate_code(code)

	assert info.value.message == CODE_LENGTH_MESSAGE


def test_code_of_13_characters_is_accepted() -> None:
	assert validate_code('1234567890123') == '1234567890123'


def test_code_with_whitespace_is_rejected() -> None:
	"""Code and label are separated by space in storage."""
	with pytest.raises(InvalidCodeError):
		validate_code('AA1234 6789BR')


def test_is_valid_code() -> None:
	assert is_valid_code('AA123456789BR')
	assert not is_valid_code('AA123456789')


def test_label_is_stripped_and_empty_becomes_none() -> None:
	assert validate_label('  new phone ') == 'new phone'
	assert validate_label('   ') is None
	assert validate_label('') is None
	assert validate_label(None) is None


def test_multiline_label_is_rejected() -> None:
	with pytest.raises(InvalidLabelError):
		validate_label('first\nsecond')


def test_code_with_trailing_newline_is_rejected() -> None:
	with pytest.raises(InvalidCodeError):
		validate_code('AA12345678BR\n')
