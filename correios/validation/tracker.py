# -*- coding: utf-8 -*-
"""Module with validation schemas for tracking codes and their labels.
"""
from typing import Optional

import voluptuous as vlps

from correios.modules.tracker.tracker import TRACKING_CODE_LENGTH


CODE_LENGTH_MESSAGE = f'Tracking code must have {TRACKING_CODE_LENGTH} characters'

# Used for every code coming from user, before it reaches storage or network.
TRACKING_CODE_SCHEMA = vlps.Schema(vlps.All(
	str,
	vlps.Length(min=TRACKING_CODE_LENGTH, max=TRACKING_CODE_LENGTH, msg=CODE_LENGTH_MESSAGE),
	# Code and label share a line in storage, separated by space.
	vlps.Match(r'^\S*\Z', msg='Tracking code must not contain whitespace')
))

# Free text, one line. Empty label is no label.
LABEL_SCHEMA = vlps.Schema(vlps.Any(
	None,
	vlps.All(
		str,
		# Storage is line oriented.
		vlps.Match(r'^[^\r\n]*$'),
		vlps.Strip,
		lambda label: label or None
	),
	msg='Label must be a single line of text'
))


class ValidationError(ValueError):
	"""Base class for rejected user input."""

	def __init__(self, message: str):
		self.message = message
		super().__init__(message)


class InvalidCodeError(ValidationError):
	pass


class InvalidLabelError(ValidationError):
	pass


def validate_code(code: str) -> str:
	"""Return `code` if it's a valid tracking code, raise InvalidCodeError otherwise."""
	try:
		return TRACKING_CODE_SCHEMA(code)
	except vlps.Invalid as e:
		raise InvalidCodeError(e.msg) from e


def validate_label(label: Optional[str]) -> Optional[str]:
	"""Return normalized `label`: stripped, None if empty.

	InvalidLabelError will be raised for multiline labels.
	"""
	try:
		return LABEL_SCHEMA(label)
	except vlps.Invalid as e:
		raise InvalidLabelError(e.msg) from e


def is_valid_code(code: str) -> bool:
	try:
		validate_code(code)
	except InvalidCodeError:
		return False
	return True
