# -*- coding: utf-8 -*-
"""Common module for all commands in correios.commands, providing a BaseCommand
class that all commands should inherit from as well as CommandError class.
"""
from typing import Callable, Optional, Sequence, TypeVar

import voluptuous as vlps

from correios.modules.store.store import CodeStore, StoreError
from correios.validation.tracker import ValidationError


__all__ = ('BaseCommand', 'CommandError')

_T = TypeVar('_T')

# Exit codes.
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class CommandError(Exception):
	"""Reports failure to user: `message` is printed, process exits with
	`exit_code`.
	"""

	def __init__(self, message: str, exit_code: int = EXIT_FAILURE):
		self.message = message
		self.exit_code = exit_code
		super().__init__(message)


class BaseCommand:
	"""Base class for commands.

	Subclasses define `names` (first one is canonical, the rest are aliases),
	`usage`, `help` and implement `run`, which may be a coroutine.
	"""
	names: tuple[str, ...] = ()
	usage = ''
	help = ''

	def __init__(self, application, store: CodeStore, args: Sequence[str]):
		self.application = application
		self.store = store
		self.args = list(args)

	@property
	def name(self) -> str:
		return self.names[0]

	def run(self):
		raise NotImplementedError

	def write(self, chunk: str):
		print(chunk)

	def check_args(self, min_count: int, max_count: Optional[int] = None):
		"""Raise usage error unless number of arguments is in range."""
		count = len(self.args)
		if count < min_count or (max_count is not None and count > max_count):
			raise CommandError(
				f'Usage: {self.application.name} {self.usage}',
				exit_code=EXIT_USAGE
			)

	def validate(self, schema: vlps.Schema, data, custom_message: str = None):
		"""Return `data` as validated (and maybe transformed) by `schema`.

		Raises CommandError with `custom_message` or the schema message.
		"""
		try:
			return schema(data)
		except vlps.Invalid as e:
			message = e.msg if custom_message is None else custom_message
			raise CommandError(message) from e

	def call_store(self, method: Callable[..., _T], *args) -> _T:
		"""Call store `method`, turning its errors into CommandError."""
		try:
			return method(*args)
		except ValidationError as e:
			raise CommandError(e.message) from e
		except StoreError as e:
			raise CommandError(str(e)) from e
