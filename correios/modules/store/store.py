# -*- coding: utf-8 -*-
"""File storage for tracking codes.

One record per line: the code alone, or the code followed by a space and
its label:

	AA123456789BR
	BB987654321BR new phone

Lines keep insertion order. Every operation opens the file, does its work
and closes it, so there is no handle living between operations, and a store
object is cheap to build once per invocation.
"""
from contextlib import suppress
import dataclasses
import enum
import logging
import os
import shutil
import tempfile
from typing import Iterable, List, Optional, Union

from correios.validation.tracker import validate_code, validate_label


__all__ = ('AddResult', 'CodeRecord', 'CodeStore', 'RemoveResult', 'StoreError')

logger = logging.getLogger(__name__)


class StoreError(Exception):
	"""Storage file can't be read or written."""
	pass


class AddResult(enum.Enum):
	ADDED = 'added'
	ALREADY_EXISTS = 'already exists'


class RemoveResult(enum.Enum):
	REMOVED = 'removed'
	NOT_FOUND = 'not found'


@dataclasses.dataclass(frozen=True)
class CodeRecord:
	code: str
	label: Optional[str] = None

	def to_line(self) -> str:
		if not self.label:
			return self.code
		return f'{self.code} {self.label}'

	@classmethod
	def from_line(cls, line: str) -> 'CodeRecord':
		code, _, label = line.partition(' ')
		return cls(code=code, label=label or None)


class CodeStore:
	"""Ordered collection of CodeRecords persisted in a single file.

	Missing file is an empty store, it will be created on first write.
	Codes are unique: adding a code twice doesn't change anything.
	"""

	def __init__(self, path: Union[str, os.PathLike]):
		self.path = os.path.abspath(os.path.expanduser(os.fspath(path)))

	def __repr__(self):
		return f'{self.__class__.__name__}({self.path!r})'

	def list(self) -> list[CodeRecord]:
		"""All records in insertion order."""
		return [CodeRecord.from_line(line) for line in self._read_lines()]

	def exists(self, code: str) -> bool:
		"""Whether a record with exactly this code is stored."""
		return any(record.code == code for record in self.list())

	def add(self, code: str, label: Optional[str] = None) -> AddResult:
		"""Append new record unless its code is already stored.

		InvalidCodeError or InvalidLabelError will be raised for bad input,
		before storage is touched.
		"""
		record = CodeRecord(code=validate_code(code), label=validate_label(label))

		if self.exists(record.code):
			return AddResult.ALREADY_EXISTS

		self._append(record)
		logger.info('Tracking code %s added to %s', record.code, self.path)
		return AddResult.ADDED

	def remove(self, identifier: str) -> RemoveResult:
		"""Remove record by its exact code or, if no code matches, every
		record with exactly this label.

		Storage is rewritten only if something was removed.
		"""
		records = self.list()

		remaining = [record for record in records if record.code != identifier]
		if len(remaining) == len(records):
			remaining = [record for record in records if record.label != identifier]
		if len(remaining) == len(records):
			return RemoveResult.NOT_FOUND

		self._rewrite(remaining)
		logger.info(
			'%d record(s) matching %r removed from %s',
			len(records) - len(remaining),
			identifier,
			self.path
		)
		return RemoveResult.REMOVED

	# `list` is taken by the method above.
	def _read_lines(self) -> List[str]:
		try:
			with open(self.path, encoding='utf-8') as file:
				return [line.rstrip('\n') for line in file if line.strip()]
		except FileNotFoundError:
			return []
		except (OSError, UnicodeDecodeError) as e:
			raise StoreError(f'Can\'t read {self.path}: {e}') from e

	def _prepare_directory(self):
		directory = os.path.dirname(self.path)
		try:
			os.makedirs(directory, exist_ok=True)
		except OSError as e:
			raise StoreError(f'Can\'t create {directory}: {e}') from e

	def _ends_with_newline(self) -> bool:
		# File could be edited by hand and lack the final newline.
		with open(self.path, 'rb') as file:
			if file.seek(0, os.SEEK_END) == 0:
				return True
			file.seek(-1, os.SEEK_END)
			return file.read(1) == b'\n'

	def _append(self, record: CodeRecord):
		self._prepare_directory()
		created = not os.path.exists(self.path)
		try:
			prefix = '' if created or self._ends_with_newline() else '\n'
			with open(self.path, 'a', encoding='utf-8') as file:
				file.write(f'{prefix}{record.to_line()}\n')
		except OSError as e:
			raise StoreError(f'Can\'t write {self.path}: {e}') from e

		if created:
			logger.info('Storage %s created', self.path)

	def _rewrite(self, records: Iterable[CodeRecord]):
		"""Replace storage contents with `records`.

		Written to a temporary file next to storage first, then renamed over
		it, so an interrupted rewrite leaves the old file intact.
		"""
		self._prepare_directory()
		try:
			fd, temp_path = tempfile.mkstemp(
				prefix='.correios-',
				suffix='.tmp',
				dir=os.path.dirname(self.path)
			)
		except OSError as e:
			raise StoreError(f'Can\'t write {self.path}: {e}') from e

		try:
			with os.fdopen(fd, 'w', encoding='utf-8') as file:
				file.writelines(f'{record.to_line()}\n' for record in records)
				file.flush()
				os.fsync(file.fileno())
			with suppress(OSError):
				shutil.copymode(self.path, temp_path)
			os.replace(temp_path, self.path)
		except OSError as e:
			with suppress(OSError):
				os.unlink(temp_path)
			raise StoreError(f'Can\'t write {self.path}: {e}') from e
