# -*- coding: utf-8 -*-
"""Module with commands managing stored tracking codes.
"""
import os.path

from correios.base_command import BaseCommand, CommandError
from correios.modules.store.store import AddResult, RemoveResult


class ListCommand(BaseCommand):
	names = ('list', 'l', 'ls')
	usage = 'list'
	help = 'List the codes stored'

	def run(self):
		self.check_args(0, 0)

		for record in self.call_store(self.store.list):
			self.write(record.to_line())


class AddCommand(BaseCommand):
	names = ('add', 'a')
	usage = 'add <code> [label]'
	help = 'Store an order code to check later without specifying it'

	def run(self):
		"""Everything after the code is its label."""
		self.check_args(1)
		code, *label_words = self.args
		label = ' '.join(label_words) or None

		creating = not os.path.exists(self.store.path)
		result = self.call_store(self.store.add, code, label)
		if result is AddResult.ALREADY_EXISTS:
			raise CommandError('Tracking code already added')
		if creating:
			self.write(f' + {self.store.path} created.')


class RemoveCommand(BaseCommand):
	names = ('remove', 'rm', 'r')
	usage = 'remove <code or label>'
	help = 'Remove an order code from the storage file'

	def run(self):
		self.check_args(1, 1)

		result = self.call_store(self.store.remove, self.args[0])
		if result is RemoveResult.NOT_FOUND:
			raise CommandError('Tracking code not found')
