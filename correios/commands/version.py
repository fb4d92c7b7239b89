# -*- coding: utf-8 -*-
"""Module with command that shows current application version.
"""
from correios.base_command import BaseCommand


class VersionCommand(BaseCommand):
	names = ('version',)
	usage = 'version'
	help = 'Show version'

	def run(self):
		"""Print current application version."""
		self.write(self.application.version)
