# -*- coding: utf-8 -*-
"""Command line application: global options, command table and dispatching.
"""
import asyncio
import inspect
import logging
import os.path
import sys
from typing import Optional, Sequence

from tornado.log import define_logging_options
from tornado.options import Error as OptionsError, OptionParser
import voluptuous as vlps

from correios import commands
from correios.base_command import EXIT_OK, EXIT_USAGE, BaseCommand, CommandError
from correios.environs import env
from correios.modules.store.store import CodeStore

logger = logging.getLogger(__name__)

# Values tornado accepts for --logging, it crashes on anything else.
_LOGGING_LEVEL_SCHEMA = vlps.Schema(vlps.All(
	str,
	vlps.Lower,
	vlps.In(('none', 'debug', 'info', 'warning', 'error', 'critical')),
	msg='Unknown logging level'
))

COMMANDS = (
	commands.tracker.CheckCommand,
	commands.store.ListCommand,
	commands.store.AddCommand,
	commands.store.RemoveCommand,
	commands.version.VersionCommand,
)


def _read_version() -> str:
	with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'VERSION')) as file:
		return file.read().strip()


class Application:
	"""Main application class.

	Options are parsed by its own OptionParser, so several applications
	(in tests, for example) don't share option values.
	"""
	name = 'correios'
	description = 'Simple command line tool to track your orders from Correios'

	def __init__(self, command_classes: Sequence[type[BaseCommand]] = COMMANDS):
		self.version = _read_version()
		self.command_classes = tuple(command_classes)
		self.commands = {
			name: command_class
			for command_class in self.command_classes
			for name in command_class.names
		}
		self.options = self._make_options()

	def _make_options(self) -> OptionParser:
		options = OptionParser()
		options.define(
			'filestorage',
			default=env.CORREIOS_FILESTORAGE,
			type=str,
			metavar='PATH',
			help='File used as storage (CORREIOS_FILESTORAGE)'
		)
		# --logging, --log-file-prefix, etc.
		define_logging_options(options)
		# Only problems by default: stdout is for results.
		options.logging = 'warning'
		return options

	def print_usage(self):
		print(self.description)
		print(f'Usage: {self.name} [OPTIONS] COMMAND [ARGS...]')
		print()
		print('Commands:')
		for command_class in self.command_classes:
			print(f'  {", ".join(command_class.names):<16}{command_class.help}')
		print()
		print(f'Run "{self.name} --help" for options.')

	async def run(self, argv: Sequence[str]) -> int:
		"""Parse `argv` (without program name), run the command, return exit code."""
		try:
			args = self.options.parse_command_line([self.name, *argv], final=False)
			self.options.logging = _LOGGING_LEVEL_SCHEMA(self.options.logging)
		except OptionsError as e:
			print(e)
			return EXIT_USAGE
		except vlps.Invalid as e:
			print(f'{e.msg}: {self.options.logging}')
			return EXIT_USAGE
		# Sets up logging.
		self.options.run_parse_callbacks()

		if not args:
			self.print_usage()
			return EXIT_USAGE

		name, *command_args = args
		command_class = self.commands.get(name)
		if command_class is None:
			print(f'Unknown command: {name}')
			self.print_usage()
			return EXIT_USAGE

		# One store per invocation, handed to the command.
		store = CodeStore(self.options.filestorage)
		command = command_class(self, store, command_args)
		logger.debug('Running %s with %s', command.name, store)

		try:
			result = command.run()
			if inspect.isawaitable(result):
				await result
		except CommandError as e:
			print(e.message)
			return e.exit_code

		return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
	"""Entry point of the program, returns process exit code."""
	if argv is None:
		argv = sys.argv[1:]

	return asyncio.run(Application().run(argv))
