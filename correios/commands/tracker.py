# -*- coding: utf-8 -*-
"""Module with command that checks order status at carrier.
"""
import logging

from correios.base_command import BaseCommand, CommandError
from correios.modules.tracker.carriers.common import CarrierTrackingError
from correios.modules.tracker.formatter import format_orders
import correios.modules.tracker.tracker as tracker
from correios.validation.tracker import TRACKING_CODE_SCHEMA, is_valid_code

logger = logging.getLogger(__name__)


class CheckCommand(BaseCommand):
	names = ('check', 'c')
	usage = 'check [codes...]'
	help = 'Check the status of one or more orders or the ones that you previously added'

	async def run(self):
		"""Check given codes, or every stored one if none given."""
		records = self.call_store(self.store.list)

		if self.args:
			codes = [self.validate(TRACKING_CODE_SCHEMA, code) for code in self.args]
		else:
			codes = []
			for record in records:
				# Storage file could be edited by hand.
				if not is_valid_code(record.code):
					logger.warning('Skipping invalid stored code %r', record.code)
					continue
				codes.append(record.code)

		if not codes:
			raise CommandError('No tracking codes to check: add some or pass them as arguments')

		try:
			orders = await tracker.get_orders(codes)
		except CarrierTrackingError as e:
			# Blame it on carrier.
			raise CommandError(str(e)) from e

		self.write(format_orders(orders, records))
