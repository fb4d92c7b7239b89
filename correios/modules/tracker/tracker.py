# -*- coding: utf-8 -*-
"""Low-level module for tracking info.
"""
from typing import Sequence

from correios.modules.tracker.carriers import sro
from correios.modules.tracker.carriers.common import Order

# Every code Correios hands out has exactly this length, e.g. AA123456789BR.
# For input validation:
TRACKING_CODE_LENGTH = 13


async def get_orders(codes: Sequence[str]) -> list[Order]:
	"""Get orders for all tracking codes with one request. Currently: from Correios."""
	return await sro.get_orders(codes)
