# -*- coding: utf-8 -*-
"""Renders orders as human-readable lines.
"""
from typing import Iterable, Optional, Sequence

from correios.modules.store.store import CodeRecord
from correios.modules.tracker.carriers.common import Order


NO_ORDERS_MESSAGE = 'No orders found'


def format_order(order: Order, label: Optional[str] = None) -> str:
	line = f'[{order.id}] {order.status} - {order.date}'
	if label:
		line = f'{label} {line}'
	return line


def format_orders(orders: Sequence[Order], records: Iterable[CodeRecord] = ()) -> str:
	"""One line per order, no trailing newline.

	Orders whose id exactly matches a code in `records` are prefixed with the
	record label, if any.
	"""
	if not orders:
		return NO_ORDERS_MESSAGE

	labels = {record.code: record.label for record in records if record.label}

	return '\n'.join(format_order(order, labels.get(order.id)) for order in orders)
