"""Unit tests for order formatting."""
from correios.modules.store.store import CodeRecord
from correios.modules.tracker.carriers.common import Order
from correios.modules.tracker.formatter import NO_ORDERS_MESSAGE, format_orders

ORDER = Order(id='AA123456789BR', status='Delivered', date='2020-01-01')


def test_no_orders() -> None:
	assert format_orders([]) == 'No orders found'
	assert NO_ORDERS_MESSAGE == 'No orders found'


def test_single_order() -> None:
	assert format_orders([ORDER]) == '[AA123456789BR] Delivered - 2020-01-01'


def test_orders_joined_without_trailing_newline() -> None:
	other = Order(id='BB987654321BR', status='Posted', date='2019-12-28')

	assert format_orders([ORDER, other]) == (
		'[AA123456789BR] Delivered - 2020-01-01\n'
		'[BB987654321BR] Posted - 2019-12-28'
	)


def test_label_prefixes_matching_order() -> None:
	records = [CodeRecord('AA123456789BR', 'new phone'), CodeRecord('BB987654321BR')]
	other = Order(id='BB987654321BR', status='Posted', date='2019-12-28')

	assert format_orders([ORDER, other], records) == (
		'new phone [AA123456789BR] Delivered - 2020-01-01\n'
		'[BB987654321BR] Posted - 2019-12-28'
	)


def test_label_lookup_is_exact() -> None:
	records = [CodeRecord('AA123456789B', 'almost')]

	assert format_orders([ORDER], records) == '[AA123456789BR] Delivered - 2020-01-01'
