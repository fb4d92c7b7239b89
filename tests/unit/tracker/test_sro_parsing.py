"""Unit tests for Correios request building and page parsing."""
import urllib.parse

import pytest

from correios.environs import env
from correios.modules.tracker.carriers import sro
from correios.modules.tracker.carriers.common import CarrierParseError, Order
from tests.fixture_paths import read_fixture


def _form(request) -> dict:
	return urllib.parse.parse_qs(request.body.decode())


def test_build_request_batches_codes() -> None:
	"""All codes go in one `objetos` field joined by ';'."""
	request = sro.build_request(['AA123456789BR', 'BB987654321BR'])

	assert request.method == 'POST'
	assert request.url == env.CORREIOS_TRACKING_URL
	assert _form(request) == {'objetos': ['AA123456789BR;BB987654321BR']}


def test_build_request_single_code_sends_language_and_type() -> None:
	request = sro.build_request(['AA123456789BR'])

	assert _form(request) == {
		'objetos': ['AA123456789BR'],
		'P_LINGUA': ['001'],
		'P_TIPO': ['001'],
	}


def test_build_request_headers_and_timeouts() -> None:
	request = sro.build_request(['AA123456789BR'], url='http://localhost/form', request_timeout=2)

	assert request.url == 'http://localhost/form'
	assert request.headers['Referer'] == env.CORREIOS_REFERER
	assert request.headers['Content-Type'] == 'application/x-www-form-urlencoded'
	assert request.connect_timeout == env.CORREIOS_CONNECT_TIMEOUT
	assert request.request_timeout == 2


def test_parse_orders_in_document_order() -> None:
	"""Rows come as carrier prints them: no sorting, no dedupe."""
	orders = sro.parse_orders(read_fixture('mult_resultado.html'))

	assert orders == [
		Order('AA123456789BR', 'Objeto entregue ao destinatário', '01/01/2020 10:15 CURITIBA/PR'),
		Order('BB987654321BR', 'Objeto postado', '28/12/2019 16:40'),
		Order('AA123456789BR', 'Objeto saiu para entrega ao destinatário', '01/01/2020 08:02'),
	]


def test_parse_orders_without_rows_is_empty() -> None:
	assert sro.parse_orders(read_fixture('no_results.html')) == []


def test_parse_orders_without_content_region_is_empty() -> None:
	body = b'<html><body><table><tr><td>a</td><td>b</td><td>c</td></tr></table></body></html>'

	assert sro.parse_orders(body) == []


def test_parse_orders_of_empty_body_is_empty() -> None:
	assert sro.parse_orders(b'') == []


def test_parse_orders_row_missing_columns_is_parse_error() -> None:
	with pytest.raises(CarrierParseError):
		sro.parse_orders(read_fixture('broken_row.html'))


def test_parse_orders_ignores_extra_columns() -> None:
	body = (
		b'<div class="ctrlcontent"><table><tbody>'
		b'<tr><td>AA123456789BR</td><td>Objeto postado</td><td>28/12/2019</td><td>extra</td></tr>'
		b'</tbody></table></div>'
	)

	assert sro.parse_orders(body) == [Order('AA123456789BR', 'Objeto postado', '28/12/2019')]


def test_parse_orders_latin1_page() -> None:
	"""Carrier pages used to be served as ISO-8859-1."""
	body = (
		'<html><head><meta http-equiv="Content-Type" content="text/html; charset=iso-8859-1"></head>'
		'<body><div class="ctrlcontent"><table><tr>'
		'<td>AA123456789BR</td><td>Objeto em trânsito</td><td>02/01/2020</td>'
		'</tr></table></div></body></html>'
	).encode('iso-8859-1')

	assert sro.parse_orders(body) == [Order('AA123456789BR', 'Objeto em trânsito', '02/01/2020')]
