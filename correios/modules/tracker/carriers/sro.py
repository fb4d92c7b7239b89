# -*- coding: utf-8 -*-
"""Handles Correios tracking (SRO, their tracking system).

Correios has no public tracking API for us: the multi-object form of their
site is used instead. It takes any number of codes joined by ';' in a single
POST and answers with an HTML page, so one request is enough no matter how
many codes we ask for, and everything below is plain scraping.

Page layout we rely on (rows are in the same order as carrier prints them):

	<div class="ctrlcontent">
		<table>
			<tr><td>CODE</td><td>STATUS</td><td>DATE</td></tr>
			...
		</table>
	</div>
"""
import asyncio
import logging
from typing import Optional, Sequence
import urllib.parse

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from tornado.httpclient import AsyncHTTPClient, HTTPRequest, HTTPClientError

from correios.environs import env
from correios.modules.tracker.carriers.common import (
	CarrierNetworkError,
	CarrierParseError,
	Order,
)


# Carrier joins codes of one batch by it.
CODES_SEPARATOR = ';'

_CONTENT_SELECTOR = '.ctrlcontent'
# Columns of a status row.
_ROW_CELLS = 3

logger = logging.getLogger(__name__)


def build_request(
	codes: Sequence[str],
	url: Optional[str] = None,
	connect_timeout: Optional[float] = None,
	request_timeout: Optional[float] = None
) -> HTTPRequest:
	"""Build one POST request asking for all `codes` at once.

	`url` - tracking form address, env.CORREIOS_TRACKING_URL by default.
	`connect_timeout`, `request_timeout` - seconds, from env by default.
	"""
	params = {'objetos': CODES_SEPARATOR.join(codes)}
	if len(codes) == 1:
		# Same fields the single object form sends.
		params['P_LINGUA'] = '001'
		params['P_TIPO'] = '001'

	return HTTPRequest(
		url=url or env.CORREIOS_TRACKING_URL,
		method='POST',
		headers={
			'Referer': env.CORREIOS_REFERER,
			'Content-Type': 'application/x-www-form-urlencoded'
		},
		body=urllib.parse.urlencode(params),
		connect_timeout=connect_timeout or env.CORREIOS_CONNECT_TIMEOUT,
		request_timeout=request_timeout or env.CORREIOS_REQUEST_TIMEOUT
	)


async def _make_request(request: HTTPRequest) -> bytes:
	"""Send prepared request, return raw response body.

	CarrierNetworkError will be raised if there is no successful response.
	"""
	http_client = AsyncHTTPClient()
	try:
		response = await http_client.fetch(request)
	except HTTPClientError as e:
		# Includes timeouts (599) and non-2xx responses.
		logger.warning('Correios request failed: %s', e)
		raise CarrierNetworkError(f'Can\'t get info from Correios: {e}') from e
	except OSError as e:
		# Connection refused, unknown host, etc. come as they are.
		logger.warning('Correios is unreachable: %s', e)
		raise CarrierNetworkError(f'Can\'t get info from Correios: {e}') from e
	except ValueError as e:
		# Request itself is broken, e.g. unsupported URL scheme.
		logger.warning('Can\'t send request to Correios: %s', e)
		raise CarrierNetworkError(f'Can\'t send request to Correios: {e}') from e

	logger.debug('Correios answered %s with %d bytes', response.code, len(response.body))
	return response.body


def _cell_text(cell) -> str:
	# Collapse markup whitespace and <br>s into single spaces.
	return ' '.join(cell.get_text(' ').split())


def parse_orders(body: bytes) -> list[Order]:
	"""Extract orders from tracking page, in document order.

	No content region or no rows means carrier found nothing: empty list is
	returned. CarrierParseError will be raised if the page can't be parsed or
	a status row doesn't have all of its columns.
	"""
	try:
		document = BeautifulSoup(body, 'lxml')
	except ParserRejectedMarkup as e:
		raise CarrierParseError('Invalid response from Correios') from e

	content = document.select_one(_CONTENT_SELECTOR)
	if content is None:
		logger.info('No %s region in Correios response', _CONTENT_SELECTOR)
		return []

	# lxml doesn't add implicit <tbody>, so take bare table rows as well.
	rows = content.select('tbody > tr') or content.select('table > tr')

	orders = []
	for row in rows:
		cells = row.find_all('td', recursive=False)
		if not cells:
			# Header row.
			continue
		if len(cells) < _ROW_CELLS:
			raise CarrierParseError(
				f'Invalid response from Correios: status row has {len(cells)} column(s)'
			)

		id_, status, date = (_cell_text(cell) for cell in cells[:_ROW_CELLS])
		orders.append(Order(id=id_, status=status, date=date))

	return orders


async def get_orders(
	codes: Sequence[str],
	url: Optional[str] = None,
	request_timeout: Optional[float] = None
) -> list[Order]:
	"""Get current orders of all `codes` with a single request.

	Codes unknown to carrier simply produce no orders.
	CarrierNetworkError or CarrierParseError will be raised on failure.
	"""
	if not codes:
		raise ValueError('At least one tracking code is required')

	request = build_request(codes, url=url, request_timeout=request_timeout)
	logger.info('Checking %d tracking code(s) at %s', len(codes), request.url)
	body = await _make_request(request)

	return parse_orders(body)


async def main():
	"""For local manual testing."""
	orders = await get_orders(['AA123456789BR'])
	print(orders)


if __name__ == '__main__':
	asyncio.run(main())
