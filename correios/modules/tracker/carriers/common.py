# -*- coding: utf-8 -*-
"""Things shared by all carriers: errors and tracking events.
"""
import dataclasses


class CarrierTrackingError(Exception):
	"""Base class for all carrier tracking errors."""
	pass


class CarrierNetworkError(CarrierTrackingError):
	"""Request never got a usable response: transport error, timeout,
	non-2xx status or request that couldn't be sent at all.
	"""
	pass


class CarrierParseError(CarrierTrackingError):
	"""Response came, but it doesn't look like we expect.

	Carrier markup is out of our control and can change any time, so this is
	a regular error for the caller to report, not a reason to crash.
	"""
	pass


@dataclasses.dataclass(frozen=True)
class Order:
	"""One status event reported by carrier.

	`id` is the code as carrier shows it, several orders may share it.
	"""
	id: str
	status: str
	date: str
