# -*- coding: utf-8 -*-
"""'Externally' adjustable config vars.
"""
from os import environ, path

import voluptuous as vlps


_DEFAULT_FILESTORAGE = path.join(path.expanduser('~'), '.correios')

_DEFAULT_TRACKING_URL = 'http://www2.correios.com.br/sistemas/rastreamento/multResultado.cfm'

# Carrier may reject the form without it.
_DEFAULT_REFERER = 'http://www.correios.com.br/para-voce'

_POSITIVE_SECONDS = vlps.All(vlps.Coerce(float), vlps.Range(min=0, min_included=False))

# Describe only vars we are using, everything else in environment is dropped.
_ENV_SCHEMA = vlps.Schema(
	{
		vlps.Optional('CORREIOS_FILESTORAGE', default=_DEFAULT_FILESTORAGE): vlps.All(str, vlps.Length(min=1)),
		vlps.Optional('CORREIOS_TRACKING_URL', default=_DEFAULT_TRACKING_URL): vlps.All(str, vlps.Length(min=1)),
		vlps.Optional('CORREIOS_REFERER', default=_DEFAULT_REFERER): str,
		vlps.Optional('CORREIOS_CONNECT_TIMEOUT', default='10'): _POSITIVE_SECONDS,
		vlps.Optional('CORREIOS_REQUEST_TIMEOUT', default='30'): _POSITIVE_SECONDS,
	},
	extra=vlps.REMOVE_EXTRA
)

_env = _ENV_SCHEMA(dict(environ))

# File used as storage for tracking codes.
CORREIOS_FILESTORAGE = path.expanduser(_env['CORREIOS_FILESTORAGE'])

# Multi-object tracking form, accepts several codes at once.
CORREIOS_TRACKING_URL = _env['CORREIOS_TRACKING_URL']
CORREIOS_REFERER = _env['CORREIOS_REFERER']

# There is no retry, so a hung carrier should not hang us forever.
CORREIOS_CONNECT_TIMEOUT = _env['CORREIOS_CONNECT_TIMEOUT']
CORREIOS_REQUEST_TIMEOUT = _env['CORREIOS_REQUEST_TIMEOUT']
