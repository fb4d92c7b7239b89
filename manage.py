#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Main module of the program, executable."""
import sys

from correios.application import main


if __name__ == '__main__':
	sys.exit(main())
