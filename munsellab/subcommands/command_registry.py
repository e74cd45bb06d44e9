#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/subcommands/command_registry.py

from . import hues

SUBCOMMANDS = {
    'hues': hues,
}
