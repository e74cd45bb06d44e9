#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/shared/logger.py

import argparse
import sys

from munsellab.core import config as c

_STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    """Print '[level] message' in the level's colors; errors and warnings go to stderr."""
    level = str(level).lower()
    tag_style, msg_style = c.LOG_STYLES.get(level, (c.RESET, c.RESET))
    stream = sys.stdout if level in _STDOUT_LEVELS else sys.stderr
    stream.write(f"{tag_style}[{level}]{c.RESET} {msg_style}{message}{c.RESET}\n")


class MunsellabArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors go through log() and exit with status 2."""

    def error(self, message):
        log("error", message)
        log("info", f"use '{self.prog} --help' for more information")
        sys.exit(2)
