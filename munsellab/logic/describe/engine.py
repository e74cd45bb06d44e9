#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/logic/describe/engine.py

import argparse
import json

from munsellab.core.pipeline import convert
from .renderer import render_description


def run(args: argparse.Namespace) -> None:
    """Describe the color given by -H or -c, as a terminal view or JSON."""
    rgb = args.hex if args.hex is not None else args.rgb
    description = convert(*rgb)

    if args.json:
        print(json.dumps(description.to_dict(), indent=2))
        return

    render_description(description, show_scales=not args.hide_scales)
