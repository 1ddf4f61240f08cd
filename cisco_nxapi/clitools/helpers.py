# -*- coding: utf-8 -*-
"""
cisco-nxapi CLI Tools: helpers
==============================

Defines helpers for the CLI tools.
"""
# stdlib
import ast
import sys
import logging
from typing import Any, Dict, Optional


def configure_logging(logger: logging.Logger, debug: bool) -> logging.Logger:
    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    ch = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    return logger


def parse_optional_args(optional_args: Optional[str]) -> Dict[str, Any]:
    """
    Turn ``"port=8443,verify=False"`` into keyword arguments.

    Values are Python literals; anything else is kept as a plain string.
    """
    if not optional_args:
        return {}

    parsed = {}
    for pair in optional_args.split(","):
        key, _, value = pair.partition("=")
        try:
            parsed[key.strip()] = ast.literal_eval(value.strip())
        except (ValueError, SyntaxError):
            parsed[key.strip()] = value.strip()
    return parsed
