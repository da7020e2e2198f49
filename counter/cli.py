# counter/cli.py
"""
Small CLI helper: parse args and load config.
"""
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from typing import List, Optional
import os

from dotenv import load_dotenv

from config.config import config, refresh_config


def existing_file(p: str) -> str:
    if not os.path.exists(p):
        raise ArgumentTypeError(f"Config file not found: {p}")
    return p


def build_parser() -> ArgumentParser:
    p = ArgumentParser(prog="record-counter", description="Interactive record counter console")
    p.add_argument(
        "--config",
        "-c",
        type=existing_file,
        default=None,
        help="Path to .env file (optional). Its variables are loaded before anything else",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Console logging level (DEBUG, INFO, WARNING, ERROR); defaults to LOG_LEVEL",
    )
    p.add_argument(
        "--no-log-file",
        action="store_true",
        help="Don't write the rotating log file",
    )
    return p


def parse_args(args: Optional[List[str]] = None) -> Namespace:
    parser = build_parser()
    ns = parser.parse_args(args=args)
    # load .env if provided; existing environment wins
    if ns.config:
        load_dotenv(ns.config, override=False)
        refresh_config()
    if ns.log_level:
        config.LOG_LEVEL = ns.log_level
    if ns.no_log_file:
        config.LOG_TO_FILE = False
    return ns
