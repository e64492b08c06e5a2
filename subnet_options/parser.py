"""Command line arguments parser."""

import argparse
import logging
from pathlib import Path

log_values = [i.lower() for i in logging._nameToLevel.keys()]

parser = argparse.ArgumentParser(
    description="Build subnet creation requests from YAML files and print them as "
    "JSON documents, one per line."
)
parser.add_argument(
    "-l",
    "--loglevel",
    default="warning",
    choices=log_values,
    help=f"Provide logging level. Valid values: {log_values}. \
        Example --loglevel debug, default=warning",
)
parser.add_argument(
    "-d",
    "--conf-dir",
    default=None,
    type=Path,
    help="Directory with the YAML files describing the subnets. \
        Overrides the SUBNETS_CONF_DIR setting.",
)
