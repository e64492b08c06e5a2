"""Subnet creation requests builder script."""

import sys
from pathlib import Path

from pydantic import ValidationError

from subnet_options.config import Settings, get_settings
from subnet_options.exceptions import AbortProcedureError
from subnet_options.loaders.yaml_files import load_requests_from_yaml_files
from subnet_options.logger import create_logger
from subnet_options.parser import parser


def main(log_level: str, conf_dir: Path | None = None) -> None:
    """Main function.

    Read the YAML files in the configuration directory and build a subnet creation
    request for each described subnet. Default metadata and data center from the
    settings are applied. Print each request as a JSON document on stdout.

    Invalid files or subnets do not interrupt the script but the exit code is 1.
    Invalid settings stop the script with exit code 1.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        logger = create_logger(
            Settings.model_fields["APP_NAME"].default, level=log_level
        )
        logger.error("Invalid settings: %s", e)
        sys.exit(1)
    logger = create_logger(settings.APP_NAME, level=log_level)
    if conf_dir is None:
        conf_dir = settings.SUBNETS_CONF_DIR

    try:
        requests, error = load_requests_from_yaml_files(
            conf_dir, settings=settings, logger=logger
        )
    except AbortProcedureError:
        sys.exit(1)

    for request in requests:
        print(request.model_dump_json())
    logger.info("Built %d subnet creation requests", len(requests))

    if error:
        logger.error("Found at least one error.")
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    args = parser.parse_args()
    main(args.loglevel.upper(), conf_dir=args.conf_dir)


if __name__ == "__main__":
    run()
