"""Functions to read YAML files with the subnets to create."""

import os
from logging import Logger
from pathlib import Path

import yaml.parser
from pydantic import ValidationError

from subnet_options.config import Settings
from subnet_options.exceptions import (
    AbortProcedureError,
    InvalidYamlError,
    PreconditionViolationError,
)
from subnet_options.models.subnets import SubnetCreationRequest
from subnet_options.models.yml import YamlConfig


def load_files(path: Path, *, logger: Logger) -> list[str]:
    """Get the list of the yaml files with the subnets descriptions.

    Args:
        path (Path): path to the directory with the yaml files.
        logger (Logger): Logger instance.

    Returns:
        list of str: List of yaml files.

    Raises:
        AbortProcedureError if the directory is not a valid path.

    """
    msg = f"Detecting yaml files with subnet descriptions in folder: {path}"
    logger.info(msg)

    try:
        yaml_files = filter(lambda x: x.endswith((".yaml", ".yml")), os.listdir(path))
    except (FileNotFoundError, NotADirectoryError) as e:
        msg = f"No directory named: {path}"
        logger.error(msg)
        raise AbortProcedureError(msg) from e

    yaml_files = sorted(os.path.join(path, i) for i in yaml_files)
    logger.info("Files retrieved")
    logger.debug(yaml_files)
    return yaml_files


def read_config(fname: str, *, logger: Logger) -> YamlConfig:
    """Load the subnets descriptions from a yaml file.

    Args:
        fname (str): path to the yaml file.
        logger (Logger): Logger instance.

    Returns:
        YamlConfig: validated file content.

    Raises:
        InvalidYamlError when the YAML file does not exist, is empty or is not
        parsable.

    """
    msg = f"Loading subnet descriptions from file: {fname}"
    logger.info(msg)

    try:
        with open(fname) as f:
            config = yaml.safe_load(f)
    except FileNotFoundError as e:
        msg = f"Error reading file {fname}"
        logger.error(msg)
        raise InvalidYamlError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Error parsing file {fname}"
        logger.error(msg)
        raise InvalidYamlError(msg) from e

    if not config:  # empty string/file
        msg = f"Empty file {fname}. Ignoring"
        logger.warning(msg)
        raise InvalidYamlError(msg)

    try:
        return YamlConfig(**config)
    except (ValidationError, TypeError) as e:
        msg = f"Invalid YAML file {fname}: {e!r}"
        logger.error(msg)
        raise InvalidYamlError(msg) from e


def build_requests(
    config: YamlConfig, *, settings: Settings, logger: Logger
) -> tuple[list[SubnetCreationRequest], bool]:
    """Convert the subnets of a YAML configuration into creation requests.

    Args:
        config (YamlConfig): validated file content.
        settings (Settings): application settings.
        logger (Logger): Logger instance.

    Returns:
        (list of SubnetCreationRequest, bool): the requests and a flag set when at
            least one subnet has been discarded.

    """
    error = False
    requests = []
    for subnet in config.subnets:
        try:
            request = subnet.to_request(
                default_data_center=settings.DEFAULT_DATA_CENTER,
                default_metadata=settings.DEFAULT_METADATA,
            )
        except PreconditionViolationError as e:
            logger.error("Discarding subnet %s: %s", subnet.name, e.message)
            error = True
            continue
        logger.debug("Subnet creation request=%r", request)
        requests.append(request)
    return requests, error


def load_requests_from_yaml_files(
    path: Path, *, settings: Settings, logger: Logger
) -> tuple[list[SubnetCreationRequest], bool]:
    """Retrieve the list of subnet creation requests from YAML files.

    Read the folder content and parse the yaml files content. Invalid files and
    invalid subnets are skipped.

    Args:
        path (Path): path to the directory with the yaml files.
        settings (Settings): Application settings.
        logger (Logger): Logger instance.

    Returns:
        (list of SubnetCreationRequest, bool): the requests and a flag set when at
            least one file or subnet has been discarded.

    Raises:
        AbortProcedureError if the directory is not a valid path (forwarded from
        'load_files' function).

    """
    error = False
    yaml_configs: list[YamlConfig] = []
    for fname in load_files(path, logger=logger):
        try:
            yaml_configs.append(read_config(fname, logger=logger))
        except InvalidYamlError:
            error = True
    if error:
        logger.error("Not all YAML files have been loaded.")

    requests = []
    for config in yaml_configs:
        items, failed = build_requests(config, settings=settings, logger=logger)
        requests += items
        error = error or failed

    return requests, error
