# utils.py
"""
Utility functions for the force simulation.

This module provides helpers, such as logging setup and configuration
loading, that are used across the application but do not belong to the
force model or the viewer.
"""
import logging
import logging.handlers
import json
import os
from typing import Dict, Any

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary containing a "logging" key with "level",
#       "format", and "log_file" sub-keys. "log_file" may be null to log to
#       the console only.
#   - Side Effects: Configures the root Python logger with a console handler
#     and, if a log file is given, a rotating file handler.
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: The parsed config with every top-level section present.
#   - Raises: FileNotFoundError, json.JSONDecodeError, or ValueError if the
#     "scene" section is missing.

# Sections every config ends up with, even if the file omits them.
DEFAULT_SECTIONS = ("logging", "run_control", "simulation_parameters", "visualization")


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the logging system from a configuration dictionary.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', '%(asctime)s - %(levelname)s - %(message)s')
    log_file_path = log_config.get('log_file', 'logs/forces.log')

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        # Rotates when the log reaches 1MB, keeps 5 backup logs.
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=1024*1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path}")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file and fills in missing sections."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise

    if 'scene' not in config:
        msg = f"Configuration error: {path} has no 'scene' section."
        logging.error(msg)
        raise ValueError(msg)
    for section in DEFAULT_SECTIONS:
        config.setdefault(section, {})

    logging.info("Configuration loaded successfully.")
    return config
