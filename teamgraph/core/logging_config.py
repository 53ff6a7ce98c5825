"""Centralized Logging Configuration

This module provides:
- Centralized logging configuration for all components
- File and console logging with proper formatting
- Logger factory with consistent naming convention
- Helpers for logging operation start/end with timing
"""

import logging
import logging.config
from typing import Dict, Any, Optional, Union
from pathlib import Path
import os


LOGGER_NAMESPACE = "teamgraph"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
    file_output: bool = False
) -> None:
    """Setup centralized logging configuration for the entire system

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path (defaults to logs/teamgraph.log)
        console_output: Whether to output logs to the console (stderr)
        file_output: Whether to output logs to file
    """
    log_level = log_level.upper()

    if file_output:
        if log_file is None:
            log_file = Path("logs") / "teamgraph.log"
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(funcName)s() - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "simple": {
                "format": "[%(levelname)s] %(name)s: %(message)s"
            }
        },
        "handlers": {},
        "loggers": {
            LOGGER_NAMESPACE: {
                "level": log_level,
                "handlers": [],
                "propagate": False
            }
        }
    }

    # stdout carries analysis results, so console logs go to stderr
    if console_output:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": "simple",
            "stream": "ext://sys.stderr"
        }
        config["loggers"][LOGGER_NAMESPACE]["handlers"].append("console")

    if file_output and log_file:
        config["handlers"]["file"] = {
            "class": "logging.FileHandler",
            "level": log_level,
            "formatter": "detailed",
            "filename": str(log_file),
            "mode": "a",
            "encoding": "utf-8"
        }
        config["loggers"][LOGGER_NAMESPACE]["handlers"].append("file")

    if not config["handlers"]:
        config["handlers"]["null"] = {"class": "logging.NullHandler"}
        config["loggers"][LOGGER_NAMESPACE]["handlers"].append("null")

    logging.config.dictConfig(config)

    logger = get_logger("core.logging")
    logger.debug("Logging system initialized - Level: %s, Console: %s, File: %s",
                 log_level, console_output, log_file if file_output else "None")


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the teamgraph namespace

    Args:
        name: Logger name (will be prefixed with 'teamgraph.')

    Returns:
        Configured logger instance

    Example:
        logger = get_logger("tools.roster_analysis")
        # Creates logger named "teamgraph.tools.roster_analysis"
    """
    if name == LOGGER_NAMESPACE or name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def auto_setup_logging(log_level: Optional[str] = None):
    """Setup logging from TEAMGRAPH_LOG_* environment variables

    An explicit log_level takes precedence over TEAMGRAPH_LOG_LEVEL.
    """
    log_level = (log_level or os.getenv("TEAMGRAPH_LOG_LEVEL", "WARNING")).upper()
    log_file = os.getenv("TEAMGRAPH_LOG_FILE")
    console_output = os.getenv("TEAMGRAPH_LOG_CONSOLE", "true").lower() == "true"
    file_output = os.getenv("TEAMGRAPH_LOG_FILE_ENABLED", "false").lower() == "true"

    setup_logging(
        log_level=log_level,
        log_file=log_file,
        console_output=console_output,
        file_output=file_output
    )


def log_operation_start(logger: logging.Logger, operation: str, **kwargs):
    """Log the start of an operation with context"""
    context = " ".join(f"{k}={v}" for k, v in kwargs.items())
    logger.info("Starting %s%s", operation, f" ({context})" if context else "")


def log_operation_end(logger: logging.Logger, operation: str, duration: float, success: bool = True, **kwargs):
    """Log the completion of an operation with timing"""
    status = "completed" if success else "failed"
    context = " ".join(f"{k}={v}" for k, v in kwargs.items())
    logger.info("%s %s in %.3fs%s", operation.capitalize(), status, duration,
                f" ({context})" if context else "")
