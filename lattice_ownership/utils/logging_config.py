# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Logging configuration."""

import logging
import sys

# Third-party loggers that are noisy below WARNING
_QUIET_LOGGERS = ("botocore", "boto3", "urllib3")


def configure_logging(log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # AWS calls are already logged by the client event hooks
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
