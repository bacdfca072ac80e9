# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Errors raised by the AWS tag gateways."""

from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

NOT_FOUND_ERROR_CODES = frozenset([
    "ResourceNotFoundException",
    "NotFoundException",
])


class TransportError(Exception):
    """Raised when an AWS call fails (network, auth, throttling, service)."""

    def __init__(self, message: str, operation: str = "", error_code: str = ""):
        super().__init__(message)
        self.operation = operation
        self.error_code = error_code


class NotFoundError(Exception):
    """Raised when the referenced resource does not exist."""

    def __init__(self, message: str, arn: str = "", operation: str = ""):
        super().__init__(message)
        self.arn = arn
        self.operation = operation


def translate_error(
    operation: str,
    error: Exception,
    arn: Optional[str] = None,
) -> Exception:
    """
    Map a botocore exception to TransportError or NotFoundError.

    Args:
        operation: AWS operation name, used in the message
        error: Exception raised by boto3
        arn: Resource ARN the call was about, if any

    Returns:
        The exception to raise (the caller chains it with `from`)
    """
    if isinstance(error, ClientError):
        error_code = error.response.get("Error", {}).get("Code", "")
        if error_code in NOT_FOUND_ERROR_CODES:
            return NotFoundError(
                f"Resource not found: {arn or 'unknown'} ({operation})",
                arn=arn or "",
                operation=operation,
            )
        return TransportError(
            f"AWS API error: {error_code} - {str(error)}",
            operation=operation,
            error_code=error_code,
        )

    if isinstance(error, BotoCoreError):
        return TransportError(f"Boto3 error: {str(error)}", operation=operation)

    return TransportError(f"{operation} failed: {str(error)}", operation=operation)
