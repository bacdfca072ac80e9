# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Shared plumbing for boto3-backed tag gateways."""

import asyncio
import logging
from typing import Any, Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .errors import translate_error

logger = logging.getLogger(__name__)


class AWSClient:
    """
    Base class for gateways that wrap a boto3 client.

    Boto3 calls block, so they run in the default thread pool. Awaiting
    callers can cancel or time out the call; cancellation is never
    converted into a TransportError. Retries are left to botocore's
    retry configuration.
    """

    service_name = ""

    def __init__(self, client: Any):
        """
        Args:
            client: boto3 client for `service_name`
        """
        self.client = client

    async def _call(
        self,
        operation: str,
        func: Callable[..., Any],
        arn: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """
        Call a boto3 client method off the event loop.

        Args:
            operation: Operation name, for errors and logs
            func: Boto3 client method to call
            arn: ARN the call is about, if any
            **kwargs: Keyword arguments for the method

        Returns:
            Response from AWS API

        Raises:
            TransportError: If the call fails
            NotFoundError: If AWS reports the resource as missing
        """
        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(None, lambda: func(**kwargs))
        except (ClientError, BotoCoreError) as e:
            error = translate_error(operation, e, arn=arn)
            logger.error(f"{self.service_name}.{operation} failed: {error}")
            raise error from e

    async def _paginate(self, operation: str, **kwargs: Any) -> list[dict[str, Any]]:
        """
        Collect every page of a paginated operation.

        Returns:
            List of response pages
        """
        paginator = self.client.get_paginator(operation)
        return await self._call(
            operation,
            lambda **kw: list(paginator.paginate(**kw)),
            **kwargs,
        )
