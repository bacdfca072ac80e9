# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Factory for boto3 clients used by the tag gateways."""

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)


def _log_request(params: Any = None, model: Any = None, **kwargs: Any) -> None:
    logger.debug(
        f"request serviceName={model.service_model.service_name} "
        f"operation={model.name} params={params}"
    )


def _log_response(parsed: Any = None, model: Any = None, **kwargs: Any) -> None:
    error = parsed.get("Error") if isinstance(parsed, dict) else None
    if error:
        logger.debug(
            f"error serviceName={model.service_model.service_name} "
            f"operation={model.name} error={error.get('Code')}: {error.get('Message')}"
        )
    else:
        logger.debug(
            f"response serviceName={model.service_model.service_name} "
            f"operation={model.name}"
        )


def _log_exception(exception: Optional[Exception] = None, **kwargs: Any) -> None:
    if exception is not None:
        logger.debug(f"error event={kwargs.get('event_name')} error={exception}")


class ClientFactory:
    """
    Creates boto3 clients that share one configuration.

    Every client gets the same retry policy and has request, response
    and error events logged at DEBUG. Clients are created once per
    service and reused.
    """

    def __init__(
        self,
        region: str,
        max_attempts: int = 3,
        lattice_endpoint: Optional[str] = None,
        boto_config: Optional[Config] = None,
    ):
        """
        Args:
            region: AWS region for all clients
            max_attempts: Attempts per call, applied through botocore retries
            lattice_endpoint: Optional endpoint override for vpc-lattice
            boto_config: Optional Config; defaults to adaptive retries
        """
        self._region = region
        self._lattice_endpoint = lattice_endpoint
        self._boto_config = boto_config or Config(
            region_name=region,
            retries={
                "max_attempts": max_attempts,
                "mode": "adaptive",
            },
        )
        self._clients: dict[str, Any] = {}

        logger.debug(f"ClientFactory initialized with region={region}")

    @property
    def region(self) -> str:
        """Get the region."""
        return self._region

    @property
    def boto_config(self) -> Config:
        """Get the boto3 configuration."""
        return self._boto_config

    def get_client(self, service_name: str, endpoint_url: Optional[str] = None) -> Any:
        """
        Get or create a boto3 client for a service.

        Args:
            service_name: boto3 service name (e.g., "vpc-lattice")
            endpoint_url: Optional endpoint override

        Returns:
            boto3 client; the same instance on every call for a service
        """
        if service_name in self._clients:
            return self._clients[service_name]

        logger.info(f"Creating {service_name} client for region {self._region}")
        client = boto3.client(
            service_name,
            region_name=self._region,
            endpoint_url=endpoint_url,
            config=self._boto_config,
        )
        client.meta.events.register("before-call", _log_request)
        client.meta.events.register("after-call", _log_response)
        client.meta.events.register("after-call-error", _log_exception)

        self._clients[service_name] = client
        return client

    def lattice(self) -> Any:
        """Get the vpc-lattice client."""
        return self.get_client("vpc-lattice", endpoint_url=self._lattice_endpoint)

    def tagging(self) -> Any:
        """Get the resourcegroupstaggingapi client."""
        return self.get_client("resourcegroupstaggingapi")
