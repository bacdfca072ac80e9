# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Per-resource tag access through the VPC Lattice API."""

import logging
from typing import Any

from ..models.enums import ResourceType
from ..models.resource import ResourceRef, Tags
from .aws_client import AWSClient
from .gateway import PerResourceTagAccess

logger = logging.getLogger(__name__)

# Listing operation per resource type
_LIST_OPERATIONS = {
    ResourceType.TARGET_GROUP: "list_target_groups",
    ResourceType.SERVICE: "list_services",
    ResourceType.SERVICE_NETWORK: "list_service_networks",
}


class LatticeClient(AWSClient, PerResourceTagAccess):
    """
    PerResourceTagAccess backed by boto3 `vpc-lattice`.

    Target groups are listed for the controller's own VPC only; services
    and service networks are account wide.
    """

    service_name = "vpc-lattice"

    def __init__(self, client: Any, vpc_id: str):
        """
        Args:
            client: boto3 vpc-lattice client
            vpc_id: VPC used to scope target group listings
        """
        super().__init__(client)
        self.vpc_id = vpc_id

    async def get_tags(self, ref: ResourceRef) -> Tags:
        """
        Fetch tags of one resource.

        Raises:
            NotFoundError: If the resource does not exist
            TransportError: If the call fails
        """
        response = await self._call(
            "list_tags_for_resource",
            self.client.list_tags_for_resource,
            arn=ref.arn,
            resourceArn=ref.arn,
        )
        return dict(response.get("tags") or {})

    async def set_tags(self, ref: ResourceRef, tags: Tags) -> None:
        """
        Add tags to a resource. Existing keys not in `tags` are left alone.

        The Lattice API needs string values, so None is written as "".
        """
        await self._call(
            "tag_resource",
            self.client.tag_resource,
            arn=ref.arn,
            resourceArn=ref.arn,
            tags={key: value if value is not None else "" for key, value in tags.items()},
        )
        logger.debug(f"Tagged {ref.arn} with {sorted(tags)}")

    async def list_all_refs(self, resource_type: ResourceType) -> list[ResourceRef]:
        """
        List every resource of a type.

        Args:
            resource_type: Kind of Lattice resource

        Returns:
            Refs for all listed resources

        Raises:
            ValueError: If the type has no account-wide listing
        """
        operation = _LIST_OPERATIONS.get(resource_type)
        if operation is None:
            raise ValueError(f"Listing is not supported for {resource_type.value}")
        kwargs: dict[str, Any] = {}
        if resource_type == ResourceType.TARGET_GROUP:
            kwargs["vpcIdentifier"] = self.vpc_id

        pages = await self._paginate(operation, **kwargs)
        refs = [
            ResourceRef(arn=item["arn"], resource_type=resource_type)
            for page in pages
            for item in page.get("items", [])
        ]
        logger.debug(f"Listed {len(refs)} {resource_type.value} resources")
        return refs
