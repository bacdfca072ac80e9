# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Entry point for controllers: identity, tag gateways, ownership and discovery.

Reconciliation loops hold one Cloud for the lifetime of the process and
work with plain ARN strings; the Cloud turns them into ResourceRefs and
delegates to the ownership service and the resource finder.
"""

import logging
from typing import Optional

from .clients.client_factory import ClientFactory
from .clients.gateway import BulkTagQuery, PerResourceTagAccess
from .clients.lattice_client import LatticeClient
from .clients.tagging_client import TaggingClient
from .config import Settings, settings as global_settings
from .models.enums import ResourceType
from .models.identity import Identity
from .models.resource import Tags, ref_from_arn
from .services.ownership_service import OwnershipService
from .services.resource_finder import DEFAULT_MAX_CONCURRENCY, build_resource_finder
from .services.tag_codec import build_ownership_tag, merge_with_defaults

logger = logging.getLogger(__name__)


class Cloud:
    """
    Ownership and discovery for one controller identity.

    The discovery strategy is fixed at construction from
    `identity.private_vpc`. Ownership reads and claims always use the
    per-resource gateway.
    """

    def __init__(
        self,
        identity: Identity,
        lattice: PerResourceTagAccess,
        tagging: Optional[BulkTagQuery] = None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ):
        """
        Args:
            identity: This controller's identity
            lattice: Per-resource tag gateway
            tagging: Bulk tag gateway; not needed in network-isolated mode
            max_concurrency: Concurrent tag reads when enumerating
        """
        self._identity = identity
        self._lattice = lattice
        self._tagging = tagging
        self.ownership = OwnershipService(identity, lattice)
        self.finder = build_resource_finder(
            identity, tagging, lattice, max_concurrency=max_concurrency
        )

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> "Cloud":
        """
        Build a Cloud with boto3-backed gateways from settings.

        Args:
            settings: Settings to use; the global settings if None

        Returns:
            Configured Cloud

        Raises:
            ValueError: If the identity settings are incomplete
        """
        settings = settings or global_settings()
        identity = settings.identity()

        factory = ClientFactory(
            region=identity.region,
            max_attempts=settings.max_attempts,
            lattice_endpoint=settings.lattice_endpoint,
        )
        lattice = LatticeClient(factory.lattice(), vpc_id=identity.vpc_id)
        tagging = None if identity.private_vpc else TaggingClient(factory.tagging())

        logger.info(
            f"Cloud initialized for {identity.ownership_token} in {identity.region} "
            f"(private_vpc={identity.private_vpc})"
        )
        return cls(identity, lattice, tagging, max_concurrency=settings.max_concurrency)

    @property
    def identity(self) -> Identity:
        """Get the controller identity."""
        return self._identity

    @property
    def lattice(self) -> PerResourceTagAccess:
        """Get the per-resource tag gateway."""
        return self._lattice

    @property
    def tagging(self) -> Optional[BulkTagQuery]:
        """Get the bulk tag gateway, None in network-isolated mode."""
        return self._tagging

    def default_tags(self) -> Tags:
        """Tags every resource created by this controller starts with."""
        return build_ownership_tag(self._identity)

    def default_tags_merged_with(self, tags: Optional[Tags]) -> Tags:
        """Default tags overlaid with `tags`."""
        return merge_with_defaults(self._identity, tags)

    async def find_tags_for_arns(self, arns: list[str]) -> dict[str, Tags]:
        """
        Fetch tags for Lattice ARNs.

        Raises:
            ValueError: If an ARN is not a VPC Lattice ARN
            TransportError, NotFoundError: If a lookup fails
        """
        refs = [ref_from_arn(arn) for arn in arns]
        tags_by_ref = await self.finder.find_tags_for_refs(refs)
        return {ref.arn: tags for ref, tags in tags_by_ref.items()}

    async def find_arns_by_tags(self, resource_type: ResourceType, tags: Tags) -> list[str]:
        """ARNs of resources of a type carrying all of `tags`."""
        refs = await self.finder.find_by_tags(resource_type, tags)
        return [ref.arn for ref in refs]

    async def find_target_group_arns(self, tags: Tags) -> list[str]:
        """ARNs of target groups carrying all of `tags`."""
        return await self.find_arns_by_tags(ResourceType.TARGET_GROUP, tags)

    async def is_arn_managed(self, arn: str) -> bool:
        """Whether this controller owns the resource. Never writes."""
        return await self.ownership.is_managed(ref_from_arn(arn))

    async def try_own(self, arn: str) -> bool:
        """Check ownership and claim the resource if nobody owns it."""
        return await self.ownership.try_own(ref_from_arn(arn))

    async def try_own_from_tags(self, arn: str, tags: Tags) -> bool:
        """Same as try_own, with the resource's current tags already known."""
        return await self.ownership.try_own_from_tags(ref_from_arn(arn), tags)
