# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Interfaces for reading and writing tags on remote resources.

Two access strategies exist. BulkTagQuery searches tags across many
resources in a single paginated call and needs the Resource Groups
Tagging API. PerResourceTagAccess reads and writes tags one resource at
a time and is the only option when the controller runs in a
network-isolated VPC.

Any method may raise TransportError or NotFoundError; implementations
do not retry.
"""

from abc import ABC, abstractmethod

from ..models.enums import ResourceType
from ..models.resource import ResourceRef, Tags


class BulkTagQuery(ABC):
    """Cross-resource tag search."""

    @abstractmethod
    async def get_tags_for_refs(self, refs: list[ResourceRef]) -> dict[ResourceRef, Tags]:
        """Fetch tags for all `refs` in as few calls as possible."""

    @abstractmethod
    async def find_refs_by_tags(
        self,
        resource_type: ResourceType,
        query: Tags,
    ) -> list[ResourceRef]:
        """Find resources of `resource_type` whose tags are a superset of `query`."""


class PerResourceTagAccess(ABC):
    """Tag access through the resource's own service API."""

    @abstractmethod
    async def get_tags(self, ref: ResourceRef) -> Tags:
        """Fetch the current tags of one resource."""

    @abstractmethod
    async def set_tags(self, ref: ResourceRef, tags: Tags) -> None:
        """Add or overwrite `tags` on a resource. Keys not in `tags` are kept."""

    @abstractmethod
    async def list_all_refs(self, resource_type: ResourceType) -> list[ResourceRef]:
        """Enumerate every resource of `resource_type`, unfiltered."""
