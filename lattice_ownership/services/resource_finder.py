# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Resource discovery by tags.

Two strategies exist, selected once per identity:

- BulkResourceFinder uses the Resource Groups Tagging API. One paginated
  call answers a whole query.
- EnumeratingResourceFinder is for network-isolated VPCs where the
  tagging API is unreachable. It lists every resource of a type and
  reads tags one resource at a time, so it costs one round trip per
  resource.

Discovery never writes tags.
"""

import asyncio
import logging
from abc import ABC, abstractmethod

from ..clients.gateway import BulkTagQuery, PerResourceTagAccess
from ..models.enums import ResourceType
from ..models.identity import Identity
from ..models.resource import ResourceRef, Tags
from .tag_codec import contains_tags

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 10


class ResourceFinder(ABC):
    """Finds resources and their tags."""

    @abstractmethod
    async def find_by_tags(self, resource_type: ResourceType, query: Tags) -> list[ResourceRef]:
        """
        Find resources whose tags are a superset of `query`.

        Callers must not rely on the order of the result.
        """

    @abstractmethod
    async def find_tags_for_refs(self, refs: list[ResourceRef]) -> dict[ResourceRef, Tags]:
        """Fetch tags for each of `refs`."""


class BulkResourceFinder(ResourceFinder):
    """Discovery through BulkTagQuery."""

    def __init__(self, bulk: BulkTagQuery):
        self.bulk = bulk

    async def find_by_tags(self, resource_type: ResourceType, query: Tags) -> list[ResourceRef]:
        return await self.bulk.find_refs_by_tags(resource_type, query)

    async def find_tags_for_refs(self, refs: list[ResourceRef]) -> dict[ResourceRef, Tags]:
        return await self.bulk.get_tags_for_refs(refs)


class EnumeratingResourceFinder(ResourceFinder):
    """
    Discovery through PerResourceTagAccess: list, then read tags per resource.

    Tag reads run concurrently, at most `max_concurrency` at a time. The
    first failed read aborts the whole operation: outstanding reads are
    cancelled and the error is raised as is, with no partial result.
    """

    def __init__(
        self,
        tag_access: PerResourceTagAccess,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ):
        """
        Args:
            tag_access: Per-resource tag gateway
            max_concurrency: Maximum tag reads in flight
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.tag_access = tag_access
        self.max_concurrency = max_concurrency

    async def find_by_tags(self, resource_type: ResourceType, query: Tags) -> list[ResourceRef]:
        refs = await self.tag_access.list_all_refs(resource_type)
        tags_by_ref = await self._fetch_tags(refs)

        matched = [ref for ref in refs if contains_tags(query, tags_by_ref[ref])]
        logger.debug(
            f"Matched {len(matched)} of {len(refs)} {resource_type.value} resources "
            f"against {query}"
        )
        return matched

    async def find_tags_for_refs(self, refs: list[ResourceRef]) -> dict[ResourceRef, Tags]:
        return await self._fetch_tags(refs)

    async def _fetch_tags(self, refs: list[ResourceRef]) -> dict[ResourceRef, Tags]:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def fetch_with_semaphore(ref: ResourceRef) -> Tags:
            async with semaphore:
                return await self.tag_access.get_tags(ref)

        tasks = [asyncio.ensure_future(fetch_with_semaphore(ref)) for ref in refs]
        try:
            results = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            # Let the cancelled reads finish so none of them is left unobserved
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return dict(zip(refs, results))


def build_resource_finder(
    identity: Identity,
    bulk: BulkTagQuery | None,
    tag_access: PerResourceTagAccess,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> ResourceFinder:
    """
    Pick the discovery strategy for an identity.

    Args:
        identity: Controller identity; `private_vpc` selects the strategy
        bulk: Tagging API gateway, may be None in network-isolated mode
        tag_access: Per-resource gateway
        max_concurrency: Concurrent reads for the enumerating strategy

    Returns:
        The ResourceFinder to use for the lifetime of the identity

    Raises:
        ValueError: If bulk discovery is needed but no bulk gateway is given
    """
    if identity.private_vpc:
        logger.info("Network-isolated mode: discovering resources by enumeration")
        return EnumeratingResourceFinder(tag_access, max_concurrency=max_concurrency)

    if bulk is None:
        raise ValueError("A BulkTagQuery is required when private_vpc is False")
    return BulkResourceFinder(bulk)
