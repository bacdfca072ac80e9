# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Bulk tag access through the Resource Groups Tagging API."""

import logging
from typing import Any

from ..models.enums import ResourceType
from ..models.resource import ResourceRef, Tags
from ..services.tag_codec import contains_tags, from_aws_tag_list
from .aws_client import AWSClient
from .gateway import BulkTagQuery

logger = logging.getLogger(__name__)

# GetResources accepts at most 100 ARNs per request
MAX_ARNS_PER_REQUEST = 100


class TaggingClient(AWSClient, BulkTagQuery):
    """
    BulkTagQuery backed by boto3 `resourcegroupstaggingapi`.

    Not available from network-isolated VPCs.
    """

    service_name = "resourcegroupstaggingapi"

    async def get_tags_for_refs(self, refs: list[ResourceRef]) -> dict[ResourceRef, Tags]:
        """
        Fetch tags for the given resources.

        ARNs are sent in chunks of MAX_ARNS_PER_REQUEST. Resources the API
        does not return map to an empty tag set.

        Args:
            refs: Resources to look up

        Returns:
            Mapping of each ref to its tags
        """
        refs_by_arn = {ref.arn: ref for ref in refs}
        arns = list(refs_by_arn)
        result: dict[ResourceRef, Tags] = {ref: {} for ref in refs}

        for start in range(0, len(arns), MAX_ARNS_PER_REQUEST):
            chunk = arns[start:start + MAX_ARNS_PER_REQUEST]
            pages = await self._paginate("get_resources", ResourceARNList=chunk)
            for mapping in self._iter_mappings(pages):
                ref = refs_by_arn.get(mapping.get("ResourceARN"))
                if ref is not None:
                    result[ref] = from_aws_tag_list(mapping.get("Tags"))

        logger.debug(f"Fetched tags for {len(refs)} resources via tagging API")
        return result

    async def find_refs_by_tags(
        self,
        resource_type: ResourceType,
        query: Tags,
    ) -> list[ResourceRef]:
        """
        Find resources of a type whose tags contain every pair in `query`.

        Args:
            resource_type: Resource type filter
            query: Tags the resources must carry

        Returns:
            Matching resource refs
        """
        kwargs: dict[str, Any] = {"ResourceTypeFilters": [resource_type.value]}
        if query:
            kwargs["TagFilters"] = [
                {"Key": key, "Values": [value]} if value is not None else {"Key": key}
                for key, value in query.items()
            ]

        pages = await self._paginate("get_resources", **kwargs)

        refs = []
        for mapping in self._iter_mappings(pages):
            # TagFilters match on key presence when no value is given, so
            # re-check to keep exact superset semantics
            if contains_tags(query, from_aws_tag_list(mapping.get("Tags"))):
                refs.append(ResourceRef(arn=mapping["ResourceARN"], resource_type=resource_type))

        logger.debug(f"Found {len(refs)} {resource_type.value} resources matching {query}")
        return refs

    @staticmethod
    def _iter_mappings(pages: list[dict[str, Any]]):
        for page in pages:
            yield from page.get("ResourceTagMappingList", [])
