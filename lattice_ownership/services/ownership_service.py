# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Ownership arbitration based on the ManagedBy tag.

Several controllers may manage resources in the same account and region.
The ManagedBy tag on each resource records which of them owns it. A
resource without the tag predates ownership tagging and is claimed by
the first controller that touches it.

Claims are best effort. Tag writes are last-writer-wins and there is no
conditional write, so two controllers that both see a resource as
unclaimed will both write their token and both report success; only the
last write survives. Callers that need certainty can re-check with
is_managed() later.
"""

import logging

from ..clients.gateway import PerResourceTagAccess
from ..models.enums import OwnershipState
from ..models.identity import Identity
from ..models.resource import ResourceRef, Tags
from .tag_codec import build_ownership_tag, extract_owner

logger = logging.getLogger(__name__)


class OwnershipService:
    """
    Decides whether this controller owns, may claim, or must leave a resource.

    Reads and claim writes go through the per-resource API of the
    resource itself. Errors from the gateway are never interpreted: a
    failed read or write is raised to the caller and ownership stays
    unknown.
    """

    def __init__(self, identity: Identity, tag_access: PerResourceTagAccess):
        """
        Initialize with the controller identity and a tag gateway.

        Args:
            identity: This controller's identity
            tag_access: Gateway used to read tags and write claims
        """
        self.identity = identity
        self.tag_access = tag_access
        self._token = identity.ownership_token

    def classify(self, tags: Tags) -> OwnershipState:
        """
        Classify a tag set from this controller's point of view.

        An empty ManagedBy value counts as unclaimed.
        """
        owner = extract_owner(tags)
        if not owner:
            return OwnershipState.UNCLAIMED
        if owner == self._token:
            return OwnershipState.OWNED_BY_ME
        return OwnershipState.OWNED_BY_OTHER

    async def is_managed(self, ref: ResourceRef) -> bool:
        """
        Check whether this controller owns a resource. Never writes.

        Raises:
            TransportError, NotFoundError: If the tags cannot be read
        """
        tags = await self.tag_access.get_tags(ref)
        return self.classify(tags) == OwnershipState.OWNED_BY_ME

    async def try_own(self, ref: ResourceRef) -> bool:
        """
        Fetch a resource's tags and try to own it.

        Returns:
            True if this controller owns the resource (possibly after claiming it)

        Raises:
            TransportError, NotFoundError: If the read or the claim write fails
        """
        tags = await self.tag_access.get_tags(ref)
        return await self.try_own_from_tags(ref, tags)

    async def try_own_from_tags(self, ref: ResourceRef, tags: Tags) -> bool:
        """
        Try to own a resource whose current tags are already known.

        - Unclaimed: write the ownership tag, True once the write succeeds
        - Owned by this controller: True, nothing written
        - Owned by another controller: False, nothing written

        Args:
            ref: Resource to own
            tags: Current tags of the resource

        Returns:
            True if this controller owns the resource

        Raises:
            TransportError, NotFoundError: If the claim write fails
        """
        state = self.classify(tags)

        if state == OwnershipState.UNCLAIMED:
            await self.tag_access.set_tags(ref, build_ownership_tag(self.identity))
            logger.info(f"Claimed ownership of {ref.arn} as {self._token}")
            return True

        if state == OwnershipState.OWNED_BY_OTHER:
            logger.debug(f"{ref.arn} is owned by {extract_owner(tags)}, not {self._token}")
            return False

        return True
