"""Service layer for Lattice tag ownership."""

from .ownership_service import OwnershipService
from .resource_finder import (
    BulkResourceFinder,
    EnumeratingResourceFinder,
    ResourceFinder,
    build_resource_finder,
)
from .tag_codec import (
    build_ownership_tag,
    contains_tags,
    extract_owner,
    merge_with_defaults,
)

__all__ = [
    "OwnershipService",
    "BulkResourceFinder",
    "EnumeratingResourceFinder",
    "ResourceFinder",
    "build_resource_finder",
    "build_ownership_tag",
    "contains_tags",
    "extract_owner",
    "merge_with_defaults",
]
