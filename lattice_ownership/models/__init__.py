"""Data models for Lattice tag ownership."""

from .enums import OwnershipState, ResourceType
from .identity import Identity
from .resource import (
    MANAGED_BY_TAG,
    TAG_NAMESPACE,
    ResourceRef,
    Tags,
    ref_from_arn,
    resource_type_from_arn,
)

__all__ = [
    "OwnershipState",
    "ResourceType",
    "Identity",
    "MANAGED_BY_TAG",
    "TAG_NAMESPACE",
    "ResourceRef",
    "Tags",
    "ref_from_arn",
    "resource_type_from_arn",
]
