# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Resource reference and tag set models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ResourceType

# A tag value of None means the key is present without a value,
# which is not the same as the key being absent. The Lattice API stores
# such a value as "", so matching treats None and "" as equal.
Tags = dict[str, Optional[str]]

TAG_NAMESPACE = "application-networking.k8s.aws/"
MANAGED_BY_TAG = TAG_NAMESPACE + "ManagedBy"

_RESOURCE_TYPES = {resource_type.value.split(":", 1)[1]: resource_type for resource_type in ResourceType}


class ResourceRef(BaseModel):
    """
    Reference to a remote VPC Lattice resource.

    `resource_type` is None for Lattice resources this package cannot list.
    They can still be read, tagged and claimed by ARN.
    """

    model_config = ConfigDict(frozen=True)

    arn: str = Field(..., min_length=1, description="Resource ARN")
    resource_type: Optional[ResourceType] = Field(default=None, description="Kind of Lattice resource")

    def __str__(self) -> str:
        return self.arn


def resource_type_from_arn(arn: str) -> Optional[ResourceType]:
    """
    Work out the resource type of a VPC Lattice ARN.

    ARN formats:
        arn:aws:vpc-lattice:region:account:targetgroup/tg-0123
        arn:aws:vpc-lattice:region:account:service/svc-0123/listener/listener-0123

    Args:
        arn: VPC Lattice ARN

    Returns:
        The matching ResourceType, or None for a Lattice resource kind
        not in ResourceType

    Raises:
        ValueError: If the ARN is malformed or not a VPC Lattice ARN
    """
    parts = arn.split(":") if arn else []
    if len(parts) < 6 or parts[0] != "arn" or parts[2] != "vpc-lattice" or not parts[5]:
        raise ValueError(f"Invalid VPC Lattice ARN: {arn}")

    # Nested resources alternate kind and id: service/svc-1/listener/l-1
    segments = ":".join(parts[5:]).split("/")
    kind = segments[-2] if len(segments) % 2 == 0 else segments[0]
    return _RESOURCE_TYPES.get(kind)


def ref_from_arn(arn: str) -> ResourceRef:
    """Build a ResourceRef from any VPC Lattice ARN."""
    return ResourceRef(arn=arn, resource_type=resource_type_from_arn(arn))
