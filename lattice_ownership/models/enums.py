# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Enumerations for resource types and ownership states."""

from enum import Enum


class ResourceType(str, Enum):
    """VPC Lattice resource types, as understood by the tagging API filters."""

    TARGET_GROUP = "vpc-lattice:targetgroup"
    SERVICE = "vpc-lattice:service"
    SERVICE_NETWORK = "vpc-lattice:servicenetwork"
    SERVICE_NETWORK_SERVICE_ASSOCIATION = "vpc-lattice:servicenetworkserviceassociation"
    SERVICE_NETWORK_VPC_ASSOCIATION = "vpc-lattice:servicenetworkvpcassociation"
    ACCESS_LOG_SUBSCRIPTION = "vpc-lattice:accesslogsubscription"
    LISTENER = "vpc-lattice:listener"
    RULE = "vpc-lattice:rule"


class OwnershipState(str, Enum):
    """Ownership of a resource as seen from one controller identity."""

    UNCLAIMED = "unclaimed"
    OWNED_BY_ME = "owned_by_me"
    OWNED_BY_OTHER = "owned_by_other"
