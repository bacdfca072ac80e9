# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Controller identity and the ownership token derived from it."""

import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class Identity(BaseModel):
    """
    Immutable identity of one controller instance.

    Controllers that share account, cluster and VPC produce the same
    ownership token and are therefore treated as the same owner.
    """

    model_config = ConfigDict(frozen=True)

    account_id: str = Field(..., min_length=1, description="AWS account ID")
    region: str = Field(..., min_length=1, description="AWS region")
    cluster_name: str = Field(..., min_length=1, description="Kubernetes cluster name")
    vpc_id: str = Field(..., min_length=1, description="VPC the cluster runs in")
    private_vpc: bool = Field(
        False,
        description="Network-isolated mode: the tagging API is unreachable"
    )

    @model_validator(mode="after")
    def _warn_on_ambiguous_token(self) -> "Identity":
        # Token components are joined with "/" and not escaped.
        if "/" in self.cluster_name or "/" in self.vpc_id or "/" in self.account_id:
            logger.warning(
                f"Ownership token {self.ownership_token!r} has a component "
                f"containing '/'; it may collide with another identity"
            )
        return self

    @property
    def ownership_token(self) -> str:
        """Token written to the ManagedBy tag: account/cluster/vpc."""
        return f"{self.account_id}/{self.cluster_name}/{self.vpc_id}"
