"""Configuration management for Lattice tag ownership.

This module handles loading and validating configuration from environment
variables with sensible defaults, and builds the controller Identity from it.
"""

from typing import Optional
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.identity import Identity


class Settings(BaseSettings):
    """
    Controller settings loaded from environment variables.

    Account, cluster and VPC have no usable defaults; they must be set
    via environment variables or a .env file before an Identity
    can be built.
    """

    # Identity
    aws_region: str = Field(
        default="us-west-2",
        description="AWS region the controller manages",
        validation_alias=AliasChoices("REGION", "AWS_REGION", "AWS_DEFAULT_REGION")
    )
    account_id: str = Field(
        default="",
        description="AWS account ID",
        validation_alias="AWS_ACCOUNT_ID"
    )
    cluster_name: str = Field(
        default="",
        description="Name of the Kubernetes cluster this controller serves",
        validation_alias="CLUSTER_NAME"
    )
    vpc_id: str = Field(
        default="",
        description="VPC of the Kubernetes cluster",
        validation_alias="CLUSTER_VPC_ID"
    )
    private_vpc: bool = Field(
        default=False,
        description="Network-isolated mode (no access to the tagging API)",
        validation_alias="PRIVATE_VPC"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="LOG_LEVEL"
    )

    # AWS transport
    lattice_endpoint: Optional[str] = Field(
        default=None,
        description="Override endpoint URL for the VPC Lattice API",
        validation_alias="LATTICE_ENDPOINT"
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Maximum attempts per AWS call (botocore retry policy)",
        validation_alias="AWS_MAX_ATTEMPTS"
    )
    max_concurrency: int = Field(
        default=10,
        ge=1,
        description="Concurrent per-resource tag reads in network-isolated mode",
        validation_alias="TAG_FETCH_CONCURRENCY"
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    def identity(self) -> Identity:
        """
        Build the controller identity from these settings.

        Returns:
            Immutable Identity

        Raises:
            ValueError: If account, cluster or VPC is not configured
        """
        missing = [
            name for name, value in (
                ("AWS_ACCOUNT_ID", self.account_id),
                ("CLUSTER_NAME", self.cluster_name),
                ("CLUSTER_VPC_ID", self.vpc_id),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

        return Identity(
            account_id=self.account_id,
            region=self.aws_region,
            cluster_name=self.cluster_name,
            vpc_id=self.vpc_id,
            private_vpc=self.private_vpc,
        )


def get_settings() -> Settings:
    """
    Get application settings.

    Loads settings from environment variables and .env file.

    Returns:
        Settings instance with all configuration values
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """
    Get the global settings instance.

    Creates the settings instance on first call and caches it.

    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings
