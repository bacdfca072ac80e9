"""Tag-based ownership arbitration and discovery for VPC Lattice resources."""

__version__ = "0.1.0"

from .cloud import Cloud
from .clients.errors import NotFoundError, TransportError
from .config import Settings, get_settings, settings
from .models import Identity, OwnershipState, ResourceRef, ResourceType, Tags

__all__ = [
    "Cloud",
    "NotFoundError",
    "TransportError",
    "Settings",
    "get_settings",
    "settings",
    "Identity",
    "OwnershipState",
    "ResourceRef",
    "ResourceType",
    "Tags",
]
