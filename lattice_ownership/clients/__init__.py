"""AWS tag gateway clients."""

from .errors import NotFoundError, TransportError
from .gateway import BulkTagQuery, PerResourceTagAccess
from .client_factory import ClientFactory
from .lattice_client import LatticeClient
from .tagging_client import TaggingClient

__all__ = [
    "NotFoundError",
    "TransportError",
    "BulkTagQuery",
    "PerResourceTagAccess",
    "ClientFactory",
    "LatticeClient",
    "TaggingClient",
]
