"""Pytest configuration and shared fixtures."""

import copy

import pytest
from unittest.mock import MagicMock

from lattice_ownership.clients.errors import NotFoundError
from lattice_ownership.clients.gateway import BulkTagQuery, PerResourceTagAccess
from lattice_ownership.models import Identity, ResourceRef, ResourceType, Tags, resource_type_from_arn
from lattice_ownership.services.tag_codec import contains_tags


# =============================================================================
# In-memory tag store
# =============================================================================

class InMemoryTagStore(BulkTagQuery, PerResourceTagAccess):
    """
    Fake remote tag storage implementing both gateway interfaces.

    Records every call as (operation, arn) so tests can assert on
    round trips and writes. Errors can be injected per operation and ARN.
    """

    def __init__(self):
        self.resources: dict[ResourceRef, Tags] = {}
        self.calls: list[tuple[str, str]] = []
        self._failures: dict[tuple[str, str], Exception] = {}

    def add(
        self,
        arn: str,
        resource_type: ResourceType | None = None,
        tags: Tags | None = None,
    ) -> ResourceRef:
        ref = ResourceRef(arn=arn, resource_type=resource_type or resource_type_from_arn(arn))
        self.resources[ref] = dict(tags or {})
        return ref

    def fail(self, operation: str, arn: str, error: Exception) -> None:
        self._failures[(operation, arn)] = error

    def writes(self) -> list[str]:
        return [arn for operation, arn in self.calls if operation == "set_tags"]

    def _record(self, operation: str, arn: str = "") -> None:
        self.calls.append((operation, arn))
        error = self._failures.get((operation, arn))
        if error is not None:
            raise error

    def _lookup(self, ref: ResourceRef) -> Tags:
        if ref not in self.resources:
            raise NotFoundError(f"Resource not found: {ref.arn}", arn=ref.arn)
        return self.resources[ref]

    async def get_tags(self, ref):
        self._record("get_tags", ref.arn)
        return copy.deepcopy(self._lookup(ref))

    async def set_tags(self, ref, tags):
        self._record("set_tags", ref.arn)
        self._lookup(ref).update(tags)

    async def list_all_refs(self, resource_type):
        self._record("list_all_refs")
        return [ref for ref in self.resources if ref.resource_type == resource_type]

    async def get_tags_for_refs(self, refs):
        self._record("get_tags_for_refs")
        return {ref: copy.deepcopy(self.resources.get(ref, {})) for ref in refs}

    async def find_refs_by_tags(self, resource_type, query):
        self._record("find_refs_by_tags")
        return [
            ref for ref, tags in self.resources.items()
            if ref.resource_type == resource_type and contains_tags(query, tags)
        ]


# =============================================================================
# Identity Fixtures
# =============================================================================

@pytest.fixture
def identity():
    """Identity of the controller under test."""
    return Identity(
        account_id="222222",
        region="us-west-2",
        cluster_name="clusterA",
        vpc_id="vpc-a",
    )


@pytest.fixture
def other_identity():
    """Identity of a competing controller in another cluster."""
    return Identity(
        account_id="111111",
        region="us-west-2",
        cluster_name="clusterB",
        vpc_id="vpc-b",
    )


@pytest.fixture
def private_identity():
    """Identity of a controller running in a network-isolated VPC."""
    return Identity(
        account_id="222222",
        region="us-west-2",
        cluster_name="clusterA",
        vpc_id="vpc-a",
        private_vpc=True,
    )


# =============================================================================
# Gateway and AWS Mocks
# =============================================================================

@pytest.fixture
def tag_store():
    """Empty in-memory tag store."""
    return InMemoryTagStore()


@pytest.fixture
def make_arn():
    """Build Lattice ARNs: make_arn("tg-1") or make_arn("svc-1", "service")."""
    def _make(resource_id: str, kind: str = "targetgroup", account: str = "222222") -> str:
        return f"arn:aws:vpc-lattice:us-west-2:{account}:{kind}/{resource_id}"
    return _make


@pytest.fixture
def mock_paginated_client():
    """
    Create a mock boto3 client whose paginator returns fixed pages.

    Set `client.pages = [...]` before use; paginate() kwargs are
    recorded on `client.paginate_calls`.
    """
    client = MagicMock()
    client.pages = []
    client.paginate_calls = []

    def get_paginator(operation):
        paginator = MagicMock()

        def paginate(**kwargs):
            client.paginate_calls.append((operation, kwargs))
            return iter(client.pages)

        paginator.paginate.side_effect = paginate
        return paginator

    client.get_paginator.side_effect = get_paginator
    return client


@pytest.fixture
def test_env(monkeypatch):
    """Set up controller environment variables."""
    test_vars = {
        "REGION": "us-west-2",
        "AWS_ACCOUNT_ID": "222222",
        "CLUSTER_NAME": "clusterA",
        "CLUSTER_VPC_ID": "vpc-a",
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars


# =============================================================================
# Pytest Hooks for Test Reporting
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "property: marks tests as property-based tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark tests by directory
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
