"""Unit tests for the Identity model and resource refs."""

import logging

import pytest
from pydantic import ValidationError

from lattice_ownership.models import (
    Identity,
    ResourceRef,
    ResourceType,
    ref_from_arn,
    resource_type_from_arn,
)


class TestOwnershipToken:
    """Tests for Identity.ownership_token."""

    def test_token_is_account_cluster_vpc(self, identity):
        assert identity.ownership_token == "222222/clusterA/vpc-a"

    def test_token_ignores_region_and_mode(self, identity):
        """Region and network mode are not part of the owner identity."""
        elsewhere = Identity(
            account_id="222222",
            region="eu-west-1",
            cluster_name="clusterA",
            vpc_id="vpc-a",
            private_vpc=True,
        )
        assert elsewhere.ownership_token == identity.ownership_token

    def test_different_clusters_have_different_tokens(self, identity, other_identity):
        assert identity.ownership_token != other_identity.ownership_token

    def test_slash_in_component_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lattice_ownership.models.identity"):
            ident = Identity(
                account_id="1",
                region="us-west-2",
                cluster_name="team/a",
                vpc_id="vpc-1",
            )
        assert ident.ownership_token == "1/team/a/vpc-1"
        assert "may collide" in caplog.text


class TestIdentityValidation:
    """Tests for Identity construction rules."""

    def test_identity_is_immutable(self, identity):
        with pytest.raises(ValidationError):
            identity.cluster_name = "other"

    @pytest.mark.parametrize("field", ["account_id", "region", "cluster_name", "vpc_id"])
    def test_empty_fields_rejected(self, field):
        values = {
            "account_id": "1",
            "region": "us-west-2",
            "cluster_name": "c",
            "vpc_id": "v",
        }
        values[field] = ""
        with pytest.raises(ValidationError):
            Identity(**values)

    def test_private_vpc_defaults_to_false(self, identity):
        assert identity.private_vpc is False


class TestResourceRef:
    """Tests for ResourceRef and ARN parsing."""

    def test_refs_are_hashable_and_equal_by_value(self, make_arn):
        a = ResourceRef(arn=make_arn("tg-1"), resource_type=ResourceType.TARGET_GROUP)
        b = ResourceRef(arn=make_arn("tg-1"), resource_type=ResourceType.TARGET_GROUP)
        assert a == b
        assert {a: 1}[b] == 1

    def test_str_is_arn(self, make_arn):
        ref = ref_from_arn(make_arn("tg-1"))
        assert str(ref) == make_arn("tg-1")

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("targetgroup", ResourceType.TARGET_GROUP),
            ("service", ResourceType.SERVICE),
            ("servicenetwork", ResourceType.SERVICE_NETWORK),
            ("servicenetworkserviceassociation", ResourceType.SERVICE_NETWORK_SERVICE_ASSOCIATION),
            ("servicenetworkvpcassociation", ResourceType.SERVICE_NETWORK_VPC_ASSOCIATION),
            ("accesslogsubscription", ResourceType.ACCESS_LOG_SUBSCRIPTION),
        ],
    )
    def test_resource_type_from_arn(self, make_arn, kind, expected):
        assert resource_type_from_arn(make_arn("x-1", kind)) == expected

    def test_nested_resources_use_innermost_kind(self, make_arn):
        listener = make_arn("svc-1/listener/listener-1", "service")
        rule = make_arn("svc-1/listener/listener-1/rule/rule-1", "service")

        assert resource_type_from_arn(listener) == ResourceType.LISTENER
        assert resource_type_from_arn(rule) == ResourceType.RULE

    def test_unknown_lattice_kind_is_accepted_untyped(self, make_arn):
        arn = make_arn("rgw-1", "resourcegateway")

        assert resource_type_from_arn(arn) is None
        assert ref_from_arn(arn) == ResourceRef(arn=arn)

    @pytest.mark.parametrize(
        "arn",
        [
            "",
            "not-an-arn",
            "arn:aws:ec2:us-west-2:222222:instance/i-123",
            "arn:aws:vpc-lattice:us-west-2:222222:",
        ],
    )
    def test_invalid_arns_rejected(self, arn):
        with pytest.raises(ValueError):
            resource_type_from_arn(arn)
