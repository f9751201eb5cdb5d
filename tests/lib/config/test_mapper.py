import json

import pytest
from dacite import UnexpectedDataError

from infra_kubets.lib.config import map_config, parse_stack_config
from infra_kubets.modules.aws.eks_cluster.config import EKSClusterArgs, SubnetArgs
from infra_kubets.modules.aws.service_roles.config import ServiceRolesConfig


def test_parse_stack_config_keeps_only_the_stack_namespace():
    raw = {
        "aws:region": "ap-northeast-1",
        "eks-cluster:cluster_name": "kubets-cluster",
        "eks-cluster:create_bucket": "false",
        "eks-cluster:public_subnets": json.dumps(
            [{"name": "a", "availability_zone": "ap-northeast-1a", "cidr_block": "10.0.1.0/24"}]
        ),
    }

    assert parse_stack_config("eks-cluster", raw) == {
        "cluster_name": "kubets-cluster",
        "create_bucket": False,
        "public_subnets": [{"name": "a", "availability_zone": "ap-northeast-1a", "cidr_block": "10.0.1.0/24"}],
    }


def test_eks_cluster_defaults_match_the_reference_topology():
    config = map_config(EKSClusterArgs, {})

    assert config.cluster_name == "kubets-cluster"
    assert config.role_name == "eks-cluster-role"
    assert config.service_principal == "eks.amazonaws.com"
    assert config.managed_policies == ["AmazonEKSClusterPolicy", "AmazonEKSServicePolicy"]
    assert config.vpc_cidr == "10.0.0.0/16"
    assert config.public_subnets == [
        SubnetArgs(name="main-public-a", availability_zone="ap-northeast-1a", cidr_block="10.0.1.0/24"),
        SubnetArgs(name="main-public-d", availability_zone="ap-northeast-1d", cidr_block="10.0.2.0/24"),
    ]
    assert config.private_subnets == [
        SubnetArgs(name="main-private-a", availability_zone="ap-northeast-1a", cidr_block="10.0.100.0/24"),
    ]
    assert config.create_bucket is True


def test_eks_cluster_overrides():
    config = map_config(
        EKSClusterArgs,
        {
            "cluster_name": "other",
            "managed_policies": ["arn:aws:iam::123456789012:policy/Custom"],
            "private_subnets": [],
        },
    )

    assert config.cluster_name == "other"
    assert config.managed_policies == ["arn:aws:iam::123456789012:policy/Custom"]
    assert config.private_subnets == []


def test_unknown_keys_are_rejected():
    with pytest.raises(UnexpectedDataError):
        map_config(EKSClusterArgs, {"cluster_nmae": "typo"})


def test_service_roles_config():
    config = map_config(
        ServiceRolesConfig,
        {"roles": [{"name": "nodes", "service_principal": "ec2.amazonaws.com"}]},
    )

    assert config.path == "/"
    assert config.roles[0].managed_policies == []
    assert config.roles[0].description is None


@pytest.mark.parametrize("version", ["1.29", "1.30"])
def test_numeric_looking_strings_stay_strings(version):
    raw = {"eks-cluster:version": version, "eks-cluster:cluster_name": "123"}

    config = map_config(EKSClusterArgs, parse_stack_config("eks-cluster", raw))

    assert config.version == version
    assert config.cluster_name == "123"
