from types import SimpleNamespace

import pulumi
import pytest

from infra_kubets.modules.aws.eks_cluster import EKSCluster
from infra_kubets.modules.aws.eks_cluster import bucket as eks_bucket
from infra_kubets.modules.aws.eks_cluster import cluster as eks_cluster
from infra_kubets.modules.aws.eks_cluster import iam as eks_iam
from infra_kubets.modules.aws.eks_cluster import network as eks_network
from infra_kubets.modules.aws.eks_cluster.cluster import cluster_options
from infra_kubets.modules.aws.eks_cluster.config import EKSClusterArgs, SubnetArgs
from infra_kubets.modules.aws.eks_cluster.eks_cluster import _validate_subnets


def _static_tags(service, role, group=None):
    return {"Name": f"{service}-{role}" + (f"-{group}" if group else "")}


@pytest.fixture
def static_environment(monkeypatch):
    for module in (eks_bucket, eks_cluster, eks_iam, eks_network):
        monkeypatch.setattr(module, "get_tags", _static_tags)
    monkeypatch.setattr(eks_network, "get_sysenv", lambda: "kt-aws-ap-northeast-1-sandbox-dev")
    monkeypatch.setattr(eks_bucket, "generate_bucket_name", lambda name: f"sandbox-dev-abcde-{name}")


class TestValidateSubnets:
    def test_reference_topology_is_valid(self):
        config = EKSClusterArgs()

        _validate_subnets(config.public_subnets + config.private_subnets)

    def test_needs_subnets(self):
        with pytest.raises(ValueError, match="No public or private subnets"):
            _validate_subnets([])

    def test_needs_two_availability_zones(self):
        subnets = [
            SubnetArgs(name="a", availability_zone="ap-northeast-1a", cidr_block="10.0.1.0/24"),
            SubnetArgs(name="b", availability_zone="ap-northeast-1a", cidr_block="10.0.2.0/24"),
        ]

        with pytest.raises(ValueError, match="two availability zones"):
            _validate_subnets(subnets)

    def test_needs_unique_names(self):
        subnets = [
            SubnetArgs(name="a", availability_zone="ap-northeast-1a", cidr_block="10.0.1.0/24"),
            SubnetArgs(name="a", availability_zone="ap-northeast-1d", cidr_block="10.0.2.0/24"),
        ]

        with pytest.raises(ValueError, match="unique"):
            _validate_subnets(subnets)


@pulumi.runtime.test
def test_network(static_environment):
    config = EKSClusterArgs()

    network = eks_network.setup_network(None, config.vpc_cidr, config.public_subnets, config.private_subnets)

    assert len(network.public_subnets) == 2
    assert len(network.private_subnets) == 1
    assert network.subnets == network.public_subnets + network.private_subnets

    def check(args):
        vpc_cidr, subnet_ids, public_ip_flags, cidrs, names = args

        assert vpc_cidr == "10.0.0.0/16"
        assert subnet_ids == ["main-public-a_id", "main-public-d_id", "main-private-a_id"]
        assert public_ip_flags == [True, True, False]
        assert cidrs == ["10.0.1.0/24", "10.0.2.0/24", "10.0.100.0/24"]
        assert [tags["Name"] for tags in names] == ["main-public-a", "main-public-d", "main-private-a"]

    return pulumi.Output.all(
        network.vpc.cidr_block,
        pulumi.Output.all(*[subnet.id for subnet in network.subnets]),
        pulumi.Output.all(*[subnet.map_public_ip_on_launch for subnet in network.subnets]),
        pulumi.Output.all(*[subnet.cidr_block for subnet in network.subnets]),
        pulumi.Output.all(*[subnet.tags for subnet in network.subnets]),
    ).apply(check)


@pulumi.runtime.test
def test_cluster_uses_the_provisioned_role(static_environment):
    config = EKSClusterArgs()

    role = eks_iam.create_cluster_role(SimpleNamespace(partition="aws"), None, config)
    network = eks_network.setup_network(None, config.vpc_cidr, config.public_subnets, config.private_subnets)
    cluster = eks_cluster.create_cluster(None, config.cluster_name, role, network)

    assert role.name == "eks-cluster-role"
    assert [attachment.policy_arn for attachment in role.attachments] == [
        "arn:aws:iam::aws:policy/AmazonEKSClusterPolicy",
        "arn:aws:iam::aws:policy/AmazonEKSServicePolicy",
    ]

    def check(args):
        name, role_arn, endpoint = args

        assert name == "kubets-cluster"
        assert role_arn == "arn:aws:iam::123456789012:role/eks-cluster-role"
        assert endpoint == "https://kubets-cluster.eks.amazonaws.com"

    return pulumi.Output.all(cluster.name, cluster.role_arn, cluster.endpoint).apply(check)


@pulumi.runtime.test
def test_cluster_role_resolves_policy_names_in_partition(static_environment):
    config = EKSClusterArgs(managed_policies=["AmazonEKSClusterPolicy", "arn:aws-cn:iam::123:policy/Custom"])

    role = eks_iam.create_cluster_role(SimpleNamespace(partition="aws-cn"), None, config)

    assert [attachment.policy_arn for attachment in role.attachments] == [
        "arn:aws-cn:iam::aws:policy/AmazonEKSClusterPolicy",
        "arn:aws-cn:iam::123:policy/Custom",
    ]


@pulumi.runtime.test
def test_bucket(static_environment):
    bucket = eks_bucket.create_bucket(None, "my-bucket")

    def check(name):
        assert name == "sandbox-dev-abcde-my-bucket"

    return bucket.bucket.apply(check)


@pulumi.runtime.test
def test_module_builds_the_whole_topology(static_environment, monkeypatch):
    declared = []

    def recording_cluster_options(parent, role):
        opts = cluster_options(parent, role)
        declared.append((role, opts))
        return opts

    monkeypatch.setattr(eks_cluster, "cluster_options", recording_cluster_options)

    exports = EKSCluster("eks-cluster", EKSClusterArgs()).run()

    assert exports.role_name == "eks-cluster-role"
    assert exports.policy_arns == [
        "arn:aws:iam::aws:policy/AmazonEKSClusterPolicy",
        "arn:aws:iam::aws:policy/AmazonEKSServicePolicy",
    ]
    assert len(exports.public_subnets) == 2
    assert len(exports.private_subnets) == 1

    [(role, opts)] = declared
    assert opts.depends_on == [attachment.resource for attachment in role.attachments]
    assert len(opts.depends_on) == 2

    def check(args):
        cluster_name, role_arn, endpoint, public_subnets, private_subnets, bucket, attached_arns = args

        assert cluster_name == "kubets-cluster"
        assert role_arn == "arn:aws:iam::123456789012:role/eks-cluster-role"
        assert endpoint == "https://kubets-cluster.eks.amazonaws.com"
        assert public_subnets == ["main-public-a_id", "main-public-d_id"]
        assert private_subnets == ["main-private-a_id"]
        assert bucket == "sandbox-dev-abcde-my-bucket"
        assert attached_arns == exports.policy_arns

    return pulumi.Output.all(
        exports.cluster_name,
        exports.role_arn,
        exports.cluster_endpoint,
        pulumi.Output.all(*exports.public_subnets),
        pulumi.Output.all(*exports.private_subnets),
        exports.bucket,
        pulumi.Output.all(*[resource.policy_arn for resource in opts.depends_on]),
    ).apply(check)
