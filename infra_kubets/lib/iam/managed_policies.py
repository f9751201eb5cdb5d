EKS_CLUSTER_POLICY = "AmazonEKSClusterPolicy"
EKS_SERVICE_POLICY = "AmazonEKSServicePolicy"

EKS_SERVICE_PRINCIPAL = "eks.amazonaws.com"


def managed_policy_arn(policy_name: str, partition: str = "aws") -> str:
    """
    ARN of an AWS managed policy

    :param policy_name: Managed policy name (AmazonEKSClusterPolicy)
    :param partition: AWS partition (aws, aws-cn, aws-us-gov)
    :return: Policy ARN
    """
    return f"arn:{partition}:iam::aws:policy/{policy_name}"


def eks_cluster_policy_arns(partition: str = "aws") -> list[str]:
    """Managed policies for an EKS control plane role, cluster policy first"""
    return [managed_policy_arn(name, partition) for name in (EKS_CLUSTER_POLICY, EKS_SERVICE_POLICY)]


def resolve_policy_arn(policy: str, partition: str = "aws") -> str:
    """
    Accept either a full policy ARN or the name of an AWS managed policy

    :param policy: ``arn:...`` or ``AmazonEKSClusterPolicy``
    :param partition: AWS partition used for bare names
    :return: Policy ARN
    """
    return policy if policy.startswith("arn:") else managed_policy_arn(policy, partition)
