import re

_camel_boundary = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def kebab_from_snake(v: str) -> str:
    """Convert string from snake to kebab case

    :param v: String in snake case
    :return: String in kebab case
    """
    return "-".join(v.split("_"))


def kebab_from_camel(v: str) -> str:
    """Convert string from camel case to kebab case

    Acronyms are kept together: ``AmazonEKSClusterPolicy`` becomes ``amazon-eks-cluster-policy``.

    :param v: String in camel case
    :return: String in kebab case
    """
    return _camel_boundary.sub("-", v).replace("_", "-").lower()
