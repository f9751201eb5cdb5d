from dataclasses import dataclass

from pulumi_aws import ec2


@dataclass
class Network:
    """
    Everything the cluster needs from the network, kept together so the cluster and the exports don't have to dig
    through the VPC's children.
    """

    vpc: ec2.Vpc
    route_table: ec2.RouteTable
    public_subnets: list[ec2.Subnet]
    private_subnets: list[ec2.Subnet]

    @property
    def subnets(self) -> list[ec2.Subnet]:
        return self.public_subnets + self.private_subnets
