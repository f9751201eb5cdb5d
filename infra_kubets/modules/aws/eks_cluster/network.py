from pulumi import ResourceOptions, ComponentResource
from pulumi_aws import ec2

from infra_kubets.lib.config import get_sysenv
from infra_kubets.lib.tags import get_tags
from .config import SubnetArgs
from .types import Network


def setup_network(
    parent: ComponentResource,
    vpc_cidr: str,
    public_subnets: list[SubnetArgs],
    private_subnets: list[SubnetArgs],
) -> Network:
    """
    Create the VPC, its internet gateway and route table, and the subnets

    Every subnet is associated with the one route table, which sends ``0.0.0.0/0`` to the internet gateway.

    :param parent: Component to create the VPC under
    :param vpc_cidr: The primary CIDR of the VPC
    :param public_subnets: Subnets that map public IPs on launch
    :param private_subnets: Subnets that don't
    :return: The materialized network
    """
    vpc = ec2.Vpc(
        "main",
        cidr_block=vpc_cidr,
        enable_dns_hostnames=True,
        enable_dns_support=True,
        tags=get_tags("vpc", get_sysenv()),
        opts=ResourceOptions(parent=parent),
    )

    igw = ec2.InternetGateway(
        "main-ig",
        vpc_id=vpc.id,
        tags=get_tags("internetgateway", get_sysenv()),
        opts=ResourceOptions(parent=vpc),
    )

    route_table = ec2.RouteTable(
        "main-rt",
        vpc_id=vpc.id,
        routes=[
            ec2.RouteTableRouteArgs(
                cidr_block="0.0.0.0/0",
                gateway_id=igw.id,
            )
        ],
        tags={**get_tags("routetable", "main"), "Name": "main-rt"},
        opts=ResourceOptions(parent=vpc),
    )

    public = [_create_subnet(vpc, route_table, subnet, is_public=True) for subnet in public_subnets]
    private = [_create_subnet(vpc, route_table, subnet, is_public=False) for subnet in private_subnets]

    return Network(vpc=vpc, route_table=route_table, public_subnets=public, private_subnets=private)


def _create_subnet(vpc: ec2.Vpc, route_table: ec2.RouteTable, config: SubnetArgs, is_public: bool) -> ec2.Subnet:
    """
    Create a subnet and associate it with the route table

    :param vpc: VPC object to create the subnet in
    :param route_table: Route table to associate
    :param config: Subnet definition
    :param is_public: Will instances in this subnet receive public IP addresses on boot?
    :return: Subnet
    """
    purpose = "public" if is_public else "private"

    subnet = ec2.Subnet(
        config.name,
        vpc_id=vpc.id,
        cidr_block=config.cidr_block,
        availability_zone=config.availability_zone,
        map_public_ip_on_launch=is_public,
        tags={**get_tags("subnet", purpose, config.availability_zone), "Name": config.name},
        opts=ResourceOptions(parent=vpc),
    )

    ec2.RouteTableAssociation(
        f"{config.name}-rta",
        subnet_id=subnet.id,
        route_table_id=route_table.id,
        opts=ResourceOptions(parent=subnet),
    )

    return subnet
