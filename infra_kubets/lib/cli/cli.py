import json
import logging

import boto3
import click
from click_option_group import optgroup, RequiredMutuallyExclusiveOptionGroup

from infra_kubets.lib.iam import (
    ASSUME_ROLE,
    EKS_SERVICE_PRINCIPAL,
    SerializationError,
    build_service_trust_policy,
    serialize_trust_policy,
)

logger = logging.getLogger(__name__)


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def get_iam_client():
    return boto3.client("iam")


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")


@cli.command()
@click.option("--service", default=EKS_SERVICE_PRINCIPAL, show_default=True, help="Service principal to trust")
@click.option("--action", default=ASSUME_ROLE, show_default=True, help="Trust action to grant")
@click.option("--pretty", is_flag=True, help="Indent the document")
def trust_policy(service, action, pretty):
    """Print the trust policy kubets generates for a service role"""
    try:
        document = serialize_trust_policy(build_service_trust_policy(service, action))
    except SerializationError as e:
        raise click.ClickException(str(e))

    if pretty:
        document = json.dumps(json.loads(document), indent=2)

    click.echo(document)


@cli.command()
@optgroup.group(
    "Identifiers",
    cls=RequiredMutuallyExclusiveOptionGroup,
    help="The manner of identifying the role",
)
@optgroup.option("--name", help="Role name")
@optgroup.option("--arn", help="Role ARN")
def role_policies(name, arn):
    """List the managed policies attached to a role"""
    role_name = name or arn.rsplit("/", 1)[-1]

    iam = get_iam_client()

    role = iam.get_role(RoleName=role_name)["Role"]
    echo_key_value("Role", role["RoleName"])
    echo_key_value("ARN", role["Arn"])

    logger.debug("trust policy for %s is %s", role_name, role["AssumeRolePolicyDocument"])

    paginator = iam.get_paginator("list_attached_role_policies")
    attached = [
        policy["PolicyArn"]
        for page in paginator.paginate(RoleName=role_name)
        for policy in page["AttachedPolicies"]
    ]

    if not attached:
        click.echo("No managed policies attached")

    for index, policy_arn in enumerate(attached):
        echo_key_value(f"Policy {index}", policy_arn)


def run():
    exit(cli())


if __name__ == "__main__":
    run()
