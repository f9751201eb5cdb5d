from pulumi import ResourceOptions, ComponentResource, get_stack
from pulumi_aws import s3

from infra_kubets.lib.s3 import generate_bucket_name
from infra_kubets.lib.tags import get_tags


def create_bucket(parent: ComponentResource, name: str) -> s3.Bucket:
    """
    Create a private, versioned bucket

    :param parent: Component to create the bucket under
    :param name: Bucket name without the sysenv prefix
    :return: Bucket
    """
    bucket_name = generate_bucket_name(name)

    bucket = s3.Bucket(
        name,
        bucket=bucket_name,
        versioning=s3.BucketVersioningArgs(enabled=True),
        tags=get_tags(get_stack(), "bucket", name),
        opts=ResourceOptions(parent=parent),
    )

    s3.BucketPublicAccessBlock(
        name,
        bucket=bucket.id,
        block_public_acls=True,
        block_public_policy=True,
        ignore_public_acls=True,
        restrict_public_buckets=True,
        opts=ResourceOptions(parent=bucket),
    )

    return bucket
