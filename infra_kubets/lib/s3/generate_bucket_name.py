import hashlib

from ..config import get_sysenv, get_purpose, get_phase


def generate_bucket_name(name: str) -> str:
    """
    Globally unique bucket name for this sysenv

    ``{purpose}-{phase}-{last 5 of md5(sysenv)}-{name}``, e.g. ``sandbox-dev-3f1a2-my-bucket``

    :param name: Friendly bucket name
    :return: Bucket name
    """
    sysenv_hash = hashlib.md5(get_sysenv().encode("utf-8")).hexdigest()
    return f"{get_purpose()}-{get_phase()}-{sysenv_hash[-5:]}-{name}"
