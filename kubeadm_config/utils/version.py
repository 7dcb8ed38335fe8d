import re

from kubeadm_config.constants import SUPPORTED_ETCD_VERSIONS

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)")


def kubernetes_version_to_image_tag(version: str) -> str:
    """Image tags may not contain '+', so build metadata is joined with '_'."""
    return version.replace("+", "_")


def minor_version(version: str) -> int | None:
    match = _VERSION_RE.match(version)
    if not match:
        return None
    return int(match.group(2))


def etcd_supported_version(kubernetes_version: str) -> str | None:
    minor = minor_version(kubernetes_version)
    if minor is None:
        return None
    return SUPPORTED_ETCD_VERSIONS.get(minor)
