"""Container image references for the control plane, etcd and the cluster addons."""

from kubeadm_config import constants
from kubeadm_config.models import MasterConfiguration
from kubeadm_config.utils.host import host_architecture
from kubeadm_config.utils.version import etcd_supported_version, kubernetes_version_to_image_tag


def get_generic_image(prefix: str, image: str, tag: str) -> str:
    """Returns an architecture independent image, backed by a manifest list."""
    return f"{prefix}/{image}:{tag}"


def get_generic_arch_image(prefix: str, image: str, tag: str, arch: str | None = None) -> str:
    """Returns an image for a single architecture, the host's unless arch is given."""
    return f"{prefix}/{image}-{arch or host_architecture()}:{tag}"


def get_kube_control_plane_image_no_override(image: str, cfg: MasterConfiguration) -> str:
    """Returns the image of a control plane component, ignoring the unified control plane image.

    Upgrades use this to know what a component would normally run even when an
    override is in place.
    """
    try:
        name = constants.CONTROL_PLANE_IMAGE_NAMES[image]
    except KeyError:
        raise ValueError(f"{image!r} is not a control plane component") from None
    tag = kubernetes_version_to_image_tag(cfg.kubernetes_version)
    return get_generic_arch_image(cfg.control_plane_image_repository, name, tag, cfg.architecture)


def get_kube_control_plane_image(image: str, cfg: MasterConfiguration) -> str:
    if cfg.unified_control_plane_image:
        return cfg.unified_control_plane_image
    return get_kube_control_plane_image_no_override(image, cfg)


def get_etcd_image(cfg: MasterConfiguration) -> str:
    return _etcd_image(cfg, cfg.image_repository)


def get_all_images(cfg: MasterConfiguration) -> list[str]:
    """Returns the control plane images, plus etcd unless the etcd cluster is external.

    When a CI repository is configured every image is pulled from it.
    """
    images = [get_kube_control_plane_image(component, cfg) for component in constants.CONTROL_PLANE_COMPONENTS]
    if not cfg.etcd.is_external:
        images.append(_etcd_image(cfg, cfg.control_plane_image_repository))
    return images


def get_addon_images(cfg: MasterConfiguration) -> list[str]:
    repository = cfg.image_repository
    arch = cfg.architecture
    images = [
        get_generic_arch_image(repository, constants.KUBE_PROXY, kubernetes_version_to_image_tag(cfg.kubernetes_version), arch),
        get_generic_image(repository, constants.PAUSE_IMAGE, constants.PAUSE_VERSION),
    ]
    if cfg.feature_gates.get(constants.COREDNS_FEATURE_GATE, True):
        images.append(get_generic_image(repository, constants.COREDNS_IMAGE, constants.COREDNS_VERSION))
    else:
        images.append(get_generic_arch_image(repository, constants.KUBE_DNS_IMAGE, constants.KUBE_DNS_VERSION, arch))
    return images


def _etcd_image(cfg: MasterConfiguration, repository: str) -> str:
    local = cfg.etcd.local
    if local is not None and local.image:
        return local.image
    if local is not None and local.image_tag:
        tag = local.image_tag
    else:
        tag = etcd_supported_version(cfg.kubernetes_version) or constants.DEFAULT_ETCD_VERSION
    return get_generic_arch_image(repository, constants.ETCD, tag, cfg.architecture)
