from dataclasses import replace

from kubeadm_config import constants

from .types import MasterConfiguration


def set_defaults_master_configuration(cfg: MasterConfiguration) -> MasterConfiguration:
    api = cfg.api
    if not api.bind_port:
        api = replace(api, bind_port=constants.DEFAULT_API_BIND_PORT)

    networking = cfg.networking
    if not networking.service_subnet:
        networking = replace(networking, service_subnet=constants.DEFAULT_SERVICE_SUBNET)
    if not networking.dns_domain:
        networking = replace(networking, dns_domain=constants.DEFAULT_DNS_DOMAIN)

    etcd = cfg.etcd
    if not etcd.endpoints and not etcd.data_dir:
        etcd = replace(etcd, data_dir=constants.DEFAULT_ETCD_DATA_DIR)

    return replace(
        cfg,
        api=api,
        etcd=etcd,
        networking=networking,
        kubernetes_version=cfg.kubernetes_version or constants.DEFAULT_KUBERNETES_VERSION,
        cri_socket=cfg.cri_socket or constants.DEFAULT_CRI_SOCKET,
        image_repository=cfg.image_repository or constants.DEFAULT_IMAGE_REPOSITORY,
    )
