from dataclasses import replace

from kubeadm_config import constants

from .types import Etcd, LocalEtcd, MasterConfiguration


def set_defaults_master_configuration(cfg: MasterConfiguration) -> MasterConfiguration:
    api = cfg.api
    if not api.bind_port:
        api = replace(api, bind_port=constants.DEFAULT_API_BIND_PORT)

    networking = cfg.networking
    if not networking.service_subnet:
        networking = replace(networking, service_subnet=constants.DEFAULT_SERVICE_SUBNET)
    if not networking.dns_domain:
        networking = replace(networking, dns_domain=constants.DEFAULT_DNS_DOMAIN)

    node_registration = cfg.node_registration
    if not node_registration.cri_socket:
        node_registration = replace(node_registration, cri_socket=constants.DEFAULT_CRI_SOCKET)

    return replace(
        cfg,
        api=api,
        etcd=set_defaults_etcd(cfg.etcd),
        networking=networking,
        node_registration=node_registration,
        kubernetes_version=cfg.kubernetes_version or constants.DEFAULT_KUBERNETES_VERSION,
        image_repository=cfg.image_repository or constants.DEFAULT_IMAGE_REPOSITORY,
    )


def set_defaults_etcd(etcd: Etcd) -> Etcd:
    if etcd.external is not None:
        return etcd
    local = etcd.local or LocalEtcd()
    if not local.data_dir:
        local = replace(local, data_dir=constants.DEFAULT_ETCD_DATA_DIR)
    return replace(etcd, local=local)
