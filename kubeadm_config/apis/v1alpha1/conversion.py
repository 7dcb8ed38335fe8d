"""Conversions between the flat v1alpha1 layout and the internal configuration.

v1alpha1 keeps every etcd setting on a single object and the node settings at
the top level. Fields that only exist internally (CI repository, architecture,
kubelet arguments, etcd image tag) are dropped when converting back.

v1alpha1 tells external etcd apart from local etcd by its endpoints alone. An
external etcd without endpoints therefore reads back as local etcd.
"""

from kubeadm_config import models
from kubeadm_config.runtime.conversion import convert_by_field_names

from . import types


def convert_to_internal(cfg: types.MasterConfiguration) -> models.MasterConfiguration:
    return models.MasterConfiguration(
        api=convert_by_field_names(cfg.api, models.API),
        etcd=_etcd_to_internal(cfg.etcd),
        networking=convert_by_field_names(cfg.networking, models.Networking),
        node_registration=models.NodeRegistrationOptions(name=cfg.node_name, cri_socket=cfg.cri_socket),
        kubernetes_version=cfg.kubernetes_version,
        image_repository=cfg.image_repository,
        unified_control_plane_image=cfg.unified_control_plane_image,
        feature_gates=dict(cfg.feature_gates),
    )


def convert_from_internal(cfg: models.MasterConfiguration) -> types.MasterConfiguration:
    return types.MasterConfiguration(
        api=convert_by_field_names(cfg.api, types.API),
        etcd=_etcd_from_internal(cfg.etcd),
        networking=convert_by_field_names(cfg.networking, types.Networking),
        kubernetes_version=cfg.kubernetes_version,
        node_name=cfg.node_registration.name,
        cri_socket=cfg.node_registration.cri_socket,
        image_repository=cfg.image_repository,
        unified_control_plane_image=cfg.unified_control_plane_image,
        feature_gates=dict(cfg.feature_gates),
    )


def _etcd_to_internal(etcd: types.Etcd) -> models.Etcd:
    if etcd.endpoints:
        return models.Etcd(
            external=models.ExternalEtcd(
                endpoints=list(etcd.endpoints),
                ca_file=etcd.ca_file,
                cert_file=etcd.cert_file,
                key_file=etcd.key_file,
            )
        )
    return models.Etcd(
        local=models.LocalEtcd(
            image=etcd.image,
            data_dir=etcd.data_dir,
            extra_args=dict(etcd.extra_args),
        )
    )


def _etcd_from_internal(etcd: models.Etcd) -> types.Etcd:
    if etcd.external is not None:
        return types.Etcd(
            endpoints=list(etcd.external.endpoints),
            ca_file=etcd.external.ca_file,
            cert_file=etcd.external.cert_file,
            key_file=etcd.external.key_file,
        )
    if etcd.local is None:
        return types.Etcd()
    return types.Etcd(
        image=etcd.local.image,
        data_dir=etcd.local.data_dir,
        extra_args=dict(etcd.local.extra_args),
    )
