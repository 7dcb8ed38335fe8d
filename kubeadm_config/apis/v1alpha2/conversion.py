from kubeadm_config import models
from kubeadm_config.runtime.conversion import convert_by_field_names

from . import types


def convert_to_internal(cfg: types.MasterConfiguration) -> models.MasterConfiguration:
    return convert_by_field_names(cfg, models.MasterConfiguration)


def convert_from_internal(cfg: models.MasterConfiguration) -> types.MasterConfiguration:
    return convert_by_field_names(cfg, types.MasterConfiguration)
