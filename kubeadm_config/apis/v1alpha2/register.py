from kubeadm_config import constants, models
from kubeadm_config.runtime import GroupVersion, Scheme

from . import conversion, defaults, types

SCHEME_GROUP_VERSION = GroupVersion(group=constants.GROUP_NAME, version="v1alpha2")


def add_to_scheme(scheme: Scheme) -> None:
    scheme.add_known_types(SCHEME_GROUP_VERSION, types.MasterConfiguration)
    scheme.add_defaulting_func(types.MasterConfiguration, defaults.set_defaults_master_configuration)
    scheme.add_conversion_func(types.MasterConfiguration, models.MasterConfiguration, conversion.convert_to_internal)
    scheme.add_conversion_func(models.MasterConfiguration, types.MasterConfiguration, conversion.convert_from_internal)
