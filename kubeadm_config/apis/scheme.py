from kubeadm_config import constants, models
from kubeadm_config.runtime import INTERNAL_VERSION, GroupVersion, Scheme

from . import v1alpha1, v1alpha2

INTERNAL_GROUP_VERSION = GroupVersion(group=constants.GROUP_NAME, version=INTERNAL_VERSION)


def add_internal_types(scheme: Scheme) -> None:
    scheme.add_known_types(INTERNAL_GROUP_VERSION, models.MasterConfiguration)


def new_scheme() -> Scheme:
    """Builds a scheme with every known version registered, already frozen."""
    scheme = Scheme(name="kubeadm scheme")
    add_internal_types(scheme)
    v1alpha1.add_to_scheme(scheme)
    v1alpha2.add_to_scheme(scheme)
    scheme.freeze()
    return scheme


SCHEME = new_scheme()
