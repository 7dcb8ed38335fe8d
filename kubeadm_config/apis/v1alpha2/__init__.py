from .register import SCHEME_GROUP_VERSION, add_to_scheme
from .types import (
    API,
    Etcd,
    ExternalEtcd,
    LocalEtcd,
    MasterConfiguration,
    Networking,
    NodeRegistrationOptions,
)

__all__ = [
    "API",
    "Etcd",
    "ExternalEtcd",
    "LocalEtcd",
    "MasterConfiguration",
    "Networking",
    "NodeRegistrationOptions",
    "SCHEME_GROUP_VERSION",
    "add_to_scheme",
]
