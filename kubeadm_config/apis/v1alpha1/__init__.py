from .register import SCHEME_GROUP_VERSION, add_to_scheme
from .types import API, Etcd, MasterConfiguration, Networking

__all__ = [
    "API",
    "Etcd",
    "MasterConfiguration",
    "Networking",
    "SCHEME_GROUP_VERSION",
    "add_to_scheme",
]
