from .api import API
from .etcd import Etcd, ExternalEtcd, LocalEtcd
from .master_configuration import MasterConfiguration
from .networking import Networking
from .node_registration import NodeRegistrationOptions

__all__ = [
    "API",
    "Etcd",
    "ExternalEtcd",
    "LocalEtcd",
    "MasterConfiguration",
    "Networking",
    "NodeRegistrationOptions",
]
