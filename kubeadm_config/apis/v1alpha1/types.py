from dataclasses import field

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from pydantic.dataclasses import dataclass

WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True, config=WIRE_CONFIG)
class API:
    advertise_address: str = ""
    control_plane_endpoint: str = ""
    bind_port: int = 0


@dataclass(frozen=True, config=WIRE_CONFIG)
class Etcd:
    # A non-empty endpoint list means the etcd cluster is external
    endpoints: list[str] = field(default_factory=list)
    ca_file: str = ""
    cert_file: str = ""
    key_file: str = ""
    data_dir: str = ""
    extra_args: dict[str, str] = field(default_factory=dict)
    image: str = ""


@dataclass(frozen=True, config=WIRE_CONFIG)
class Networking:
    service_subnet: str = ""
    pod_subnet: str = ""
    dns_domain: str = ""


@dataclass(frozen=True, config=WIRE_CONFIG)
class MasterConfiguration:
    api: API = field(default_factory=API)
    etcd: Etcd = field(default_factory=Etcd)
    networking: Networking = field(default_factory=Networking)
    kubernetes_version: str = ""
    node_name: str = ""
    cri_socket: str = ""
    image_repository: str = ""
    unified_control_plane_image: str = ""
    feature_gates: dict[str, bool] = field(default_factory=dict)
