from dataclasses import field

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from pydantic.dataclasses import dataclass

# Serialized field names are camelCase, Python attributes stay snake_case
WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True, config=WIRE_CONFIG)
class API:
    advertise_address: str = ""
    control_plane_endpoint: str = ""
    bind_port: int = 0


@dataclass(frozen=True, config=WIRE_CONFIG)
class LocalEtcd:
    image: str = ""
    image_tag: str = ""
    data_dir: str = ""
    extra_args: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, config=WIRE_CONFIG)
class ExternalEtcd:
    endpoints: list[str] = field(default_factory=list)
    ca_file: str = ""
    cert_file: str = ""
    key_file: str = ""


@dataclass(frozen=True, config=WIRE_CONFIG)
class Etcd:
    local: LocalEtcd | None = None
    external: ExternalEtcd | None = None


@dataclass(frozen=True, config=WIRE_CONFIG)
class Networking:
    service_subnet: str = ""
    pod_subnet: str = ""
    dns_domain: str = ""


@dataclass(frozen=True, config=WIRE_CONFIG)
class NodeRegistrationOptions:
    name: str = ""
    cri_socket: str = ""
    kubelet_extra_args: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, config=WIRE_CONFIG)
class MasterConfiguration:
    api: API = field(default_factory=API)
    etcd: Etcd = field(default_factory=Etcd)
    networking: Networking = field(default_factory=Networking)
    node_registration: NodeRegistrationOptions = field(default_factory=NodeRegistrationOptions)
    kubernetes_version: str = ""
    image_repository: str = ""
    ci_image_repository: str = ""
    unified_control_plane_image: str = ""
    feature_gates: dict[str, bool] = field(default_factory=dict)
    architecture: str | None = None
