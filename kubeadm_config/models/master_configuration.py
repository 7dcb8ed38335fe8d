from dataclasses import field

from pydantic.dataclasses import dataclass

from .api import API
from .etcd import Etcd
from .networking import Networking
from .node_registration import NodeRegistrationOptions


@dataclass(frozen=True)
class MasterConfiguration:
    """Internal, version independent form of the control plane configuration."""

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

    @property
    def control_plane_image_repository(self) -> str:
        if self.ci_image_repository:
            return self.ci_image_repository
        return self.image_repository
