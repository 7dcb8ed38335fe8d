from dataclasses import field

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class NodeRegistrationOptions:
    name: str = ""
    cri_socket: str = ""
    kubelet_extra_args: dict[str, str] = field(default_factory=dict)
