from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class API:
    advertise_address: str = ""
    control_plane_endpoint: str = ""
    bind_port: int = 0
