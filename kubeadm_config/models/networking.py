from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class Networking:
    service_subnet: str = ""
    pod_subnet: str = ""
    dns_domain: str = ""
