from dataclasses import field

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class LocalEtcd:
    image: str = ""
    image_tag: str = ""
    data_dir: str = ""
    extra_args: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ExternalEtcd:
    endpoints: list[str] = field(default_factory=list)
    ca_file: str = ""
    cert_file: str = ""
    key_file: str = ""


@dataclass(frozen=True)
class Etcd:
    local: LocalEtcd | None = None
    external: ExternalEtcd | None = None

    @property
    def is_external(self) -> bool:
        return self.external is not None
