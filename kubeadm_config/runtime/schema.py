from pydantic.dataclasses import dataclass

INTERNAL_VERSION = "__internal"


@dataclass(frozen=True)
class GroupVersion:
    group: str
    version: str

    @classmethod
    def parse(cls, api_version: str) -> "GroupVersion":
        """Parses the apiVersion form, "group/version" or a bare "version" for the core group."""
        if not api_version:
            raise ValueError("empty apiVersion")
        parts = api_version.split("/")
        match parts:
            case [version]:
                return cls(group="", version=version)
            case [group, version] if group and version:
                return cls(group=group, version=version)
            case _:
                raise ValueError(f"unexpected apiVersion {api_version!r}")

    @property
    def is_internal(self) -> bool:
        return self.version == INTERNAL_VERSION

    def with_kind(self, kind: str) -> "GroupVersionKind":
        return GroupVersionKind(group=self.group, version=self.version, kind=kind)

    def internal(self) -> "GroupVersion":
        return GroupVersion(group=self.group, version=INTERNAL_VERSION)

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


@dataclass(frozen=True)
class GroupVersionKind:
    group: str
    version: str
    kind: str

    @classmethod
    def from_api_version_and_kind(cls, api_version: str, kind: str) -> "GroupVersionKind":
        return GroupVersion.parse(api_version).with_kind(kind)

    @property
    def group_version(self) -> GroupVersion:
        return GroupVersion(group=self.group, version=self.version)

    @property
    def api_version(self) -> str:
        return str(self.group_version)

    def __str__(self) -> str:
        return f"{self.api_version}, Kind={self.kind}"
