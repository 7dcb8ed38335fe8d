import logging
from typing import Any, Callable

from .errors import ConversionError, NotRegisteredError, SchemeFrozenError
from .schema import GroupVersion, GroupVersionKind

logger = logging.getLogger(__name__)

ConversionFunc = Callable[[Any], Any]
DefaultingFunc = Callable[[Any], Any]


class Scheme:
    """Registry of versioned types, their defaulting and their conversions.

    Populate it once at startup and call freeze(); a frozen scheme is only read
    from and can be shared freely.
    """

    def __init__(self, name: str = "scheme"):
        self.name: str = name
        self._gvk_to_type: dict[GroupVersionKind, type] = {}
        self._type_to_gvk: dict[type, GroupVersionKind] = {}
        self._conversions: dict[tuple[type, type], ConversionFunc] = {}
        self._defaulters: dict[type, DefaultingFunc] = {}
        self._frozen: bool = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise SchemeFrozenError(f"{self.name} is frozen and cannot be modified")

    def add_known_types(self, group_version: GroupVersion, *types: type) -> None:
        self._ensure_mutable()
        for cls in types:
            gvk = group_version.with_kind(cls.__name__)
            existing = self._gvk_to_type.get(gvk)
            if existing is not None and existing is not cls:
                raise ValueError(f"{gvk} is already registered to {existing.__qualname__}")
            self._gvk_to_type[gvk] = cls
            self._type_to_gvk[cls] = gvk
            logger.debug(f"Registered {cls.__qualname__} as {gvk}")

    def add_conversion_func(self, src: type, dst: type, fn: ConversionFunc) -> None:
        self._ensure_mutable()
        self._conversions[(src, dst)] = fn

    def add_defaulting_func(self, cls: type, fn: DefaultingFunc) -> None:
        self._ensure_mutable()
        self._defaulters[cls] = fn

    def recognizes(self, gvk: GroupVersionKind) -> bool:
        return gvk in self._gvk_to_type

    def known_kinds(self, group_version: GroupVersion) -> dict[str, type]:
        return {
            gvk.kind: cls
            for gvk, cls in self._gvk_to_type.items()
            if gvk.group_version == group_version
        }

    def type_for(self, gvk: GroupVersionKind) -> type:
        try:
            return self._gvk_to_type[gvk]
        except KeyError:
            raise NotRegisteredError(f"no kind {gvk.kind!r} is registered for version {gvk.api_version!r} in {self.name}") from None

    def object_kind(self, obj: Any) -> GroupVersionKind:
        try:
            return self._type_to_gvk[type(obj)]
        except KeyError:
            raise NotRegisteredError(f"{type(obj).__qualname__} is not registered in {self.name}") from None

    def default(self, obj: Any) -> Any:
        fn = self._defaulters.get(type(obj))
        if fn is None:
            return obj
        return fn(obj)

    def convert_to_version(self, obj: Any, target: GroupVersion) -> Any:
        source = self.object_kind(obj)
        if source.group_version == target:
            return obj
        if source.group != target.group:
            raise ConversionError(f"cannot convert {source} to group {target.group!r}")

        dst = self.type_for(target.with_kind(source.kind))
        direct = self._conversions.get((type(obj), dst))
        if direct is not None:
            return direct(obj)

        # Go through the hub when there is no direct conversion
        hub = self.type_for(source.group_version.internal().with_kind(source.kind))
        to_hub = obj if type(obj) is hub else self._convert(obj, hub)
        if dst is hub:
            return to_hub
        return self._convert(to_hub, dst)

    def _convert(self, obj: Any, dst: type) -> Any:
        fn = self._conversions.get((type(obj), dst))
        if fn is None:
            raise ConversionError(f"no conversion registered from {type(obj).__qualname__} to {dst.__qualname__}")
        return fn(obj)
