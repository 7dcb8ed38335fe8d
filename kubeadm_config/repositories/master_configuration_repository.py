import logging
import os

from kubeadm_config import models
from kubeadm_config.apis import v1alpha2
from kubeadm_config.apis.scheme import INTERNAL_GROUP_VERSION, SCHEME
from kubeadm_config.runtime import GroupVersion, Scheme
from kubeadm_config.utils.marshal import (
    marshal_to_yaml_for_scheme,
    split_yaml_documents,
    unmarshal_from_yaml_for_scheme,
)

logger = logging.getLogger(__name__)

MASTER_CONFIGURATION_KIND = "MasterConfiguration"


class MasterConfigurationRepository:
    def __init__(self, file_path: str, scheme: Scheme = SCHEME):
        self.file_path: str = file_path
        self.scheme: Scheme = scheme

    def find(self) -> models.MasterConfiguration | None:
        if not os.path.isfile(self.file_path):
            return None
        with open(self.file_path, "rb") as f:
            data = f.read()
        try:
            documents = split_yaml_documents(data)
            raw = next(
                (doc for gvk, doc in documents.items() if gvk.kind == MASTER_CONFIGURATION_KIND),
                None,
            )
            if raw is None:
                raise ValueError(f"no {MASTER_CONFIGURATION_KIND} found")
            obj = unmarshal_from_yaml_for_scheme(raw, INTERNAL_GROUP_VERSION, self.scheme)
        except ValueError as e:
            raise ValueError(f"Invalid configuration file {self.file_path}: {e}") from e

        if not isinstance(obj, models.MasterConfiguration):
            raise TypeError(f"{self.file_path} decoded to {type(obj).__qualname__}, expected MasterConfiguration")
        return obj

    def load_or_default(self) -> models.MasterConfiguration:
        cfg = self.find()
        if cfg is not None:
            return cfg
        logger.info(f"No configuration at {self.file_path}, using defaults")
        defaulted = self.scheme.default(v1alpha2.MasterConfiguration())
        return self.scheme.convert_to_version(defaulted, INTERNAL_GROUP_VERSION)

    def save(self, cfg: models.MasterConfiguration, group_version: GroupVersion = v1alpha2.SCHEME_GROUP_VERSION) -> bool:
        data = marshal_to_yaml_for_scheme(cfg, group_version, self.scheme)
        try:
            with open(self.file_path, "wb") as f:
                f.write(data)
            return True
        except OSError as e:
            raise Exception(f"Error writing configuration: {e}") from e
