import logging
import sys
from typing import override

from kubeadm_config.apis import v1alpha2
from kubeadm_config.repositories import MasterConfigurationRepository
from kubeadm_config.runtime import GroupVersion
from kubeadm_config.services.service import Service
from kubeadm_config.utils.logging import setup_logger
from kubeadm_config.utils.marshal import marshal_to_yaml


class ConfigMigrateService(Service):
    def __init__(
        self,
        old_config: str,
        new_config: str | None = None,
        to_version: GroupVersion = v1alpha2.SCHEME_GROUP_VERSION,
    ):
        self.old_repo: MasterConfigurationRepository = MasterConfigurationRepository(old_config)
        self.new_repo: MasterConfigurationRepository | None = (
            MasterConfigurationRepository(new_config) if new_config else None
        )
        self.to_version: GroupVersion = to_version
        self.logger: logging.Logger = setup_logger("ConfigMigrateService")

    @override
    def run(self) -> None:
        cfg = self.old_repo.find()
        if cfg is None:
            raise FileNotFoundError(f"Configuration file {self.old_repo.file_path} does not exist")

        if self.new_repo is None:
            sys.stdout.write(marshal_to_yaml(cfg, self.to_version).decode("utf-8"))
            return

        self.new_repo.save(cfg, self.to_version)
        self.logger.info(f"Migrated {self.old_repo.file_path} to {self.to_version} in {self.new_repo.file_path}")
