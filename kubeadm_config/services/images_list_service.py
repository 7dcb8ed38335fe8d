import logging
from dataclasses import replace
from typing import override

from kubeadm_config.images import get_addon_images, get_all_images
from kubeadm_config.repositories import MasterConfigurationRepository
from kubeadm_config.services.service import Service
from kubeadm_config.utils.logging import setup_logger


class ImagesListService(Service):
    def __init__(self, config_file: str, kubernetes_version: str | None = None):
        self.repo: MasterConfigurationRepository = MasterConfigurationRepository(config_file)
        self.kubernetes_version: str | None = kubernetes_version
        self.logger: logging.Logger = setup_logger("ImagesListService")

    def list_images(self) -> list[str]:
        cfg = self.repo.load_or_default()
        if self.kubernetes_version:
            cfg = replace(cfg, kubernetes_version=self.kubernetes_version)
        self.logger.info(f"Resolving images for Kubernetes {cfg.kubernetes_version}")
        return get_all_images(cfg) + get_addon_images(cfg)

    @override
    def run(self) -> None:
        for image in self.list_images():
            print(image)
