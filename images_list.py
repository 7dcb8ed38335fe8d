#!/usr/bin/env python3
import argparse
import os
import sys
from kubeadm_config.services.images_list_service import ImagesListService
from kubeadm_config.utils.logging import setup_logger

DEFAULT_CONFIG_FILE = "/etc/kubernetes/kubeadm-config.yaml"


def main():
    parser = argparse.ArgumentParser(description="Print the container images a control plane node uses")
    parser.add_argument('--config', help='Path to a MasterConfiguration file')
    parser.add_argument('--kubernetes-version', help='Resolve images for this Kubernetes version instead of the configured one')
    args = parser.parse_args()
    logger = setup_logger("ImagesList")
    try:
        config_file = args.config or os.environ.get("KUBEADM_CONFIG", DEFAULT_CONFIG_FILE)
        logger.info(f"Listing images with config file: {config_file}")
        service = ImagesListService(config_file, args.kubernetes_version)
        service.run()
        return 0
    except Exception as e:
        logger.error(f"Listing images failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
