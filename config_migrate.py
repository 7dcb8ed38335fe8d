#!/usr/bin/env python3
import argparse
import os
import sys
from kubeadm_config.apis import v1alpha2
from kubeadm_config.runtime import GroupVersion
from kubeadm_config.services.config_migrate_service import ConfigMigrateService
from kubeadm_config.utils.logging import setup_logger


def main():
    parser = argparse.ArgumentParser(description="Rewrite a configuration file in a newer API version")
    parser.add_argument('--old-config', help='Configuration file to read, in any supported version')
    parser.add_argument('--new-config', help='Where to write the migrated file. Printed to stdout when omitted')
    parser.add_argument('--to-version', default=str(v1alpha2.SCHEME_GROUP_VERSION), help='Target apiVersion')
    args = parser.parse_args()
    logger = setup_logger("ConfigMigrate")
    try:
        old_config = args.old_config or os.environ.get("KUBEADM_CONFIG")
        if not old_config:
            raise ValueError("--old-config or KUBEADM_CONFIG is required")
        logger.info(f"Migrating {old_config} to {args.to_version}")
        service = ConfigMigrateService(old_config, args.new_config, GroupVersion.parse(args.to_version))
        service.run()
        return 0
    except Exception as e:
        logger.error(f"Config migration failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
