import os
import shutil

import pytest

from kubeadm_config import constants, models
from kubeadm_config.apis import v1alpha1
from kubeadm_config.repositories import MasterConfigurationRepository

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


def copy_asset(name, tmp_path):
    dest_file = tmp_path / name
    shutil.copy(os.path.join(ASSETS_DIR, name), dest_file)
    return dest_file


@pytest.fixture
def v1alpha2_file(tmp_path):
    return copy_asset("master-configuration-v1alpha2.yaml", tmp_path)


@pytest.fixture
def v1alpha1_file(tmp_path):
    return copy_asset("master-configuration-v1alpha1.yaml", tmp_path)


def test_find_file_not_exists():
    repo = MasterConfigurationRepository("notexistingfile")
    assert repo.find() is None


def test_find_v1alpha2(v1alpha2_file):
    cfg = MasterConfigurationRepository(str(v1alpha2_file)).find()

    assert isinstance(cfg, models.MasterConfiguration)
    assert cfg.api.advertise_address == "10.100.0.1"
    assert cfg.api.bind_port == 4332
    assert cfg.kubernetes_version == "v1.11.2"
    assert cfg.image_repository == "registry.example.com"
    assert cfg.etcd.local.image_tag == "3.2.24"
    assert cfg.networking.pod_subnet == "10.100.1.0/24"
    assert cfg.networking.dns_domain == constants.DEFAULT_DNS_DOMAIN
    assert cfg.node_registration.name == "testNode"
    assert cfg.feature_gates == {"CoreDNS": False}


def test_find_v1alpha1(v1alpha1_file):
    cfg = MasterConfigurationRepository(str(v1alpha1_file)).find()

    assert cfg.etcd.is_external
    assert cfg.etcd.external.endpoints == ["https://10.0.0.1:2379", "https://10.0.0.2:2379"]
    assert cfg.etcd.external.ca_file == "/etc/etcd/ca.crt"
    assert cfg.node_registration.name == "master-0"
    assert cfg.node_registration.cri_socket == constants.DEFAULT_CRI_SOCKET
    assert cfg.unified_control_plane_image == "registry.example.com/hyperkube:v1.10.5"


def test_find_in_multi_document_file(tmp_path):
    cfg = MasterConfigurationRepository(str(copy_asset("multi-document.yaml", tmp_path))).find()
    assert cfg.kubernetes_version == "v1.12.0"


def test_find_without_master_configuration(tmp_path):
    bad_file = tmp_path / "kubelet.yaml"
    bad_file.write_text("apiVersion: kubelet.config.k8s.io/v1beta1\nkind: KubeletConfiguration\n")

    repo = MasterConfigurationRepository(str(bad_file))
    with pytest.raises(ValueError, match="no MasterConfiguration found"):
        repo.find()


def test_invalid_configuration_file(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("apiVersion: kubeadm.k8s.io/v1alpha2\nkind: MasterConfiguration\napi: [1, 2]\n")

    repo = MasterConfigurationRepository(str(bad_file))
    with pytest.raises(ValueError, match="Invalid configuration file"):
        repo.find()


def test_load_or_default_without_file():
    cfg = MasterConfigurationRepository("notexistingfile").load_or_default()

    assert isinstance(cfg, models.MasterConfiguration)
    assert cfg.image_repository == constants.DEFAULT_IMAGE_REPOSITORY
    assert cfg.kubernetes_version == constants.DEFAULT_KUBERNETES_VERSION
    assert cfg.etcd.local is not None


def test_load_or_default_prefers_file(v1alpha2_file):
    cfg = MasterConfigurationRepository(str(v1alpha2_file)).load_or_default()
    assert cfg.image_repository == "registry.example.com"


def test_save_and_find(tmp_path, v1alpha2_file):
    original = MasterConfigurationRepository(str(v1alpha2_file)).find()
    repo = MasterConfigurationRepository(str(tmp_path / "saved.yaml"))

    assert repo.save(original)
    assert repo.find() == original


def test_save_older_version(tmp_path, v1alpha1_file):
    original = MasterConfigurationRepository(str(v1alpha1_file)).find()
    target = tmp_path / "saved.yaml"
    repo = MasterConfigurationRepository(str(target))

    assert repo.save(original, v1alpha1.SCHEME_GROUP_VERSION)
    assert target.read_text().startswith("apiVersion: kubeadm.k8s.io/v1alpha1\n")
    assert repo.find() == original
