import os
from unittest.mock import MagicMock

import pytest

from kubeadm_config.models import Etcd, ExternalEtcd, MasterConfiguration
from kubeadm_config.services.images_list_service import ImagesListService
from kubeadm_config.utils.host import host_architecture

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def service():
    svc = ImagesListService(f"{ASSETS_DIR}/master-configuration-v1alpha2.yaml")
    svc.logger = MagicMock()
    return svc


def test_list_images_from_file(service):
    arch = host_architecture()
    assert service.list_images() == [
        f"registry.example.com/kube-apiserver-{arch}:v1.11.2",
        f"registry.example.com/kube-controller-manager-{arch}:v1.11.2",
        f"registry.example.com/kube-scheduler-{arch}:v1.11.2",
        f"registry.example.com/etcd-{arch}:3.2.24",
        f"registry.example.com/kube-proxy-{arch}:v1.11.2",
        "registry.example.com/pause:3.1",
        f"registry.example.com/k8s-dns-kube-dns-{arch}:1.14.10",
    ]


def test_list_images_version_override(service):
    service.kubernetes_version = "v1.12.0+build"
    images = service.list_images()
    assert images[0].endswith(":v1.12.0_build")


def test_list_images_external_etcd_and_override():
    svc = ImagesListService("unused")
    svc.logger = MagicMock()
    svc.repo = MagicMock()
    svc.repo.load_or_default.return_value = MasterConfiguration(
        image_repository="k8s.gcr.io",
        kubernetes_version="v1.11.0",
        unified_control_plane_image="hyperkube:v1.11.0",
        etcd=Etcd(external=ExternalEtcd(endpoints=["https://10.0.0.1:2379"])),
    )

    images = svc.list_images()

    assert images[:3] == ["hyperkube:v1.11.0"] * 3
    assert not any("etcd" in image for image in images)
    svc.repo.load_or_default.assert_called_once()


def test_list_images_defaults_without_file():
    svc = ImagesListService("notexistingfile")
    svc.logger = MagicMock()
    images = svc.list_images()
    assert all(image.startswith("k8s.gcr.io/") for image in images)
    assert "k8s.gcr.io/coredns:1.1.3" in images


def test_run_prints_images(service, capsys):
    service.run()
    lines = capsys.readouterr().out.splitlines()
    assert lines == service.list_images()
