import pytest

from kubeadm_config import models
from kubeadm_config.apis import v1alpha1, v1alpha2
from kubeadm_config.apis.scheme import INTERNAL_GROUP_VERSION, SCHEME, add_internal_types
from kubeadm_config.runtime import (
    ConversionError,
    GroupVersion,
    NotRegisteredError,
    Scheme,
    SchemeFrozenError,
)


@pytest.fixture
def scheme():
    scheme = Scheme(name="test scheme")
    add_internal_types(scheme)
    v1alpha1.add_to_scheme(scheme)
    v1alpha2.add_to_scheme(scheme)
    return scheme


def test_object_kind(scheme):
    gvk = scheme.object_kind(v1alpha2.MasterConfiguration())
    assert gvk == v1alpha2.SCHEME_GROUP_VERSION.with_kind("MasterConfiguration")
    assert scheme.type_for(gvk) is v1alpha2.MasterConfiguration
    assert scheme.recognizes(gvk)


def test_object_kind_unregistered(scheme):
    with pytest.raises(NotRegisteredError):
        scheme.object_kind(object())


def test_type_for_unknown_kind(scheme):
    gvk = v1alpha2.SCHEME_GROUP_VERSION.with_kind("NodeConfiguration")
    assert not scheme.recognizes(gvk)
    with pytest.raises(NotRegisteredError, match="NodeConfiguration"):
        scheme.type_for(gvk)


def test_known_kinds(scheme):
    assert scheme.known_kinds(v1alpha1.SCHEME_GROUP_VERSION) == {"MasterConfiguration": v1alpha1.MasterConfiguration}


def test_default_without_defaulter_returns_object(scheme):
    cfg = models.MasterConfiguration()
    assert scheme.default(cfg) is cfg


def test_convert_to_same_version_is_identity(scheme):
    cfg = v1alpha2.MasterConfiguration()
    assert scheme.convert_to_version(cfg, v1alpha2.SCHEME_GROUP_VERSION) is cfg


def test_convert_between_versions_through_hub(scheme):
    old = v1alpha1.MasterConfiguration(node_name="master-0", kubernetes_version="v1.10.0")
    new = scheme.convert_to_version(old, v1alpha2.SCHEME_GROUP_VERSION)
    assert isinstance(new, v1alpha2.MasterConfiguration)
    assert new.node_registration.name == "master-0"
    assert new.kubernetes_version == "v1.10.0"


def test_convert_to_internal(scheme):
    internal = scheme.convert_to_version(v1alpha2.MasterConfiguration(image_repository="repo"), INTERNAL_GROUP_VERSION)
    assert isinstance(internal, models.MasterConfiguration)
    assert internal.image_repository == "repo"


def test_convert_to_other_group(scheme):
    with pytest.raises(ConversionError):
        scheme.convert_to_version(v1alpha2.MasterConfiguration(), GroupVersion(group="other.io", version="v1"))


def test_convert_without_conversion_func():
    scheme = Scheme()
    add_internal_types(scheme)
    scheme.add_known_types(v1alpha2.SCHEME_GROUP_VERSION, v1alpha2.MasterConfiguration)
    with pytest.raises(ConversionError, match="no conversion registered"):
        scheme.convert_to_version(v1alpha2.MasterConfiguration(), INTERNAL_GROUP_VERSION)


def test_conflicting_registration(scheme):
    with pytest.raises(ValueError, match="already registered"):
        scheme.add_known_types(v1alpha2.SCHEME_GROUP_VERSION, v1alpha1.MasterConfiguration)


def test_frozen_scheme_rejects_registration(scheme):
    scheme.freeze()
    assert scheme.frozen
    with pytest.raises(SchemeFrozenError):
        v1alpha2.add_to_scheme(scheme)


def test_default_scheme_is_frozen():
    assert SCHEME.frozen
    assert SCHEME.recognizes(v1alpha1.SCHEME_GROUP_VERSION.with_kind("MasterConfiguration"))
    assert SCHEME.recognizes(v1alpha2.SCHEME_GROUP_VERSION.with_kind("MasterConfiguration"))
