import io
import logging
import re
from typing import Any

from pydantic import ValidationError
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from kubeadm_config.apis.scheme import SCHEME
from kubeadm_config.runtime import (
    DeserializationError,
    GroupVersion,
    GroupVersionKind,
    Scheme,
    SchemeError,
    SerializationError,
)
from kubeadm_config.runtime.conversion import type_adapter
from kubeadm_config.utils.yaml_loader import get_yaml_instance

logger = logging.getLogger(__name__)

_DOCUMENT_SEPARATOR = re.compile(r"^---(?:[ \t].*)?$", re.MULTILINE)
_TYPE_KEYS = ("apiVersion", "kind")


def marshal_to_yaml(obj: Any, group_version: GroupVersion) -> bytes:
    return marshal_to_yaml_for_scheme(obj, group_version, SCHEME)


def unmarshal_from_yaml(data: bytes, group_version: GroupVersion) -> Any:
    return unmarshal_from_yaml_for_scheme(data, group_version, SCHEME)


def marshal_to_yaml_for_scheme(obj: Any, group_version: GroupVersion, scheme: Scheme) -> bytes:
    """Encodes obj as YAML in the given version.

    The object may be in any version registered with the scheme, it is
    converted before encoding. Fields equal to their defaults are left out.
    """
    if group_version.is_internal:
        raise SerializationError(f"refusing to encode {type(obj).__qualname__} to internal version {group_version}")
    try:
        versioned = scheme.convert_to_version(obj, group_version)
        gvk = scheme.object_kind(versioned)
    except SchemeError as e:
        raise SerializationError(f"unable to encode {type(obj).__qualname__} as {group_version}: {e}") from e

    body = type_adapter(type(versioned)).dump_python(versioned, mode="json", by_alias=True, exclude_defaults=True)
    document = CommentedMap([("apiVersion", gvk.api_version), ("kind", gvk.kind)])
    document.update(body)

    stream = io.StringIO()
    try:
        get_yaml_instance().dump(document, stream)
    except YAMLError as e:
        raise SerializationError(f"unable to encode {gvk}: {e}", gvk) from e
    return stream.getvalue().encode("utf-8")


def unmarshal_from_yaml_for_scheme(data: bytes, group_version: GroupVersion, scheme: Scheme) -> Any:
    """Decodes a YAML document and returns it converted to group_version.

    group_version may be an external version or the internal one.
    """
    document = _load_document(data)
    gvk = _document_kind(document)
    try:
        cls = scheme.type_for(gvk)
    except SchemeError as e:
        raise DeserializationError(f"unable to decode {gvk}: {e}", gvk) from e

    body = {key: value for key, value in document.items() if key not in _TYPE_KEYS}
    try:
        obj = type_adapter(cls).validate_python(body)
    except ValidationError as e:
        raise DeserializationError(f"invalid {gvk}: {e}", gvk) from e

    obj = scheme.default(obj)
    try:
        return scheme.convert_to_version(obj, group_version)
    except SchemeError as e:
        raise DeserializationError(f"unable to convert {gvk} to {group_version}: {e}", gvk) from e


def split_yaml_documents(data: bytes) -> dict[GroupVersionKind, bytes]:
    """Splits a multi document YAML stream and indexes every document by its kind.

    A line starting with --- ends the previous document. Comments or tags on
    the separator line are discarded.
    """
    text = _decode(data)
    documents: dict[GroupVersionKind, bytes] = {}
    for chunk in _DOCUMENT_SEPARATOR.split(text):
        if not chunk.strip():
            continue
        raw = chunk.encode("utf-8")
        document = _load_document(raw)
        gvk = _document_kind(document)
        if gvk in documents:
            raise DeserializationError(f"invalid configuration: {gvk} is specified twice", gvk)
        documents[gvk] = raw
    logger.debug(f"Found {len(documents)} documents: {', '.join(str(k) for k in documents)}")
    return documents


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DeserializationError(f"input is not valid UTF-8: {e}") from e


def _load_document(data: bytes) -> dict:
    try:
        document = get_yaml_instance("safe").load(_decode(data))
    except YAMLError as e:
        raise DeserializationError(f"malformed YAML: {e}") from e
    if not isinstance(document, dict):
        raise DeserializationError(f"expected a YAML mapping, got {type(document).__name__}")
    return document


def _document_kind(document: dict) -> GroupVersionKind:
    api_version = document.get("apiVersion")
    kind = document.get("kind")
    if not isinstance(api_version, str) or not isinstance(kind, str) or not api_version or not kind:
        raise DeserializationError("document is missing apiVersion or kind")
    try:
        return GroupVersionKind.from_api_version_and_kind(api_version, kind)
    except ValueError as e:
        raise DeserializationError(f"invalid apiVersion {api_version!r}: {e}") from e
