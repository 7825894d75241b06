# tests/generator/test_artifact_manifest.py
"""Testes do Artifact: imutabilidade, manifest ConfigMap e hash."""

import base64

import pytest

from kubeconfig_kit.generator.artifact import HASH_SUFFIX_LENGTH, Artifact


def test_artifact_data_is_read_only():
    source = {"a": b"1"}
    artifact = Artifact(name="cfg", data=source)

    with pytest.raises(TypeError):
        artifact.data["b"] = b"2"

    source["b"] = b"2"
    assert "b" not in artifact.data


def test_manifest_splits_text_and_binary():
    artifact = Artifact(name="cfg", data={"text": "olá".encode("utf-8"), "bin": b"\xff\xfe\x00"})
    manifest = artifact.to_manifest()

    assert manifest["apiVersion"] == "v1"
    assert manifest["kind"] == "ConfigMap"
    assert manifest["data"] == {"text": "olá"}
    assert manifest["binaryData"] == {"bin": base64.b64encode(b"\xff\xfe\x00").decode("ascii")}


def test_manifest_omits_empty_sections():
    manifest = Artifact(name="cfg", data={"a": b"1"}).to_manifest()
    assert "binaryData" not in manifest


def test_content_hash_is_stable_and_order_independent():
    a = Artifact(name="cfg", data={"x": b"1", "y": b"2"})
    b = Artifact(name="cfg", data={"y": b"2", "x": b"1"})
    assert a.content_hash() == b.content_hash()
    assert len(a.content_hash()) == 64


def test_content_hash_changes_with_content():
    a = Artifact(name="cfg", data={"x": b"1"})
    b = Artifact(name="cfg", data={"x": b"2"})
    assert a.content_hash() != b.content_hash()


def test_with_hash_suffix():
    artifact = Artifact(name="cfg", data={"x": b"1"})
    hashed = artifact.with_hash_suffix()
    assert hashed.name == "cfg-" + artifact.content_hash()[:HASH_SUFFIX_LENGTH]
    assert artifact.name == "cfg"
