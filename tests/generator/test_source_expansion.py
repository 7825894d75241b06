# tests/generator/test_source_expansion.py
"""
Testes do parse e da expansão das fontes do generator.

Os testes asseguram que:
- literais e `key=path` são interpretados sem ler arquivos
- arquivos usam o nome como chave padrão
- diretórios expandem apenas arquivos regulares, em ordem de nome
- symlinks e subdiretórios são ignorados; nomes ilegais geram warning
"""

import os

import pytest

from kubeconfig_kit.core.exceptions import InvalidKeyError, MalformedLiteralError, ValidationError
from kubeconfig_kit.generator.sources import (
    DirectorySource,
    EnvFileSource,
    FileSource,
    LiteralSource,
    expand,
    parse_file_source,
    parse_literal_source,
)


# =====================================================
# Parse
# =====================================================

def test_parse_literal_keeps_equals_in_value():
    assert parse_literal_source("url=http://x/?a=b") == LiteralSource(key="url", value="http://x/?a=b")


def test_parse_literal_allows_empty_value():
    assert parse_literal_source("k=") == LiteralSource(key="k", value="")


@pytest.mark.parametrize("raw", ["novalue", "=value", ""])
def test_parse_literal_malformed(raw):
    with pytest.raises(MalformedLiteralError):
        parse_literal_source(raw)


def test_parse_literal_invalid_key():
    with pytest.raises(InvalidKeyError):
        parse_literal_source("bad key=1")


def test_parse_file_source_plain_path():
    assert parse_file_source("conf/app.properties") == FileSource(path="conf/app.properties")


def test_parse_file_source_with_key():
    assert parse_file_source("app=conf/app.properties") == FileSource(path="conf/app.properties", key="app")


@pytest.mark.parametrize("raw", ["=conf/a", "key=", ""])
def test_parse_file_source_missing_parts(raw):
    with pytest.raises(ValidationError):
        parse_file_source(raw)


def test_parse_file_source_invalid_explicit_key():
    with pytest.raises(InvalidKeyError):
        parse_file_source("bad key=conf/a")


# =====================================================
# Expansão
# =====================================================

def test_expand_literal(cmd_ctx):
    entries = list(expand(LiteralSource("k", "välue"), cmd_ctx))
    assert [(e.key, e.value) for e in entries] == [("k", "välue".encode("utf-8"))]


def test_expand_file_uses_basename(tmp_path, cmd_ctx):
    path = tmp_path / "app.properties"
    path.write_bytes(b"a=1\n")

    entries = list(expand(FileSource(str(path)), cmd_ctx))

    assert [(e.key, e.value) for e in entries] == [("app.properties", b"a=1\n")]
    assert str(path) in entries[0].origin


def test_expand_file_explicit_key(tmp_path, cmd_ctx):
    path = tmp_path / "weird name.txt"
    path.write_bytes(b"x")
    entries = list(expand(FileSource(str(path), key="clean"), cmd_ctx))
    assert entries[0].key == "clean"


def test_expand_file_invalid_derived_key(tmp_path, cmd_ctx):
    path = tmp_path / "weird name.txt"
    path.write_bytes(b"x")
    with pytest.raises(InvalidKeyError):
        list(expand(FileSource(str(path)), cmd_ctx))


def test_expand_missing_file_propagates(tmp_path, cmd_ctx):
    with pytest.raises(FileNotFoundError):
        list(expand(FileSource(str(tmp_path / "missing.txt")), cmd_ctx))


def test_expand_directory_sorted_regular_files_only(tmp_path, cmd_ctx):
    d = tmp_path / "conf"
    d.mkdir()
    (d / "b.txt").write_bytes(b"B")
    (d / "a.txt").write_bytes(b"A")
    (d / "sub").mkdir()
    (d / "sub" / "nested.txt").write_bytes(b"N")
    os.symlink(d / "a.txt", d / "link.txt")

    entries = list(expand(DirectorySource(str(d)), cmd_ctx))

    assert [(e.key, e.value) for e in entries] == [("a.txt", b"A"), ("b.txt", b"B")]
    assert cmd_ctx.warnings == {}


def test_expand_directory_skips_illegal_names_with_warning(tmp_path, cmd_ctx):
    d = tmp_path / "conf"
    d.mkdir()
    (d / "good.txt").write_bytes(b"ok")
    (d / "bad name.txt").write_bytes(b"nope")

    entries = list(expand(DirectorySource(str(d)), cmd_ctx))

    assert [e.key for e in entries] == ["good.txt"]
    assert len(cmd_ctx.warnings["generator.sources"]) == 1
    assert "bad name.txt" in cmd_ctx.warnings["generator.sources"][0]


def test_file_source_pointing_at_directory_expands(tmp_path, cmd_ctx):
    d = tmp_path / "conf"
    d.mkdir()
    (d / "one").write_bytes(b"1")
    assert [e.key for e in expand(FileSource(str(d)), cmd_ctx)] == ["one"]


def test_file_source_directory_with_key_rejected(tmp_path, cmd_ctx):
    d = tmp_path / "conf"
    d.mkdir()
    with pytest.raises(ValidationError, match="cannot give a key name for a directory path"):
        list(expand(FileSource(str(d), key="k"), cmd_ctx))


def test_expand_env_file(tmp_path, cmd_ctx):
    path = tmp_path / "app.env"
    path.write_text("A=1\n# c\nB=2\n", encoding="utf-8")

    entries = list(expand(EnvFileSource(str(path)), cmd_ctx))

    assert [(e.key, e.value) for e in entries] == [("A", b"1"), ("B", b"2")]
    assert entries[1].origin.endswith("line 3")


def test_expand_unknown_source_type(cmd_ctx):
    with pytest.raises(TypeError):
        expand(object(), cmd_ctx)
