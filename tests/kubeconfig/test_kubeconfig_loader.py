# tests/kubeconfig/test_kubeconfig_loader.py
"""
Testes do loader do documento kubeconfig (load_document / save_document).

Este módulo valida que:
- arquivo inexistente ou vazio equivale a documento vazio
- conteúdo raiz não-mapa e conteúdo indecodificável são rejeitados
- save grava de forma atômica, sem deixar temporários no diretório
- save através de symlink grava no arquivo apontado e preserva o link
- YAML e JSON são escolhidos pelo sufixo do arquivo
- um ciclo load → save → load preserva o documento

Decisões arquiteturais:
    - Erros estruturais são falhas fatais (ConfigError)
    - Erros de I/O propagam como OSError

Limites explícitos:
    - Não valida concorrência entre processos
"""

import json
from pathlib import Path

import pytest
import yaml

try:
    from kubeconfig_kit.core.exceptions import InvalidConfigRootTypeError, UnsupportedConfigFormatError
    from kubeconfig_kit.kubeconfig.document import ContextEntry, KubeConfig
    from kubeconfig_kit.kubeconfig.loader import dump_document, load_document, save_document
except Exception as e:  # noqa: BLE001
    load_document = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader do kubeconfig e suas exceções tipadas estejam
    disponíveis, falhando com mensagem explícita caso contrário.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing kubeconfig loader. Implement:\n"
            "- src/kubeconfig_kit/kubeconfig/loader.py (load_document, save_document)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_file_is_empty_document(tmp_path: Path):
    _require_imports()
    doc = load_document(tmp_path / "does-not-exist")
    assert doc == KubeConfig.empty()


def test_empty_file_is_empty_document(tmp_path: Path):
    _require_imports()
    path = tmp_path / "config"
    path.write_text("", encoding="utf-8")
    assert load_document(path).contexts == {}


def test_invalid_root_type_raises(tmp_path: Path):
    """
    Verifica que o loader rejeita conteúdo cujo tipo raiz não é um mapa.

    Invariantes:
        - A exceção utilizada é específica (`InvalidConfigRootTypeError`)
        - Nenhum documento parcial é retornado
    """
    _require_imports()
    path = tmp_path / "config"
    path.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_document(path)


def test_undecodable_yaml_raises(tmp_path: Path):
    _require_imports()
    path = tmp_path / "config"
    path.write_text("contexts: [unclosed\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_document(path)


def test_undecodable_json_raises(tmp_path: Path):
    _require_imports()
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_document(path)


@pytest.mark.parametrize("name", ["config", "config.json"])
def test_non_utf8_content_raises_unsupported_format(tmp_path: Path, name: str):
    """
    Verifica que bytes que não são UTF-8 válido viram
    UnsupportedConfigFormatError (e não UnicodeDecodeError cru).
    """
    _require_imports()
    path = tmp_path / name
    path.write_bytes(b"current-context: \xff\xfe\n")
    with pytest.raises(UnsupportedConfigFormatError) as excinfo:
        load_document(path)
    assert excinfo.value.details == {"path": str(path)}


def test_round_trip_preserves_document(kubeconfig_file: Path):
    _require_imports()
    first = load_document(kubeconfig_file)
    save_document(first, kubeconfig_file)
    second = load_document(kubeconfig_file)

    assert second == first
    assert second.extra == {"x-vendor-note": "keep-me"}


def test_save_is_atomic_and_leaves_no_temp_files(tmp_path: Path):
    """
    Verifica que save_document cria o diretório de destino, grava o arquivo
    e não deixa arquivos temporários para trás.
    """
    _require_imports()
    target = tmp_path / "nested" / "config"
    doc = KubeConfig(contexts={"dev": ContextEntry(cluster="c", user="u")}, current_context="dev")

    save_document(doc, target)

    assert sorted(p.name for p in target.parent.iterdir()) == ["config"]
    data = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert data["current-context"] == "dev"
    assert data["contexts"] == [{"name": "dev", "context": {"cluster": "c", "user": "u"}}]


def test_save_json_by_suffix(tmp_path: Path):
    _require_imports()
    target = tmp_path / "config.json"
    save_document(KubeConfig(current_context=""), target)

    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["kind"] == "Config"
    assert load_document(target) == KubeConfig()


def test_save_overwrites_previous_content(kubeconfig_file: Path):
    _require_imports()
    save_document(KubeConfig.empty(), kubeconfig_file)
    assert load_document(kubeconfig_file).contexts == {}


def test_dump_document_rejects_unknown_format():
    _require_imports()
    with pytest.raises(UnsupportedConfigFormatError):
        dump_document(KubeConfig.empty(), "toml")


def test_save_through_symlink_writes_target_and_keeps_link(tmp_path: Path, kubeconfig_file: Path):
    """
    Verifica que gravar através de um symlink atualiza o arquivo apontado
    e mantém o link intacto.
    """
    _require_imports()
    link = tmp_path / "linked-config"
    link.symlink_to(kubeconfig_file)

    save_document(KubeConfig(current_context="other"), link)

    assert link.is_symlink()
    assert link.resolve() == kubeconfig_file.resolve()
    assert load_document(kubeconfig_file).current_context == "other"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["config", "linked-config"]
