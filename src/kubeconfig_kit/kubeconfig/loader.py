# src/kubeconfig_kit/kubeconfig/loader.py
"""
Loader canônico do documento kubeconfig.

Este módulo é responsável por ler um arquivo kubeconfig do disco,
validar sua estrutura mínima e gravá-lo de volta de forma atômica.

Formatos suportados (v1):
    - JSON (.json)
    - YAML (qualquer outro sufixo; kubeconfig convencionalmente não tem extensão)

Responsabilidades do módulo:
    - Carregar o arquivo como dicionário e validar o tipo raiz
    - Converter o dicionário em `KubeConfig`
    - Persistir o documento em uma única troca atômica de arquivo

Princípios fundamentais:
    - Arquivo inexistente equivale a documento vazio
    - Arquivo vazio equivale a documento vazio
    - Erros estruturais são tratados como falhas fatais
    - Nenhuma gravação parcial é observável por outros leitores

Limites explícitos:
    - Não mescla múltiplos arquivos
    - Não implementa locking entre processos (último a gravar vence)
    - Não valida semântica de clusters ou credenciais
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # PyYAML

from kubeconfig_kit.core.exceptions import InvalidConfigRootTypeError, UnsupportedConfigFormatError

from .document import KubeConfig


logger = logging.getLogger(__name__)

_YAML = "yaml"
_JSON = "json"


def _format_for(path: Path) -> str:
    return _JSON if path.suffix.lower() == ".json" else _YAML


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo kubeconfig e valida sua estrutura básica.

    Decisões arquiteturais:
        - Arquivos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Erros de sintaxe do parser viram `UnsupportedConfigFormatError`
        - Conteúdo que não é UTF-8 válido também vira `UnsupportedConfigFormatError`

    Args:
        path (Path): Caminho para o arquivo.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        UnsupportedConfigFormatError: Se o conteúdo não puder ser decodificado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
        OSError: Se o arquivo existir mas não puder ser lido.
    """
    with path.open("r", encoding="utf-8") as f:
        try:
            if _format_for(path) == _JSON:
                text = f.read()
                data = json.loads(text) if text.strip() else None
            else:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise UnsupportedConfigFormatError(
                f"cannot decode {path}: {e}",
                details={"path": str(path)},
            ) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"config root in {path} must be a mapping, got {type(data).__name__}",
            details={"path": str(path)},
        )

    return data


def load_document(path: Union[str, Path]) -> KubeConfig:
    """
    Carrega o documento kubeconfig em `path`.

    Um arquivo inexistente produz um documento vazio, permitindo que o
    primeiro save crie o arquivo.
    """
    p = Path(path).expanduser()
    if not p.exists():
        logger.debug("kubeconfig %s does not exist, starting from an empty document", p)
        return KubeConfig.empty()
    return KubeConfig.from_dict(_load_file(p))


def dump_document(doc: KubeConfig, fmt: str = _YAML) -> str:
    """Serializa o documento no formato pedido (`yaml` ou `json`)."""
    data = doc.to_dict()
    if fmt == _JSON:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == _YAML:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    raise UnsupportedConfigFormatError(f"unsupported format: {fmt}", details={"format": fmt})


def save_document(doc: KubeConfig, path: Union[str, Path]) -> None:
    """
    Persiste o documento em `path` com troca atômica.

    O conteúdo é gravado em um arquivo temporário no mesmo diretório e
    então movido sobre o destino com `os.replace`. O temporário é removido
    em qualquer caminho de erro.

    Se `path` for um symlink, a gravação acontece no arquivo apontado: o
    link é preservado.
    """
    requested = Path(path).expanduser()
    text = dump_document(doc, _format_for(requested))
    p = requested.resolve()
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=str(p.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if p.exists():
            os.chmod(tmp_name, p.stat().st_mode & 0o777)
        os.replace(tmp_name, p)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.debug("kubeconfig saved to %s", p)
