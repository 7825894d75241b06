# src/kubeconfig_kit/kubeconfig/access.py
"""
Acesso ao documento kubeconfig como colaborador explícito.

Este módulo define o contrato `ConfigAccess` (carregar, informar o caminho
canônico e persistir um documento inteiro) e duas implementações:

    - `PathOptions`: baseada em arquivo, com precedência
      arquivo explícito → variável de ambiente → arquivo global
    - `InMemoryConfigAccess`: documento em memória, usada em testes

Operações recebem o accessor por parâmetro; não existe accessor global
compartilhado entre subcomandos.

`config_session` oferece a aquisição com escopo do documento durante um
comando: carrega uma vez, entrega ao chamador e persiste uma única vez
somente se o bloco terminar sem exceção.

Limites explícitos:
    - Não mescla os arquivos listados na variável de ambiente (usa o primeiro)
    - Não implementa locking: carregar-e-gravar concorrente, último vence
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Mapping, Optional, Protocol, runtime_checkable

from .document import KubeConfig
from .loader import load_document, save_document


RECOMMENDED_ENV_VAR = "KUBECONFIG"
RECOMMENDED_HOME_FILE = str(Path("~") / ".kube" / "config")


@runtime_checkable
class ConfigAccess(Protocol):
    """Contrato mínimo de acesso a um documento kubeconfig."""

    def get_starting_config(self) -> KubeConfig: ...

    def get_default_filename(self) -> str: ...

    def is_explicit_file(self) -> bool: ...

    def get_explicit_file(self) -> str: ...

    def save_config(self, config: KubeConfig) -> None: ...


def config_file_for(access: ConfigAccess) -> str:
    """Caminho usado em mensagens de erro: o arquivo explícito vence o default."""
    if access.is_explicit_file():
        return access.get_explicit_file()
    return access.get_default_filename()


@dataclass
class PathOptions:
    """
    Accessor baseado em arquivo.

    Precedência do arquivo efetivo:
        1. `explicit_file` (flag `--kubeconfig`)
        2. primeiro caminho não vazio em `$KUBECONFIG`
        3. `global_file` (`~/.kube/config`)
    """

    explicit_file: Optional[str] = None
    env_var: str = RECOMMENDED_ENV_VAR
    global_file: str = RECOMMENDED_HOME_FILE
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ, repr=False)

    def _env_files(self) -> List[str]:
        if not self.env_var:
            return []
        raw = self.environ.get(self.env_var, "")
        return [p for p in raw.split(os.pathsep) if p]

    def get_default_filename(self) -> str:
        env_files = self._env_files()
        if env_files:
            return str(Path(env_files[0]).expanduser())
        return str(Path(self.global_file).expanduser())

    def is_explicit_file(self) -> bool:
        return bool(self.explicit_file)

    def get_explicit_file(self) -> str:
        return str(Path(self.explicit_file).expanduser()) if self.explicit_file else ""

    def get_starting_config(self) -> KubeConfig:
        return load_document(config_file_for(self))

    def save_config(self, config: KubeConfig) -> None:
        save_document(config, config_file_for(self))


@dataclass
class InMemoryConfigAccess:
    """Accessor em memória: `saved` conta quantas vezes o documento foi persistido."""

    config: KubeConfig = field(default_factory=KubeConfig.empty)
    filename: str = "/tmp/kubeconfig-kit/config"
    explicit: bool = False
    saved: int = 0

    def get_starting_config(self) -> KubeConfig:
        return self.config

    def get_default_filename(self) -> str:
        return self.filename

    def is_explicit_file(self) -> bool:
        return self.explicit

    def get_explicit_file(self) -> str:
        return self.filename if self.explicit else ""

    def save_config(self, config: KubeConfig) -> None:
        self.config = config
        self.saved += 1


@dataclass
class ConfigSession:
    """Documento carregado durante um `config_session`; o bloco substitui `config`."""

    config: KubeConfig
    config_file: str


@contextmanager
def config_session(access: ConfigAccess) -> Iterator[ConfigSession]:
    """
    Aquisição com escopo do documento kubeconfig.

    Fluxo: Loaded → (bloco do chamador) Mutated → Persisted.
    Uma exceção dentro do bloco propaga sem que `save_config` seja chamado.
    """
    session = ConfigSession(
        config=access.get_starting_config(),
        config_file=config_file_for(access),
    )
    yield session
    access.save_config(session.config)
