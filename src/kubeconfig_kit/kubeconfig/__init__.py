# src/kubeconfig_kit/kubeconfig/__init__.py
"""
Camada de acesso ao documento kubeconfig.

Responsabilidades do pacote:
    - Modelo em memória do documento (`document`)
    - Carregamento e persistência atômica em YAML ou JSON (`loader`)
    - Accessor explícito e sessão com escopo (`access`)

Invariantes:
    - O documento é carregado uma vez por invocação
    - A persistência ocorre uma única vez e apenas em caso de sucesso
"""

from .access import ConfigAccess, InMemoryConfigAccess, PathOptions, config_session
from .document import ContextEntry, KubeConfig

__all__ = [
    "ConfigAccess",
    "ContextEntry",
    "InMemoryConfigAccess",
    "KubeConfig",
    "PathOptions",
    "config_session",
]
