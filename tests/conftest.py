# tests/conftest.py
"""
Fixtures compartilhados para testes do kubeconfig-kit.

Este módulo define fixtures reutilizáveis que fornecem:
- um kubeconfig realista em YAML (string) e já carregado (KubeConfig)
- um arquivo kubeconfig materializado em `tmp_path`
- um accessor em memória
- um CommandContext com streams em memória

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do pacote são feitos de forma lazy para melhorar a clareza
      de erros durante falhas de import
    - Fixtures que tocam o filesystem usam apenas `tmp_path`

Limites explícitos:
    - Não substituir testes de integração da CLI
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Documento kubeconfig
# =====================================================

@pytest.fixture
def sample_kubeconfig_yaml() -> str:
    """
    Fixture que fornece um kubeconfig com dois contextos, dois clusters e
    dois users, além de campos que o registry não interpreta
    (`preferences`, `extensions` e uma chave desconhecida).

    Usado por:
        - Testes do loader (round-trip sem perda)
        - Testes do registry via PathOptions
        - Testes da CLI
    """
    return """\
apiVersion: v1
kind: Config
clusters:
- name: cluster-a
  cluster:
    server: https://a.example.com
- name: cluster-b
  cluster:
    server: https://b.example.com
users:
- name: user-a
  user:
    token: secret-a
- name: user-b
  user:
    token: secret-b
contexts:
- name: old-name
  context:
    cluster: cluster-a
    user: user-a
    namespace: team-a
- name: other
  context:
    cluster: cluster-b
    user: user-b
current-context: old-name
preferences:
  colors: true
x-vendor-note: keep-me
"""


@pytest.fixture
def sample_config(sample_kubeconfig_yaml):
    import yaml

    from kubeconfig_kit.kubeconfig.document import KubeConfig

    return KubeConfig.from_dict(yaml.safe_load(sample_kubeconfig_yaml))


@pytest.fixture
def kubeconfig_file(tmp_path, sample_kubeconfig_yaml):
    path = tmp_path / "config"
    path.write_text(sample_kubeconfig_yaml, encoding="utf-8")
    return path


@pytest.fixture
def memory_access(sample_config):
    from kubeconfig_kit.kubeconfig.access import InMemoryConfigAccess

    return InMemoryConfigAccess(config=sample_config, filename="/home/dev/.kube/config")


# =====================================================
# Contexto de comando
# =====================================================

@pytest.fixture
def cmd_ctx():
    """CommandContext com `out`/`err` em StringIO."""
    from kubeconfig_kit.core.context import CommandContext

    return CommandContext.in_memory()


@pytest.fixture
def make_entry():
    """Fábrica de ContextEntry para montar documentos mínimos."""
    from kubeconfig_kit.kubeconfig.document import ContextEntry

    def _make(cluster: str = "c", user: str = "a", **kwargs):
        return ContextEntry(cluster=cluster, user=user, **kwargs)

    return _make
