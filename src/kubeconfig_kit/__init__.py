# src/kubeconfig_kit/__init__.py
"""
kubeconfig-kit: registro de contextos kubeconfig e gerador de ConfigMaps.

Este pacote raiz define o namespace público do kubeconfig-kit, composto por
dois núcleos independentes:

    - um registry de contextos nomeados, persistido em um arquivo kubeconfig,
      com renomeação que preserva a integridade referencial da seleção
      corrente (`current-context`)
    - um generator determinístico de artefatos chave → bytes a partir de
      literais, arquivos, diretórios e env-files

Arquitetura em alto nível:
    - core        → exceções tipadas, payload de erro e contexto de comando
    - kubeconfig  → modelo do documento, loader/saver e accessor explícito
    - registry    → operações sobre contextos (lookup, use, rename)
    - generator   → fontes, validação e geração do artefato
    - cli         → superfície de comandos (typer)

Limites explícitos:
    - Não mescla múltiplos arquivos kubeconfig
    - Não implementa locking entre processos (último a gravar vence)
    - Não envia ConfigMaps a nenhum cluster
"""

__version__ = "0.1.0"
