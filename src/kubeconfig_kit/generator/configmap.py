# src/kubeconfig_kit/generator/configmap.py
"""
Generator canônico de ConfigMaps (v1) e comando `update configmap`.

Este módulo transforma uma combinação declarada de fontes em um único
artefato plano chave → bytes, aplicando regras de exclusividade e
completude antes de qualquer leitura de arquivo.

Validação (nesta ordem, a primeira falha vence):
    1. `name` vazio                               → MissingNameError
    2. env-file combinado com file/literal        → SourceConflictError
    3. nenhuma fonte informada                    → NoSourcesError

Pipeline de geração:
    - parse de todas as fontes (sintaxe de literais e `key=path`)
    - expansão das fontes de arquivo, depois literais, depois env-file
    - cada chave só pode ser produzida uma vez (DuplicateKeyError cita as
      duas fontes envolvidas)

Invariantes:
    - Nenhum artefato parcial é retornado em caso de erro
    - Para as mesmas fontes e o mesmo conteúdo em disco, o artefato é idêntico

Limites explícitos:
    - Não envia o ConfigMap para nenhum store remoto; o comando apenas
      gera e reporta o artefato
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import yaml  # PyYAML

from kubeconfig_kit.core.context import CommandContext
from kubeconfig_kit.core.exceptions import (
    DuplicateKeyError,
    MissingNameError,
    NoSourcesError,
    SourceConflictError,
    ValidationError,
)

from .artifact import Artifact
from .sources import EnvFileSource, Source, expand, parse_file_source, parse_literal_source


OP = "generator.configmap"

OUTPUT_FORMATS = ("yaml", "json")


@dataclass
class ConfigMapGenerator:
    """
    Gera um `Artifact` a partir de fontes declaradas.

    Args:
        name: nome do artefato.
        file_sources: entradas `path` ou `key=path` (arquivos ou diretórios).
        literal_sources: entradas `key=value`.
        env_file_source: caminho de um env-file (exclusivo com as anteriores).
        append_hash: sufixa o nome com o hash do conteúdo.
    """

    name: str
    file_sources: List[str] = field(default_factory=list)
    literal_sources: List[str] = field(default_factory=list)
    env_file_source: str = ""
    append_hash: bool = False

    def validate(self) -> None:
        if not self.name:
            raise MissingNameError("name must be specified")

        if self.env_file_source and (self.file_sources or self.literal_sources):
            raise SourceConflictError(
                "env-file cannot be combined with file or literal sources",
                details={
                    "env_file_source": self.env_file_source,
                    "file_sources": list(self.file_sources),
                    "literal_sources": list(self.literal_sources),
                },
            )

        if not (self.env_file_source or self.file_sources or self.literal_sources):
            raise NoSourcesError(
                "at least one source must be supplied",
                hint="Use --from-file, --from-literal or --from-env-file.",
            )

    def sources(self) -> List[Source]:
        """Parse das fontes declaradas, na ordem do pipeline."""
        parsed: List[Source] = [parse_file_source(raw) for raw in self.file_sources]
        parsed.extend(parse_literal_source(raw) for raw in self.literal_sources)
        if self.env_file_source:
            parsed.append(EnvFileSource(self.env_file_source))
        return parsed

    def generate(self, ctx: Optional[CommandContext] = None) -> Artifact:
        ctx = ctx or CommandContext.in_memory()
        self.validate()

        data: Dict[str, bytes] = {}
        origins: Dict[str, str] = {}
        for source in self.sources():
            for entry in expand(source, ctx):
                if entry.key in data:
                    raise DuplicateKeyError(
                        f"cannot add key {entry.key!r} from {entry.origin}, "
                        f"another key by that name already exists from {origins[entry.key]}",
                        details={
                            "key": entry.key,
                            "sources": [origins[entry.key], entry.origin],
                        },
                    )
                data[entry.key] = entry.value
                origins[entry.key] = entry.origin

        artifact = Artifact(name=self.name, data=data, origins=origins)
        if self.append_hash:
            artifact = artifact.with_hash_suffix()
        return artifact


def render_artifact(artifact: Artifact, fmt: str) -> str:
    manifest = artifact.to_manifest()
    if fmt == "json":
        return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(manifest, default_flow_style=False, sort_keys=False, allow_unicode=True)


@dataclass
class UpdateConfigMapOptions:
    """Opções do comando `update configmap` (complete → validate → run)."""

    name: str = ""
    file_sources: List[str] = field(default_factory=list)
    literal_sources: List[str] = field(default_factory=list)
    env_file_source: str = ""
    append_hash: bool = False
    output: str = ""

    def complete(
        self,
        args: Sequence[str],
        *,
        from_file: Sequence[str] = (),
        from_literal: Sequence[str] = (),
        from_env_file: str = "",
        append_hash: bool = False,
        output: str = "",
    ) -> "UpdateConfigMapOptions":
        if len(args) != 1:
            raise ValidationError(
                "exactly one NAME is required",
                details={"args": list(args)},
            )
        self.name = args[0]
        # --from-file aceita valores separados por vírgula
        self.file_sources = [part for raw in from_file for part in raw.split(",") if part]
        self.literal_sources = list(from_literal)
        self.env_file_source = from_env_file or ""
        self.append_hash = append_hash
        self.output = output or ""
        return self

    def generator(self) -> ConfigMapGenerator:
        return ConfigMapGenerator(
            name=self.name,
            file_sources=list(self.file_sources),
            literal_sources=list(self.literal_sources),
            env_file_source=self.env_file_source,
            append_hash=self.append_hash,
        )

    def validate(self) -> None:
        self.generator().validate()
        if self.output and self.output not in OUTPUT_FORMATS:
            raise ValidationError(
                f"unsupported output format {self.output!r}, expected one of: {', '.join(OUTPUT_FORMATS)}",
                details={"output": self.output},
            )

    def run(self, ctx: CommandContext) -> Artifact:
        artifact = self.generator().generate(ctx)
        ctx.log(
            op=OP,
            level="INFO",
            message="configmap_generated",
            name=artifact.name,
            keys=artifact.keys(),
            content_hash=artifact.content_hash(),
        )

        if self.output:
            ctx.write(render_artifact(artifact, self.output))
        else:
            ctx.write(f'configmap "{artifact.name}" generated ({len(artifact)} keys)\n')
        return artifact
