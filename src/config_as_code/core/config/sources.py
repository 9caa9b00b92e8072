"""
Resolução de fontes de configuração.

Este módulo determina, a partir de uma única string de caminho, o conjunto
ordenado de fontes (arquivos YAML) que compõem uma carga de configuração.

Política de resolução (v1):
    - caminho vazio/ausente → arquivo default `./casc.yaml`, se existir;
      caso contrário nenhuma fonte (não é erro)
    - diretório → varredura recursiva por `.yml` e `.yaml`, ordem
      lexicográfica pelo caminho completo
    - arquivo → fonte única
    - caminho explícito inexistente → `SourceNotFoundError`

Decisões arquiteturais:
    - A propriedade de sistema tem precedência sobre a variável de ambiente
    - Fontes são abertas sob demanda pelo chamador (`ConfigurationSource.open`),
      garantindo no máximo um stream aberto por vez
    - Fontes são identificadas pelo nome base do arquivo

Limites explícitos:
    - Não interpreta conteúdo (ver `parser`)
    - Não aplica configuração
    - Não faz merge entre arquivos
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Mapping, Optional

from ..errors import SourceNotFoundError


logger = logging.getLogger(__name__)

CASC_CONFIG_PROPERTY = "casc.config"
CASC_CONFIG_ENV = "CASC_CONFIG"
DEFAULT_CONFIG_NAME = "casc.yaml"
DEFAULT_CONFIG_PATH = f"./{DEFAULT_CONFIG_NAME}"
CONFIG_EXTENSIONS = frozenset({".yml", ".yaml"})


@dataclass(frozen=True)
class ConfigurationSource:
    """
    Uma unidade nomeada de entrada de configuração (um arquivo).

    A fonte não mantém stream aberto: `open()` devolve um novo stream
    binário cuja posse é do chamador, que deve fechá-lo (uso com `with`).

    Campos:
        - name: nome de exibição (nome base do arquivo)
        - path: arquivo em disco, quando a fonte é baseada em arquivo
        - data: conteúdo em memória, quando a fonte não tem arquivo
    """

    name: str
    path: Optional[Path] = None
    data: Optional[bytes] = None

    @classmethod
    def from_path(cls, path: Path) -> "ConfigurationSource":
        return cls(name=path.name, path=path)

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "ConfigurationSource":
        return cls(name=name, data=data)

    def open(self) -> BinaryIO:
        if self.path is not None:
            return self.path.open("rb")
        return io.BytesIO(self.data or b"")


def resolve_config_path(
    properties: Optional[Mapping[str, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Resolve a string de caminho efetiva a partir das duas configurações candidatas.

    A propriedade `casc.config` vence quando presente (mesmo vazia); caso
    contrário usa-se `CASC_CONFIG` do ambiente. Ausência de ambas retorna
    None, o que leva ao comportamento do caminho default.
    """
    if properties is not None and CASC_CONFIG_PROPERTY in properties:
        return properties[CASC_CONFIG_PROPERTY]
    if environ is not None:
        return environ.get(CASC_CONFIG_ENV)
    return None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _scan_directory(directory: Path) -> List[ConfigurationSource]:
    files = [
        p for p in directory.rglob("*")
        if p.is_file() and p.suffix.lower() in CONFIG_EXTENSIONS
    ]
    files.sort(key=lambda p: str(p))
    return [ConfigurationSource.from_path(p) for p in files]


def resolve_sources(
    config_path: Optional[str],
    *,
    default_path: str = DEFAULT_CONFIG_PATH,
) -> List[ConfigurationSource]:
    """
    Resolve o conjunto ordenado de fontes de configuração.

    Args:
        config_path (Optional[str]): Caminho de arquivo ou diretório; vazio
            ou None seleciona o arquivo default.
        default_path (str): Localização do arquivo default, relativa ao
            diretório de trabalho corrente.

    Returns:
        List[ConfigurationSource]: Fontes na ordem em que devem ser aplicadas.
            Nomes podem se repetir quando subdiretórios contêm arquivos
            homônimos.

    Raises:
        SourceNotFoundError: Se `config_path` não for vazio e não existir.
    """
    if _is_blank(config_path):
        default = Path(default_path)
        if default.is_file():
            logger.debug("Usando arquivo default %s", default)
            return [ConfigurationSource(name=DEFAULT_CONFIG_NAME, path=default)]
        logger.debug("Nenhum caminho configurado e %s ausente; nenhuma fonte", default)
        return []

    cfg = Path(config_path)  # type: ignore[arg-type]
    if not cfg.exists():
        raise SourceNotFoundError(str(config_path))

    if cfg.is_dir():
        sources = _scan_directory(cfg)
        logger.debug("Diretório %s: %d fonte(s)", cfg, len(sources))
        return sources

    return [ConfigurationSource.from_path(cfg)]
