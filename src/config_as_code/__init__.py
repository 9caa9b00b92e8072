# src/config_as_code/__init__.py
"""
Config as Code — aplicação declarativa de configuração ao estado vivo.

Este pacote raiz define o namespace público do Config as Code: um engine
que lê documentos YAML escritos por humanos e despacha cada seção de topo
para o configurator registrado para ela.

Princípios centrais:
    - Cada chave de topo do documento corresponde a um root configurator
    - Chaves desconhecidas são erro; nada é ignorado silenciosamente
    - O estado visível (fontes, última carga) muda apenas ao final de uma carga completa
    - O grafo de configurators é descoberto sem risco de recursão infinita

Arquitetura em alto nível:
    - core.config       → resolução de fontes, parse e hashing de documentos
    - core.configurator → contrato de configurator e registro por nome/tipo
    - core.engine       → ciclo de carga e descoberta do grafo
    - management        → página de gestão (reload administrativo, visões)
    - report            → referência de configuração em Markdown

Limites explícitos:
    - Não define configurators concretos
    - Não implementa transporte HTTP nem checagem de permissões
"""

from .core.configurator import Attribute, ConfiguratorRegistry
from .core.engine import ConfigurationEngine, LoadResult, bootstrap
from .core.errors import (
    ConfigurationAsCodeError,
    ConfiguratorApplyError,
    ParseError,
    SourceNotFoundError,
    UnknownRootElementError,
)

__all__ = [
    "Attribute",
    "ConfiguratorRegistry",
    "ConfigurationEngine",
    "LoadResult",
    "bootstrap",
    "ConfigurationAsCodeError",
    "ConfiguratorApplyError",
    "ParseError",
    "SourceNotFoundError",
    "UnknownRootElementError",
]
