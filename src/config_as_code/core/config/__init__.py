"""
Camada de fontes e documentos de configuração.

Este pacote contém as estruturas responsáveis por localizar as fontes de
configuração, interpretá-las como documentos e identificá-las por hash.

Responsabilidades do pacote:
    - Resolver o caminho efetivo (propriedade de sistema > variável de ambiente)
    - Resolver fontes (arquivo default, arquivo único ou diretório)
    - Interpretar YAML em documentos chave → valor
    - Gerar hash canônico de documentos para rastreabilidade

Limites explícitos:
    - Não resolve configurators
    - Não aplica configuração
    - Não faz merge entre arquivos: cada fonte é despachada isoladamente
"""

from .hashing import compute_document_hash
from .parser import parse_document
from .sources import (
    CASC_CONFIG_ENV,
    CASC_CONFIG_PROPERTY,
    CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_NAME,
    DEFAULT_CONFIG_PATH,
    ConfigurationSource,
    resolve_config_path,
    resolve_sources,
)

__all__ = [
    "CASC_CONFIG_ENV",
    "CASC_CONFIG_PROPERTY",
    "CONFIG_EXTENSIONS",
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_CONFIG_PATH",
    "ConfigurationSource",
    "compute_document_hash",
    "parse_document",
    "resolve_config_path",
    "resolve_sources",
]
