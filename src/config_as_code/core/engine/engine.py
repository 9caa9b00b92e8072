"""
Engine de configuração (ciclo de carga).

Orquestra resolução de fontes → parse → dispatch por chave de topo e
mantém o estado visível da última carga bem-sucedida.

Ciclo de carga (`configure`):
    1. Caminho efetivo: propriedade `casc.config` > variável `CASC_CONFIG`
    2. Resolução das fontes
    3. Para cada fonte, em ordem: parse e, para cada chave de topo, em ordem,
       lookup do root configurator e `configure(valor)`
    4. Somente após sucesso total: `sources` e `last_time_loaded` são
       substituídos de uma vez

Política de falha:
    - Qualquer erro propaga imediatamente e aborta o ciclo
    - Chaves já aplicadas não são desfeitas; chaves e fontes seguintes não
      são processadas
    - `sources`/`last_time_loaded` permanecem com o último valor válido
    - `last_failure` registra o payload de qualquer falha, inclusive erros
      inesperados (código `CASC_ERROR`)
    - Nenhum retry automático

Concorrência:
    - Chamadas a `configure`/`apply_stream` são serializadas por um lock
    - Lookups no registry não usam lock (registry somente leitura)
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, BinaryIO, Callable, Dict, List, Mapping, Optional, Tuple

from config_as_code.core.config.hashing import compute_document_hash
from config_as_code.core.config.parser import parse_document
from config_as_code.core.config.sources import (
    DEFAULT_CONFIG_PATH,
    ConfigurationSource,
    resolve_config_path,
    resolve_sources,
)
from config_as_code.core.configurator.configurator import Configurator, RootElementConfigurator
from config_as_code.core.configurator.registry import ConfiguratorRegistry
from config_as_code.core.errors import (
    CASC_ERROR,
    ConfigurationAsCodeError,
    ConfiguratorApplyError,
    ErrorPayload,
    UnknownRootElementError,
)

from .discovery import discover_configurators


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SourceResult:
    """Resultado da aplicação de uma fonte: chaves despachadas e hash do documento."""

    name: str
    keys: List[str] = field(default_factory=list)
    document_hash: str = ""


@dataclass(frozen=True)
class LoadResult:
    """Resultado agregado de um ciclo de carga bem-sucedido."""

    config_path: Optional[str]
    loaded_at: datetime
    sources: List[SourceResult] = field(default_factory=list)

    @property
    def source_names(self) -> List[str]:
        return [s.name for s in self.sources]


class ConfigurationEngine:
    """
    Engine canônico de configuração como código.

    Uma instância por processo, construída explicitamente pelo host e
    repassada por referência (página de gestão, inicialização).

    Args:
        registry: Registro de configurators, populado na inicialização.
        properties: Propriedades de sistema do host (consultadas primeiro).
        environ: Ambiente do processo; default `os.environ`.
        default_path: Arquivo usado quando nenhum caminho é configurado.
        clock: Fonte de tempo para `last_time_loaded`.
    """

    def __init__(
        self,
        *,
        registry: ConfiguratorRegistry,
        properties: Optional[Mapping[str, str]] = None,
        environ: Optional[Mapping[str, str]] = None,
        default_path: str = DEFAULT_CONFIG_PATH,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.registry = registry
        self.properties: Mapping[str, str] = properties if properties is not None else {}
        self.environ: Mapping[str, str] = environ if environ is not None else os.environ
        self.default_path = default_path
        self._clock = clock

        self._lock = threading.RLock()
        self._sources: Tuple[str, ...] = ()
        self._last_time_loaded: Optional[datetime] = None
        self._last_failure: Optional[ErrorPayload] = None

    # ------------------------------------------------------------------
    # Read views
    # ------------------------------------------------------------------
    @property
    def sources(self) -> List[str]:
        """Nomes das fontes da última carga bem-sucedida."""
        return list(self._sources)

    @property
    def last_time_loaded(self) -> Optional[datetime]:
        """Instante da última carga bem-sucedida; None se nunca carregou."""
        return self._last_time_loaded

    @property
    def last_failure(self) -> Optional[ErrorPayload]:
        """Erro do último ciclo que falhou; limpo a cada ciclo bem-sucedido."""
        return self._last_failure

    def get_configurators(self) -> List[Configurator]:
        return discover_configurators(self.registry.roots(), self.registry.lookup)

    def get_root_configurators(self) -> List[RootElementConfigurator]:
        return self.registry.roots()

    # ------------------------------------------------------------------
    # Load cycle
    # ------------------------------------------------------------------
    def configure(self) -> LoadResult:
        """
        Executa um ciclo de carga completo.

        Returns:
            LoadResult: Fontes aplicadas, chaves despachadas e instante da carga.

        Raises:
            SourceNotFoundError: Caminho explícito inexistente.
            ParseError: Documento malformado.
            UnknownRootElementError: Chave de topo sem root configurator.
            ConfiguratorApplyError: Falha de um configurator ao aplicar seu valor.
        """
        with self._lock:
            config_path = resolve_config_path(self.properties, self.environ)
            logger.info("Carregando configuração (caminho=%r)", config_path)
            try:
                sources = resolve_sources(config_path, default_path=self.default_path)
                results = [self._configure_source(source) for source in sources]
            except ConfigurationAsCodeError as exc:
                self._last_failure = exc.to_payload()
                logger.error("Carga de configuração abortada: %s", exc)
                raise
            except Exception as exc:
                self._last_failure = ErrorPayload(
                    type=CASC_ERROR,
                    message=str(exc),
                    details={"exception_class": exc.__class__.__name__},
                )
                logger.error("Carga de configuração abortada por erro inesperado: %r", exc)
                raise

            loaded_at = self._clock()
            self._sources = tuple(r.name for r in results)
            self._last_time_loaded = loaded_at
            self._last_failure = None
            logger.info("Configuração carregada de %d fonte(s): %s", len(results), list(self._sources))

            return LoadResult(config_path=config_path, loaded_at=loaded_at, sources=results)

    def apply_stream(self, stream: BinaryIO, *, source_name: str = "<stream>") -> SourceResult:
        """
        Lê YAML de um stream e aplica cada chave de topo.

        Não altera `sources` nem `last_time_loaded`. O stream pertence ao
        chamador e não é fechado aqui.
        """
        with self._lock:
            document = parse_document(stream, source_name=source_name)
            return self._dispatch(document, source_name=source_name)

    def _configure_source(self, source: ConfigurationSource) -> SourceResult:
        logger.debug("Lendo fonte %s", source.name)
        with source.open() as stream:
            document = parse_document(stream, source_name=source.name)
        return self._dispatch(document, source_name=source.name)

    def _dispatch(self, document: Dict[str, Any], *, source_name: str) -> SourceResult:
        # hash calculado antes de qualquer configure()
        document_hash = compute_document_hash(document)
        keys: List[str] = []
        for key, value in document.items():
            configurator = self.registry.lookup_root(key)
            if configurator is None:
                raise UnknownRootElementError(key, source=source_name)

            logger.debug("Aplicando '%s' de %s", key, source_name)
            try:
                configurator.configure(value)
            except ConfigurationAsCodeError:
                raise
            except Exception as exc:
                raise ConfiguratorApplyError(key, source=source_name, cause=exc) from exc
            keys.append(key)

        return SourceResult(
            name=source_name,
            keys=keys,
            document_hash=document_hash,
        )


def bootstrap(
    registry: ConfiguratorRegistry,
    *,
    properties: Optional[Mapping[str, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    default_path: str = DEFAULT_CONFIG_PATH,
) -> ConfigurationEngine:
    """
    Constrói o engine do processo e executa a primeira carga.

    Deve ser chamado pelo host depois que todos os configurators foram
    registrados. Falhas propagam (inicialização fail-fast).
    """
    engine = ConfigurationEngine(
        registry=registry,
        properties=properties,
        environ=environ,
        default_path=default_path,
    )
    engine.configure()
    return engine
