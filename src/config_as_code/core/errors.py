"""
Config as Code — Canonical Errors (v1)

Este módulo define a hierarquia oficial de exceções do ciclo de carga
(resolução de fontes → parse → dispatch) e o payload canônico usado para
expor falhas de forma serializável.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Nenhuma exceção é recuperada localmente pelo engine
    - Toda exceção pode ser convertida em `ErrorPayload` estável

Taxonomia:
    - SourceNotFoundError      → caminho explícito inexistente
    - ParseError               → documento malformado
    - UnknownRootElementError  → chave raiz sem configurator registrado
    - ConfiguratorApplyError   → falha sinalizada por um configurator

Limites explícitos:
    - Não executa o ciclo de carga
    - Não decide retry ou fallback
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

CASC_ERROR = "CASC_ERROR"
SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
PARSE_ERROR = "PARSE_ERROR"
UNKNOWN_ROOT_ELEMENT = "UNKNOWN_ROOT_ELEMENT"
CONFIGURATOR_APPLY_ERROR = "CONFIGURATOR_APPLY_ERROR"


# ---------------------------------------------------------------------------
# Exceções
# ---------------------------------------------------------------------------

class ConfigurationAsCodeError(Exception):
    """
    Exceção base para falhas do ciclo de carga.

    Todas as exceções levantadas durante resolução de fontes, parse e
    dispatch herdam desta classe, permitindo captura genérica na borda
    (inicialização, ação de reload).

    Invariantes:
        - `details` é sempre um dicionário serializável
        - `code` é um valor do catálogo canônico
    """

    code: str = CASC_ERROR
    hint: Optional[str] = None

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


class SourceNotFoundError(ConfigurationAsCodeError):
    """
    O caminho de configuração informado explicitamente não existe.

    Decisões arquiteturais:
        - Só é levantada para caminhos não vazios
        - A ausência do arquivo default NÃO é erro (resulta em zero fontes)
    """

    code = SOURCE_NOT_FOUND
    hint = "Verifique a propriedade casc.config ou a variável CASC_CONFIG."

    def __init__(self, path: str):
        super().__init__(
            f"Fonte de configuração não encontrada: {path}",
            details={"path": str(path)},
        )
        self.path = str(path)


class ParseError(ConfigurationAsCodeError):
    """
    Conteúdo de uma fonte não pôde ser interpretado como documento.

    Cobre YAML sintaticamente inválido, raiz que não é um mapa e chaves
    de topo que não são strings.
    """

    code = PARSE_ERROR
    hint = "Corrija o YAML da fonte indicada; a raiz deve ser um mapa chave → valor."

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Falha ao interpretar '{source}': {reason}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class UnknownRootElementError(ConfigurationAsCodeError):
    """
    Chave de topo do documento sem root configurator registrado.

    A mensagem sempre nomeia a chave ofensora.
    """

    code = UNKNOWN_ROOT_ELEMENT
    hint = "Remova a seção ou instale/registre o configurator correspondente."

    def __init__(self, key: str, *, source: Optional[str] = None):
        super().__init__(
            f"Nenhum configurator registrado para o elemento raiz '{key}'",
            details={"key": key, "source": source},
        )
        self.key = key
        self.source = source


class ConfiguratorApplyError(ConfigurationAsCodeError):
    """
    Falha sinalizada por um configurator ao aplicar seu valor.

    A exceção original é preservada como `__cause__`; aqui apenas se
    registra onde (fonte, chave) a falha ocorreu.
    """

    code = CONFIGURATOR_APPLY_ERROR
    hint = "Verifique o valor da seção indicada; a causa original está encadeada."

    def __init__(self, key: str, *, source: Optional[str], cause: BaseException):
        super().__init__(
            f"Falha do configurator do elemento raiz '{key}': {cause}",
            details={
                "key": key,
                "source": source,
                "exception_class": cause.__class__.__name__,
            },
        )
        self.key = key
        self.source = source


# Nome usado pelo contrato do resolver de fontes.
NotFoundError = SourceNotFoundError


__all__ = [
    "ErrorPayload",
    "CASC_ERROR",
    "SOURCE_NOT_FOUND",
    "PARSE_ERROR",
    "UNKNOWN_ROOT_ELEMENT",
    "CONFIGURATOR_APPLY_ERROR",
    "ConfigurationAsCodeError",
    "SourceNotFoundError",
    "NotFoundError",
    "ParseError",
    "UnknownRootElementError",
    "ConfiguratorApplyError",
]
