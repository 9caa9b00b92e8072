"""
Registro de configurators.

Este módulo define o `ConfiguratorRegistry`, lookup de processo que associa:
    - um nome estável → root configurator (chaves de topo do documento)
    - um tipo → configurator (alcançado ao percorrer atributos)

O registry é populado uma única vez na inicialização, por chamadas
explícitas de registro (sem reflexão em runtime); do ponto de vista do
engine ele é somente leitura.

Decisões arquiteturais:
    - A ordem de registro é preservada e define a ordem dos roots
    - Nomes e tipos duplicados são erro estrutural no momento do registro
    - Lookups não encontrados retornam None; cabe ao chamador decidir se
      isso é falha (dispatch de root) ou não (descoberta)

Limites explícitos:
    - Não aplica configuração
    - Não percorre o grafo de atributos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .configurator import Configurator, RootElementConfigurator


class DuplicateConfiguratorError(ValueError):
    """
    Exceção levantada quando um nome de root element ou um tipo alvo
    já possui configurator registrado.

    Invariantes:
        - O estado do registry não é alterado pela tentativa rejeitada
    """


@dataclass
class ConfiguratorRegistry:
    """
    Lookup canônico de configurators por nome e por tipo.

    Invariantes:
        - Cada nome de root element é único
        - Cada tipo alvo possui no máximo um configurator
        - `roots()` reflete exatamente a ordem de registro
    """

    _roots: Dict[str, RootElementConfigurator] = field(default_factory=dict, init=False, repr=False)
    _by_type: Dict[type, Configurator] = field(default_factory=dict, init=False, repr=False)
    _order: List[Configurator] = field(default_factory=list, init=False, repr=False)

    def add(self, configurator: Configurator) -> None:
        target = getattr(configurator, "target", None)
        if not isinstance(target, type):
            raise ValueError("configurator.target must be a type")
        if target in self._by_type:
            raise DuplicateConfiguratorError(f"Duplicate configurator for type: {target.__qualname__}")

        self._by_type[target] = configurator
        self._order.append(configurator)

    def add_root(self, configurator: RootElementConfigurator) -> None:
        name = getattr(configurator, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError("configurator.name must be a non-empty string")
        if name in self._roots:
            raise DuplicateConfiguratorError(f"Duplicate root element: {name}")

        target = getattr(configurator, "target", None)
        if isinstance(target, type):
            self.add(configurator)
        else:
            self._order.append(configurator)
        self._roots[name] = configurator

    def lookup_root(self, name: str) -> Optional[RootElementConfigurator]:
        return self._roots.get(name)

    def lookup(self, target: object) -> Optional[Configurator]:
        if not isinstance(target, type):
            return None
        return self._by_type.get(target)

    def roots(self) -> List[RootElementConfigurator]:
        return list(self._roots.values())

    def list(self) -> List[Configurator]:
        return list(self._order)
