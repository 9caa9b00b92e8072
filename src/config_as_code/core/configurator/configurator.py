"""
Contrato canônico de Configurator.

Um configurator é a unidade polimórfica capaz de:
    - aplicar um fragmento de documento ao estado vivo (`configure`)
    - descrever seu conjunto de atributos (`describe`)
    - enumerar os configurators aninhados que representa (`get_configurators`)

Papéis:
    - root configurator: endereçável por uma chave de topo (`name`)
    - nested configurator: endereçável apenas por tipo (`target`), alcançado
      via atributos de outro configurator

Princípios fundamentais:
    - Conformidade por duck typing (@runtime_checkable), sem herança obrigatória
    - Configurators não conhecem o engine nem o registry
    - A implementação interna de cada configurator é externa a este pacote
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from .attribute import Attribute


@runtime_checkable
class Configurator(Protocol):
    """
    Contrato mínimo de um configurator.

    Atributos obrigatórios:
        - target: tipo configurado (chave de `lookup(type)`); pode ser None
          para root configurators que não representam um tipo

    Invariantes:
        - `describe()` não muta estado
        - `get_configurators()` devolve, tipicamente, `[self]`; configurators
          de tipos heterogêneos devolvem os configurators de cada subtipo
    """
    target: Optional[type]

    def configure(self, value: Any) -> Any:
        """Aplica o valor do documento ao estado vivo."""
        ...

    def describe(self) -> Iterable[Attribute]:
        ...

    def get_configurators(self) -> Sequence["Configurator"]:
        ...


@runtime_checkable
class RootElementConfigurator(Configurator, Protocol):
    """Configurator endereçável diretamente por uma chave de topo do documento."""
    name: str


def ordered_attributes(configurator: Configurator) -> List[Attribute]:
    """
    Atributos de um configurator em ordem determinística.

    Sequências preservam a ordem declarada; conjuntos (sem ordem) são
    ordenados por nome.
    """
    attributes = configurator.describe() or ()
    if isinstance(attributes, (set, frozenset)):
        return sorted(attributes, key=lambda a: a.name)
    return list(attributes)


def configurator_label(configurator: Configurator) -> str:
    name = getattr(configurator, "name", None)
    if isinstance(name, str) and name:
        return name
    target = getattr(configurator, "target", None)
    if isinstance(target, type):
        return target.__name__
    return configurator.__class__.__name__


def describe_configurator(configurator: Configurator) -> Dict[str, Any]:
    """Representação serializável de um configurator para telas e documentação."""
    target = getattr(configurator, "target", None)
    name = getattr(configurator, "name", None)
    return {
        "label": configurator_label(configurator),
        "root": isinstance(name, str) and bool(name),
        "target": target.__qualname__ if isinstance(target, type) else None,
        "attributes": [
            {
                "name": a.name,
                "type": a.type_name,
                "multiple": a.multiple,
            }
            for a in ordered_attributes(configurator)
        ],
    }
