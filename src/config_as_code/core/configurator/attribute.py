"""
Descritor de atributo de configurator.

Um atributo é um slot de configuração nomeado e tipado exposto por um
configurator. O engine o usa apenas para encontrar o próximo configurator
durante a descoberta do grafo; atributos nunca são mutados.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Attribute:
    """
    Slot `(name, type)` exposto por um configurator.

    Campos:
        - name: nome da chave no documento
        - type: tipo declarado do valor; usado em `registry.lookup(type)`
        - multiple: o valor é uma lista de `type`
    """
    name: str
    type: Any
    multiple: bool = False

    @property
    def type_name(self) -> str:
        if isinstance(self.type, type):
            return self.type.__qualname__
        return str(self.type)
