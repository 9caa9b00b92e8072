"""
Descoberta recursiva de configurators (visão de documentação).

Este módulo percorre o grafo de configurators a partir dos root
configurators, seguindo os tipos declarados nos atributos, e produz a
lista achatada e sem duplicatas de todos os configurators alcançáveis.

O grafo de atributos é definido externamente e pode conter ciclos
(A → B → A), auto-referências e profundidade arbitrária.

Decisões arquiteturais:
    - Visitados são rastreados por identidade (`id`), nunca por igualdade
    - A checagem "já está no resultado" ocorre ANTES de expandir
    - A travessia usa pilha explícita de geradores: mesma ordem de uma
      busca em profundidade pré-ordem, sem limite de recursão do interpretador
    - Tipos sem configurator registrado são ignorados silenciosamente

Invariantes:
    - A travessia termina para qualquer grafo finito
    - Cada configurator aparece exatamente uma vez no resultado
    - A mesma entrada sempre produz a mesma ordem

Limites explícitos:
    - Não aplica configuração
    - Não mantém cache: a lista é reconstruída a cada chamada
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Set

from config_as_code.core.configurator.configurator import Configurator, ordered_attributes


Lookup = Callable[[object], Optional[Configurator]]

_DONE = object()


def _nested(configurator: Configurator, lookup: Lookup) -> Iterator[Configurator]:
    for attribute in ordered_attributes(configurator):
        found = lookup(attribute.type)
        if found is None:
            continue
        yield from found.get_configurators()


def discover_configurators(roots: Iterable[Configurator], lookup: Lookup) -> List[Configurator]:
    """
    Enumera todos os configurators alcançáveis a partir dos roots.

    Args:
        roots (Iterable[Configurator]): Root configurators, na ordem de registro.
        lookup (Callable): Resolução tipo → configurator (tipicamente
            `ConfiguratorRegistry.lookup`); retorna None para tipos não configuráveis.

    Returns:
        List[Configurator]: Roots e configurators aninhados, cada um uma única vez,
            em pré-ordem de profundidade.
    """
    result: List[Configurator] = []
    visited: Set[int] = set()

    def _visit(configurator: Configurator) -> bool:
        key = id(configurator)
        if key in visited:
            return False
        visited.add(key)
        result.append(configurator)
        return True

    for root in roots:
        if not _visit(root):
            continue

        stack: List[Iterator[Configurator]] = [_nested(root, lookup)]
        while stack:
            child = next(stack[-1], _DONE)
            if child is _DONE:
                stack.pop()
                continue
            if _visit(child):
                stack.append(_nested(child, lookup))

    return result
