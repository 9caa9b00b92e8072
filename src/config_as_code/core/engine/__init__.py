"""
Engine de configuração como código.

Este pacote contém a implementação responsável por **aplicar** documentos
de configuração ao estado vivo e por **descobrir** o grafo de configurators
para documentação.

Componentes principais:
    - engine    → ciclo de carga (fontes → parse → dispatch) e estado visível
    - discovery → travessia do grafo de atributos com visitados por identidade

Princípios fundamentais:
    - Carga e descoberta são responsabilidades separadas
    - O estado visível muda apenas ao final de um ciclo bem-sucedido
    - Nenhuma decisão silenciosa: chaves desconhecidas são erro

Limites explícitos:
    - Não implementa configurators concretos
    - Não depende da camada de transporte da página de gestão
"""

from .discovery import discover_configurators
from .engine import ConfigurationEngine, LoadResult, SourceResult, bootstrap

__all__ = [
    "ConfigurationEngine",
    "LoadResult",
    "SourceResult",
    "bootstrap",
    "discover_configurators",
]
