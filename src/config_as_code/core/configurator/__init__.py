"""
# Configurators — contrato e registro

Este pacote define o **contrato** que todo handler de seção deve satisfazer
e o **registro** que o engine consulta para despachar chaves do documento.

## Componentes

- **attribute**
  - `Attribute`: slot `(name, type)` exposto por um configurator
- **configurator**
  - `Configurator` (Protocol): `configure`, `describe`, `get_configurators`
  - `RootElementConfigurator` (Protocol): configurator com `name`
- **registry**
  - `ConfiguratorRegistry`: lookup por nome (roots) e por tipo

## Limites Explícitos

- Não implementa configurators concretos (responsabilidade do host)
- Não percorre o grafo de atributos (ver `core.engine.discovery`)
"""

from .attribute import Attribute
from .configurator import (
    Configurator,
    RootElementConfigurator,
    configurator_label,
    describe_configurator,
    ordered_attributes,
)
from .registry import ConfiguratorRegistry, DuplicateConfiguratorError

__all__ = [
    "Attribute",
    "Configurator",
    "RootElementConfigurator",
    "ConfiguratorRegistry",
    "DuplicateConfiguratorError",
    "configurator_label",
    "describe_configurator",
    "ordered_attributes",
]
