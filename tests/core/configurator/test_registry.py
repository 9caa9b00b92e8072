# tests/core/configurator/test_registry.py
"""
Testes do ConfiguratorRegistry.

Os testes asseguram que:
- roots são endereçáveis por nome e preservam a ordem de registro
- configurators são endereçáveis por tipo
- lookups não encontrados retornam None (não são erro no registry)
- nomes e tipos duplicados são rejeitados sem corromper o estado

Limites explícitos:
    - Não valida dispatch (ver testes do engine)
    - Não valida descoberta do grafo
"""

import pytest

try:
    from config_as_code.core.configurator import (
        Configurator,
        ConfiguratorRegistry,
        DuplicateConfiguratorError,
        RootElementConfigurator,
    )
except Exception as e:  # noqa: BLE001
    ConfiguratorRegistry = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing ConfiguratorRegistry. Implement:"
            "- src/config_as_code/core/configurator/registry.py (ConfiguratorRegistry, DuplicateConfiguratorError)"
            f"Import error: {_IMPORT_ERR}"
        )


class Jenkins:
    pass


class Tool:
    pass


def test_roots_are_looked_up_by_name_in_registration_order(registry, DummyConfigurator):
    _require_imports()
    jenkins = DummyConfigurator(name="jenkins", target=Jenkins)
    tool = DummyConfigurator(name="tool")
    registry.add_root(jenkins)
    registry.add_root(tool)

    assert registry.lookup_root("jenkins") is jenkins
    assert registry.lookup_root("tool") is tool
    assert registry.roots() == [jenkins, tool]
    assert registry.list() == [jenkins, tool]


def test_root_with_target_is_also_looked_up_by_type(registry, DummyConfigurator):
    _require_imports()
    jenkins = DummyConfigurator(name="jenkins", target=Jenkins)
    registry.add_root(jenkins)
    assert registry.lookup(Jenkins) is jenkins


def test_nested_configurator_is_looked_up_by_type_only(registry, DummyConfigurator):
    _require_imports()
    nested = DummyConfigurator(target=Tool)
    registry.add(nested)
    assert registry.lookup(Tool) is nested
    assert registry.roots() == []


def test_lookup_miss_returns_none(registry):
    _require_imports()
    assert registry.lookup_root("unknown") is None
    assert registry.lookup(Tool) is None
    assert registry.lookup("not-a-type") is None


def test_duplicate_root_name_is_rejected(registry, DummyConfigurator):
    """
    Verifica que dois roots com o mesmo nome não coexistem.

    Invariantes:
        - O primeiro registro permanece ativo
        - A exceção é específica (`DuplicateConfiguratorError`)
    """
    _require_imports()
    first = DummyConfigurator(name="jenkins")
    registry.add_root(first)
    with pytest.raises(DuplicateConfiguratorError):
        registry.add_root(DummyConfigurator(name="jenkins"))
    assert registry.lookup_root("jenkins") is first
    assert registry.roots() == [first]


def test_duplicate_target_type_is_rejected(registry, DummyConfigurator):
    _require_imports()
    registry.add(DummyConfigurator(target=Tool))
    with pytest.raises(DuplicateConfiguratorError):
        registry.add(DummyConfigurator(target=Tool))


def test_invalid_registrations_are_rejected(registry, DummyConfigurator):
    _require_imports()
    with pytest.raises(ValueError):
        registry.add_root(DummyConfigurator(name="  "))
    with pytest.raises(ValueError):
        registry.add(DummyConfigurator(target=None))


def test_dummy_satisfies_configurator_protocols(DummyConfigurator):
    _require_imports()
    root = DummyConfigurator(name="jenkins", target=Jenkins)
    nested = DummyConfigurator(target=Tool)
    assert isinstance(root, RootElementConfigurator)
    assert isinstance(nested, Configurator)
    assert not isinstance(nested, RootElementConfigurator)
