# tests/conftest.py
"""
Fixtures compartilhados para testes do Config as Code.

Este módulo define fixtures reutilizáveis que fornecem:
- configurators dummy (duck typing, sem herança)
- registry vazio e isolado por teste
- relógio determinístico para `last_time_loaded`
- fábrica de engine isolada do ambiente real do processo

Decisões arquiteturais:
    - Configurators dummy registram cada valor aplicado em `applied`
    - O engine de teste nunca lê `os.environ`: o ambiente é injetado
    - O arquivo default aponta para `tmp_path`, nunca para o cwd real

Limites explícitos:
    - Não implementa configurators reais de domínio
    - Não substitui testes de integração com o host
"""

from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def DummyConfigurator():
    """
    Fixture factory que fornece uma classe de configurator duck-typed.

    A classe retornada:
    - expõe `name` (apenas quando informado, tornando-a root), `target`
    - registra cada valor recebido por `configure` em `applied`
    - levanta `fail_with` em `configure`, quando informado
    - devolve `nested` em `get_configurators` (default: `[self]`)

    Returns:
        type: Classe _DummyConfigurator instanciável pelos testes.
    """

    class _DummyConfigurator:
        def __init__(
            self,
            name=None,
            target=None,
            attributes=None,
            nested=None,
            fail_with=None,
        ):
            if name is not None:
                self.name = name
            self.target = target
            self.attributes = list(attributes or [])
            self.nested = nested
            self.fail_with = fail_with
            self.applied = []

        def configure(self, value):
            if self.fail_with is not None:
                raise self.fail_with
            self.applied.append(value)
            return value

        def describe(self):
            return list(self.attributes)

        def get_configurators(self):
            return [self] if self.nested is None else list(self.nested)

        def __repr__(self):
            return f"<Dummy {getattr(self, 'name', None) or self.target}>"

    return _DummyConfigurator


@pytest.fixture
def registry():
    from config_as_code.core.configurator.registry import ConfiguratorRegistry

    return ConfiguratorRegistry()


@pytest.fixture
def fixed_clock():
    """
    Relógio determinístico: cada chamada avança um segundo a partir de
    2026-01-16T00:00:00Z.
    """
    state = {"now": datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc)}

    def _clock():
        current = state["now"]
        state["now"] = current + timedelta(seconds=1)
        return current

    return _clock


@pytest.fixture
def make_engine(registry, fixed_clock, tmp_path):
    """
    Fábrica de ConfigurationEngine isolada do processo.

    Args aceitos pela fábrica:
        config_path: valor da variável CASC_CONFIG (None = ausente)
        properties: propriedades de sistema injetadas
        default_path: arquivo default (padrão: tmp_path / "casc.yaml")
    """
    from config_as_code.core.engine.engine import ConfigurationEngine

    def _make(config_path=None, properties=None, default_path=None):
        environ = {} if config_path is None else {"CASC_CONFIG": str(config_path)}
        return ConfigurationEngine(
            registry=registry,
            properties=properties,
            environ=environ,
            default_path=str(default_path or tmp_path / "casc.yaml"),
            clock=fixed_clock,
        )

    return _make


@pytest.fixture
def write_yaml(tmp_path):
    """Escreve um arquivo YAML (caminho relativo a tmp_path) e devolve seu Path."""

    def _write(relative: str, content: str):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
