# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Interceptor.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas (YAML como string)
- um registrador de chamadas para verificar quais Steps foram invocados
- uma fábrica de Steps síncronos/assíncronos instrumentados

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Steps instrumentados utilizam closures em vez de mocks
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture executa pipeline real
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real.

    Os Steps apontam para `tests.fixtures.steps.request_steps`, um módulo
    importável sem dependências externas.
    """
    return """
interceptor:
  steps:
    - tests.fixtures.steps.request_steps:add_first_name
    - tests.fixtures.steps.request_steps:add_last_name
  terminal_types: []
  trace: false
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de override local: substitui a cadeia de Steps e liga o trace.

    Listas são sobrescritas por inteiro pelo deep-merge.
    """
    return """
interceptor:
  steps:
    - tests.fixtures.steps.request_steps:add_first_name
    - tests.fixtures.steps.request_steps.async_add_last_name
  trace: true
"""


# =====================================================
# Steps instrumentados
# =====================================================

@pytest.fixture
def call_log() -> list:
    """Lista onde Steps instrumentados registram seus nomes ao serem invocados."""
    return []


@pytest.fixture
def make_step(call_log):
    """
    Fábrica de Steps instrumentados.

    Uso:
        step = make_step("plus_one", lambda n: n + 1)
        step = make_step("boom", error=RuntimeError("x"), is_async=True)

    Cada invocação registra `name` em `call_log` antes de executar a lógica.
    """

    def _factory(name, fn=None, *, error=None, is_async=False):
        def _apply(value):
            call_log.append(name)
            if error is not None:
                raise error
            return fn(value) if fn is not None else value

        if is_async:
            async def step(value):
                return _apply(value)
        else:
            def step(value):
                return _apply(value)

        step.__name__ = name
        step.__qualname__ = name
        return step

    return _factory


@pytest.fixture
def sample_request() -> dict:
    """Request mínimo no formato de um gateway de API."""
    return {
        "queryString": {"test": "Testing"},
        "pathParams": {"userToken": "path/test"},
    }
