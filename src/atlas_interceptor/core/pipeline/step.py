# src/atlas_interceptor/core/pipeline/step.py
"""
Contrato canônico de Step do Atlas Interceptor.

Um Step é a menor unidade executável do pipeline: um callable de um único
argumento que recebe o valor corrente (request/response/payload) e devolve
o próximo valor, de forma síncrona ou assíncrona.

Responsabilidades do módulo:
    - declarar o protocolo `Step`
    - validar que um candidato é um Step aceitável
    - normalizar o retorno de qualquer Step para um awaitable
      (`ensure_awaitable`), de modo que o Executor lide com um único tipo

Princípios fundamentais:
    - Steps não conhecem o Executor nem outros Steps
    - Steps não controlam ordem de execução nem short-circuit
    - Conformidade é garantida por duck typing (@runtime_checkable)

Limites explícitos:
    - Não executa pipeline
    - Não trata exceções de Steps
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step.

    Qualquer callable de um argumento satisfaz o protocolo. O retorno pode ser
    um valor ou um awaitable de um valor; o Step pode levantar exceções, que
    serão propagadas sem alteração pelo Executor.
    """

    def __call__(self, value: Any) -> Any:
        ...


def accepts_single_argument(fn: Any) -> bool:
    """Indica se `fn` pode ser chamado com exatamente um argumento posicional.

    Callables sem assinatura introspectável (alguns builtins e extensões C)
    são aceitos: a validação não deve rejeitar o que não consegue provar
    inválido.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return True

    try:
        sig.bind(object())
    except TypeError:
        return False
    return True


def invalid_step_reason(candidate: Any) -> Optional[str]:
    """Retorna o motivo pelo qual `candidate` não é um Step, ou None se for válido."""
    if not callable(candidate):
        return "not_callable"
    if not accepts_single_argument(candidate):
        return "wrong_arity"
    return None


def step_name(step: Any) -> str:
    name = getattr(step, "__name__", None) or getattr(step, "__qualname__", None)
    if not name:
        name = type(step).__name__
    return str(name)


async def _resolved(value: Any) -> Any:
    return value


def ensure_awaitable(result: Any) -> Awaitable[Any]:
    """
    Normaliza o retorno de um Step para um awaitable.

    - awaitables (corrotinas, Futures, objetos com `__await__`) são devolvidos
      como estão
    - qualquer outro valor é embrulhado em uma corrotina já resolvida

    Este adapter é a única fronteira sync/async do pipeline.
    """
    if inspect.isawaitable(result):
        return result
    return _resolved(result)
