"""
Atlas Interceptor - Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do Atlas Interceptor.
Payloads são usados para registro estruturado (Event Log) e devem ser:

- explícitos
- serializáveis
- rastreáveis

Um payload nunca substitui a exceção propagada ao chamador.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import InterceptorException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InterceptorErrorPayload:
    """
    Payload canônico de erro do Atlas Interceptor.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Construção
INTERCEPTOR_INVALID_ARGUMENT = "INTERCEPTOR_INVALID_ARGUMENT"

# Execução
INTERCEPTOR_STEP_FAILURE = "INTERCEPTOR_STEP_FAILURE"

# Configuração
CONFIG_STEP_UNRESOLVED = "CONFIG_STEP_UNRESOLVED"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def _describe(exc: BaseException) -> str:
    # `__str__` de exceções arbitrárias pode levantar
    try:
        return str(exc)
    except Exception:
        return exc.__class__.__name__


def invalid_argument(
    *,
    reason: str,
    index: Optional[int] = None,
    received: Optional[str] = None,
    hint: str = "Forneça uma ou mais funções de um argumento, ou uma única lista dessas funções.",
) -> InterceptorErrorPayload:
    return InterceptorErrorPayload(
        type=INTERCEPTOR_INVALID_ARGUMENT,
        message="Argumento inválido para construção do pipeline",
        details={
            "reason": reason,
            "index": index,
            "received": received,
        },
        hint=hint,
    )


def step_failure(
    *,
    exc: BaseException,
    step_index: int,
    step_name: str,
    hint: str = "O erro foi propagado sem alteração ao chamador. Nenhum retry é aplicado.",
) -> InterceptorErrorPayload:
    return InterceptorErrorPayload(
        type=INTERCEPTOR_STEP_FAILURE,
        message=_describe(exc) or "Falha inesperada durante a execução do Step",
        details={
            "step_index": step_index,
            "step_name": step_name,
            "exc_type": exc.__class__.__name__,
        },
        hint=hint,
    )


def step_unresolved(
    *,
    path: str,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o caminho 'pacote.modulo:atributo' declarado em interceptor.steps.",
) -> InterceptorErrorPayload:
    return InterceptorErrorPayload(
        type=CONFIG_STEP_UNRESOLVED,
        message="Step declarado na configuração não pôde ser resolvido",
        details={
            "path": path,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def exception_to_payload(exc: InterceptorException) -> InterceptorErrorPayload:
    """Converte uma InterceptorException no payload canônico.

    O código do erro é o nome da classe (estável), como no Engine do Atlas.
    """
    return InterceptorErrorPayload(
        type=exc.__class__.__name__,
        message=_describe(exc) or "Erro do interceptor",
        details=dict(exc.details or {}),
        hint=exc.hint,
    )
