# src/atlas_interceptor/core/response.py
"""
Colaborador TerminalResponse do Atlas Interceptor.

Um TerminalResponse sinaliza "pare de transformar: esta é a resposta final".
Quando um Step produz (ou o input já é) uma instância de um tipo terminal,
o Executor a repassa inalterada até o fim da invocação.

O reconhecimento é feito exclusivamente por tipo (`isinstance`), nunca por
inspeção estrutural dos campos.

Componentes:
    - TerminalResponse → classe marcadora base
    - ApiResponse      → resposta HTTP pronta (body, headers, status_code)
    - is_terminal_response → predicado usado pelo Executor

Limites explícitos:
    - Não serializa nem envia respostas
    - Não conhece framework HTTP, roteamento ou formato de request
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Type


class TerminalResponse:
    """Marcador de resposta final.

    Subclasses devem permanecer truthy: o Executor verifica o tipo terminal
    antes da checagem de falsy, mas um `__bool__` falso não faz sentido para
    uma resposta pronta.
    """


@dataclass(frozen=True)
class ApiResponse(TerminalResponse):
    """Resposta HTTP pronta, devolvida tal como está ao gateway."""

    body: Any
    headers: Dict[str, str] = field(default_factory=dict)
    status_code: int = 200


DEFAULT_TERMINAL_TYPES: Tuple[Type[Any], ...] = (TerminalResponse,)


def is_terminal_response(
    value: Any,
    terminal_types: Tuple[Type[Any], ...] = DEFAULT_TERMINAL_TYPES,
) -> bool:
    return isinstance(value, terminal_types)
