
"""
Atlas Interceptor - Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do Atlas Interceptor.

Objetivo:
- Permitir que o Builder rejeite argumentos inválidos de forma semântica
- Facilitar o mapeamento determinístico para InterceptorErrorPayload
- Evitar ValueError/TypeError genéricos em guardrails de construção

Regras:
- Falhas de Steps NÃO são encapsuladas aqui: o erro do Step é propagado
  exatamente como foi lançado.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class InterceptorException(Exception):
    """Base class para exceções internas do Atlas Interceptor.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __post_init__(self) -> None:
        # mantém `args` coerente para repr/pickle de Exception
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Construção
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidArgument(InterceptorException, TypeError):
    """Argumento inválido na construção do pipeline (vazio ou não-callable)."""
