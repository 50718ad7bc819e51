# src/atlas_interceptor/__init__.py
"""
Atlas Interceptor - pipeline sequencial de Steps para request/response.

Um `Interceptor` aplica uma lista ordenada de funções (síncronas ou
assíncronas) ao valor de entrada, da esquerda para a direita, interrompendo
o processamento quando:
    - um Step produz um TerminalResponse (ex.: `ApiResponse`)
    - um Step produz um valor falsy (None, False, 0, "")
    - um Step lança erro (propagado sem alteração)

Arquitetura em alto nível:
    - core.pipeline     → contrato de Step, Builder (registry) e estado de invocação
    - core.engine       → Executor (`Interceptor`) e construção via configuração
    - core.config       → carregamento, merge e hashing de configuração
    - core.traceability → Event Log opcional de invocações

Uso:
    interceptor = Interceptor(authenticate, normalize_body, enrich)
    result = await interceptor.run(request)
"""

from .core.engine import Interceptor, build_interceptor, build_interceptor_from_files, is_falsy
from .core.exceptions import InterceptorException, InvalidArgument
from .core.response import ApiResponse, TerminalResponse, is_terminal_response
from .core.traceability import EventLog

__all__ = [
    "ApiResponse",
    "EventLog",
    "Interceptor",
    "InterceptorException",
    "InvalidArgument",
    "TerminalResponse",
    "build_interceptor",
    "build_interceptor_from_files",
    "is_falsy",
    "is_terminal_response",
]
