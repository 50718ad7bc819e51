# src/atlas_interceptor/core/engine/__init__.py
"""
Engine do Atlas Interceptor.

Componentes principais:
    - engine  → `Interceptor`, o Executor do fold com short-circuit
    - factory → construção de `Interceptor` a partir de configuração

Invariantes:
    - Steps são invocados estritamente em ordem, um de cada vez
    - Cada Step é invocado no máximo uma vez por invocação
    - Após um short-circuit, nenhum Step adicional é invocado
"""

from .engine import Interceptor, is_falsy
from .factory import build_interceptor, build_interceptor_from_files, resolve_path

__all__ = [
    "Interceptor",
    "build_interceptor",
    "build_interceptor_from_files",
    "is_falsy",
    "resolve_path",
]
