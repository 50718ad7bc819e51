# src/atlas_interceptor/core/config/__init__.py
"""
Camada de configuração do Atlas Interceptor.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Geração de hash canônico para rastreabilidade

A configuração não contém lógica de execução: ela apenas declara quais
Steps compõem o pipeline, quais tipos são terminais e se a invocação deve
ser registrada no Event Log.
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    StepResolutionError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "StepResolutionError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
]
