# src/atlas_interceptor/core/config/hashing.py
"""
Hashing canônico de configuração.

O hash identifica estruturalmente a configuração que originou um
`Interceptor` e é gravado no Event Log (`config_hash`) e nos metadados de
cada invocação, permitindo associar eventos à configuração efetiva.

Política (v1): JSON canônico (chaves ordenadas, separadores compactos,
UTF-8) + SHA-256.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 hexadecimal (64 caracteres) da configuração efetiva.

    Configurações estruturalmente equivalentes, independentemente da ordem
    original das chaves, produzem o mesmo hash.

    Raises:
        TypeError: Se `config` não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
