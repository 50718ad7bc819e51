# src/atlas_interceptor/core/engine/factory.py
"""
Construção de `Interceptor` a partir de configuração declarativa.

Seção reconhecida:

    interceptor:
      steps:            # obrigatório; ordem declarada = ordem de execução
        - myapp.steps:authenticate
        - myapp.steps.normalize_body
      terminal_types:   # opcional
        - myapp.responses:Redirect
      trace: false      # opcional

Caminhos aceitam `pacote.modulo:atributo` ou `pacote.modulo.atributo`;
atributos aninhados são resolvidos com `.` após os dois-pontos.

Decisões arquiteturais:
    - Resolução de caminhos ocorre antes da validação do Builder
    - A validação dos Steps resolvidos é a mesma da construção direta
    - Com `trace: true` e sem EventLog explícito, um EventLog novo é criado
      e gravado com o hash da configuração

Limites explícitos:
    - `build_interceptor` não lê arquivos; `build_interceptor_from_files`
      delega a leitura e o merge a `core.config.loader`
    - Não executa o pipeline
"""

from __future__ import annotations

import importlib
from typing import Any, Dict, List, Optional

from atlas_interceptor.core.config.errors import StepResolutionError
from atlas_interceptor.core.config.hashing import compute_config_hash
from atlas_interceptor.core.config.loader import PathLike, load_config
from atlas_interceptor.core.errors import step_unresolved
from atlas_interceptor.core.exceptions import InvalidArgument
from atlas_interceptor.core.traceability.event_log import EventLog

from .engine import Interceptor


SECTION = "interceptor"


def resolve_path(path: str) -> Any:
    """
    Importa e devolve o objeto referenciado por `path`.

    Raises:
        StepResolutionError: Se o módulo ou atributo não existir.
    """
    if not isinstance(path, str) or not path.strip():
        raise StepResolutionError(
            f"Caminho inválido: {path!r}",
            payload=step_unresolved(path=repr(path)),
        )

    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")

    if not module_name or not attr_path:
        raise StepResolutionError(
            f"Caminho incompleto (esperado 'modulo:atributo'): {path}",
            payload=step_unresolved(path=path),
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise StepResolutionError(
            f"Módulo não encontrado para '{path}': {e}",
            payload=step_unresolved(path=path, exc_message=str(e)),
        ) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise StepResolutionError(
                f"Atributo '{part}' não encontrado em '{path}'",
                payload=step_unresolved(path=path, exc_message=str(e)),
            ) from e
    return obj


def _section(config: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(config, dict):
        raise InvalidArgument(
            message="Configuração deve ser um dict",
            details={"received": type(config).__name__},
        )
    section = config.get(SECTION)
    if not isinstance(section, dict):
        raise InvalidArgument(
            message=f"Seção '{SECTION}' ausente ou inválida na configuração",
            details={"received": type(section).__name__},
            hint=f"Declare '{SECTION}.steps' com ao menos um caminho de Step.",
        )
    return section


def _paths(section: Dict[str, Any], key: str, *, required: bool) -> List[str]:
    raw = section.get(key)
    if raw is None:
        if required:
            raise InvalidArgument(
                message=f"'{SECTION}.{key}' é obrigatório",
                details={"key": key},
            )
        return []
    if not isinstance(raw, list):
        raise InvalidArgument(
            message=f"'{SECTION}.{key}' deve ser uma lista",
            details={"key": key, "received": type(raw).__name__},
        )
    return list(raw)


def build_interceptor(
    config: Dict[str, Any],
    *,
    event_log: Optional[EventLog] = None,
) -> Interceptor:
    """
    Constrói um `Interceptor` a partir da configuração efetiva.

    Raises:
        InvalidArgument: Seção ausente/inválida, lista de Steps vazia ou
            algum Step resolvido não é callable com um argumento.
        StepResolutionError: Caminho de Step ou tipo terminal irresolvível.
    """
    section = _section(config)

    steps = [resolve_path(p) for p in _paths(section, "steps", required=True)]

    terminal_types = []
    for p in _paths(section, "terminal_types", required=False):
        t = resolve_path(p)
        if not isinstance(t, type):
            raise InvalidArgument(
                message="terminal_types deve referenciar classes",
                details={"path": p, "received": type(t).__name__},
            )
        terminal_types.append(t)

    config_hash = compute_config_hash(config)
    if event_log is None and bool(section.get("trace", False)):
        event_log = EventLog(config_hash=config_hash)

    return Interceptor.from_list(
        steps,
        terminal_types=tuple(terminal_types),
        event_log=event_log,
        meta={"config_hash": config_hash},
    )


def build_interceptor_from_files(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
    event_log: Optional[EventLog] = None,
) -> Interceptor:
    """
    Carrega defaults + override local e constrói o `Interceptor` resultante.

    O hash carimbado nos eventos (e no EventLog criado por `trace: true`) é o
    da configuração efetiva, após o deep-merge.

    Raises:
        ConfigError: Falhas de carregamento ou merge (ver `core.config.loader`).
        InvalidArgument: Seção ausente/inválida ou Step inválido.
        StepResolutionError: Caminho de Step ou tipo terminal irresolvível.
    """
    config = load_config(defaults_path=defaults_path, local_path=local_path)
    return build_interceptor(config, event_log=event_log)
