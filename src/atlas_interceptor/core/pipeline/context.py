# src/atlas_interceptor/core/pipeline/context.py
"""
Contexto de uma invocação do pipeline.

Este módulo define o `InvocationContext`, a estrutura que acompanha uma
única chamada de `Interceptor.run`, registrando eventos estruturados de
execução.

Princípios fundamentais:
    - Isolamento por invocação (cada chamada possui seu próprio contexto)
    - Ausência de estado compartilhado entre invocações concorrentes
    - Eventos estruturados, nunca strings livres

Invariantes:
    - Todo evento inclui `run_id`, `event` e `timestamp`
    - A lista de eventos cresce de forma incremental e ordenada
    - O contexto não sobrevive à invocação, exceto via EventLog explícito

Limites explícitos:
    - Não executa Steps
    - Não decide short-circuit
    - Não persiste dados automaticamente
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InvocationContext:
    """
    Contexto privado de uma invocação.

    Campos:
    - run_id: identificador único da invocação
    - created_at: timestamp UTC de criação
    - meta: metadados livres (ex.: config_hash, número de Steps)
    - events: log estruturado de eventos da invocação
    """

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=_utcnow)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(
        self,
        *,
        event: str,
        step_index: Optional[int] = None,
        step_name: Optional[str] = None,
        **extra: Any,
    ) -> None:
        record: Dict[str, Any] = {
            "run_id": self.run_id,
            "event": event,
            "timestamp": _utcnow().isoformat(),
        }
        if step_index is not None:
            record["step_index"] = step_index
        if step_name is not None:
            record["step_name"] = step_name
        record.update(extra)
        self.events.append(record)

    def events_of(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["event"] == event]
