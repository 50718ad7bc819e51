# src/atlas_interceptor/core/traceability/event_log.py
"""
Event Log - rastreabilidade de invocações do Atlas Interceptor.

Este módulo define o `EventLog`, o agregador opcional de eventos
estruturados produzidos pelas invocações de um `Interceptor`.

Cada invocação registra seus eventos em um `InvocationContext` privado;
ao término (com sucesso ou falha), o Executor anexa o bloco completo ao
EventLog, preservando a ordem interna da invocação.

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente fora do Executor
    - Eventos de uma invocação são anexados em bloco, nunca intercalados
    - O Event Log é serializável e reconstruível (round-trip JSON)

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - O formato de persistência é JSON determinístico
    - Registrar eventos nunca altera valor ou erro propagados

Limites explícitos:
    - Não executa pipeline
    - Não decide short-circuit
    - Não faz rotação nem retenção de eventos
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class EventLog:
    """Coleção ordenada de eventos de invocações."""

    config_hash: Optional[str] = None
    events: List[Dict[str, Any]] = field(default_factory=list)

    def extend(self, ctx: Any) -> None:
        """Anexa todos os eventos de um InvocationContext."""
        self.events.extend(dict(e) for e in ctx.events)

    def run_ids(self) -> List[str]:
        seen: List[str] = []
        for e in self.events:
            rid = e.get("run_id")
            if rid is not None and rid not in seen:
                seen.append(rid)
        return seen

    def for_run(self, run_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("run_id") == run_id]

    def of_type(self, event: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("event") == event]

    def clear(self) -> None:
        self.events.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config_hash": self.config_hash,
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventLog":
        if not isinstance(data, dict):
            raise TypeError(f"EventLog serializado deve ser dict, recebido: {type(data).__name__}")
        events = data.get("events") or []
        if not isinstance(events, list):
            raise TypeError("EventLog.events deve ser uma lista")
        return cls(config_hash=data.get("config_hash"), events=[dict(e) for e in events])


def save_event_log(log: EventLog, path: Path) -> None:
    """
    Persiste o Event Log em JSON determinístico.

    Valores não serializáveis em eventos (ex.: objetos de domínio em campos
    extras) são convertidos com `str`.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    raw = json.dumps(log.to_dict(), ensure_ascii=False, sort_keys=True, indent=2, default=str)
    path.write_text(raw + "\n", encoding="utf-8")


def load_event_log(path: Path) -> EventLog:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Event Log não encontrado: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    return EventLog.from_dict(data)
