# src/atlas_interceptor/core/engine/engine.py
"""
Executor do pipeline do Atlas Interceptor.

O `Interceptor` é o objeto pipeline: construído uma vez a partir de Steps
validados pelo `StepRegistry`, e invocado quantas vezes for necessário via
`run(input)` (ou chamando a própria instância).

Protocolo de execução (fold estrito da esquerda para a direita):

    Para cada Step, com o valor corrente `v`:
    1. estado FAILED                 → não invoca; propaga o erro registrado
    2. estado TERMINAL ou FALSY      → não invoca; propaga o valor retido
    3. `v` é TerminalResponse        → TERMINAL; propaga `v`
       `v` é falsy                   → FALSY; propaga `v`
       senão invoca o Step           → resultado vira `v`, ou FAILED com o erro

Ao final, o valor corrente é o resultado; em FAILED, o erro registrado é
levantado exatamente como o Step o produziu.

Decisões arquiteturais:
    - O estado da invocação é um `ChainOutcome` imutável, local à chamada
    - TerminalResponse é verificado antes de falsy
    - A checagem de short-circuit precede a inspeção do valor
    - Sem retry, sem fallback, sem encapsulamento de erro

Limites explícitos:
    - Não cancela nem aplica timeout (responsabilidade do chamador)
    - Não executa Steps em paralelo dentro de uma invocação
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Sequence, Tuple, Type

from atlas_interceptor.core.errors import step_failure
from atlas_interceptor.core.pipeline.context import InvocationContext
from atlas_interceptor.core.pipeline.registry import StepRegistry
from atlas_interceptor.core.pipeline.step import Step, ensure_awaitable, step_name
from atlas_interceptor.core.pipeline.types import ChainOutcome
from atlas_interceptor.core.response import DEFAULT_TERMINAL_TYPES, is_terminal_response
from atlas_interceptor.core.traceability.event_log import EventLog


_FALSY_SCALARS = (bool, int, float, complex, Decimal, Fraction, str, bytes)


def is_falsy(value: Any) -> bool:
    """
    Indica se `value` representa "ausência de valor" para o pipeline.

    Falsy: None, False, zero numérico, "" e b"". Contêineres vazios ({} / [])
    são payloads válidos e não interrompem o pipeline.

    Diverge da truthiness do Python (`bool({})` é False): segue a regra do
    JavaScript, onde `{}` e `[]` são verdadeiros.
    """
    if value is None:
        return True
    if isinstance(value, _FALSY_SCALARS):
        return not value
    return False


class Interceptor:
    """Pipeline imutável de Steps com um único ponto de execução: `run`."""

    __slots__ = ("_registry", "_terminal_types", "_event_log", "_meta")

    def __init__(
        self,
        *steps: Any,
        terminal_types: Optional[Sequence[Type[Any]]] = None,
        event_log: Optional[EventLog] = None,
    ) -> None:
        registry = StepRegistry.build(*steps)
        self._init(registry, terminal_types=terminal_types, event_log=event_log)

    def _init(
        self,
        registry: StepRegistry,
        *,
        terminal_types: Optional[Sequence[Type[Any]]],
        event_log: Optional[EventLog],
        meta: Optional[dict] = None,
    ) -> None:
        self._registry = registry
        # tipos extras somam-se aos padrões, nunca os substituem
        extra = tuple(t for t in (terminal_types or ()) if t not in DEFAULT_TERMINAL_TYPES)
        self._terminal_types: Tuple[Type[Any], ...] = tuple(DEFAULT_TERMINAL_TYPES) + extra
        self._event_log = event_log
        self._meta = dict(meta or {})

    # -----------------------------
    # Construtores explícitos
    # -----------------------------
    @classmethod
    def _from_registry(
        cls,
        registry: StepRegistry,
        *,
        terminal_types: Optional[Sequence[Type[Any]]] = None,
        event_log: Optional[EventLog] = None,
        meta: Optional[dict] = None,
    ) -> "Interceptor":
        obj = cls.__new__(cls)
        obj._init(registry, terminal_types=terminal_types, event_log=event_log, meta=meta)
        return obj

    @classmethod
    def of(cls, *steps: Any, **kwargs: Any) -> "Interceptor":
        """Forma variádica explícita: `Interceptor.of(f1, f2, ...)`."""
        return cls._from_registry(StepRegistry.of(*steps), **kwargs)

    @classmethod
    def from_list(cls, steps: Sequence[Any], **kwargs: Any) -> "Interceptor":
        """Forma coleção explícita: `Interceptor.from_list([f1, f2, ...])`."""
        return cls._from_registry(StepRegistry.from_list(steps), **kwargs)

    def __len__(self) -> int:
        return len(self._registry)

    @property
    def event_log(self) -> Optional[EventLog]:
        return self._event_log

    def __repr__(self) -> str:
        return f"Interceptor({', '.join(self._registry.names())})"

    # -----------------------------
    # Execução
    # -----------------------------
    async def __call__(self, value: Any) -> Any:
        return await self.run(value)

    async def run(self, value: Any) -> Any:
        ctx = InvocationContext(meta={"steps": len(self._registry), **self._meta})
        ctx.log(event="chain.started", meta=dict(ctx.meta))

        outcome = ChainOutcome.start(value)
        try:
            for index, step in enumerate(self._registry):
                outcome = await self._advance(ctx, index, step, outcome)
        finally:
            ctx.log(event="chain.finished", state=outcome.state.value)
            if self._event_log is not None:
                self._event_log.extend(ctx)

        return outcome.unwrap()

    async def _advance(
        self,
        ctx: InvocationContext,
        index: int,
        step: Step,
        outcome: ChainOutcome,
    ) -> ChainOutcome:
        name = step_name(step)

        if outcome.short_circuited:
            ctx.log(event="step.skipped", step_index=index, step_name=name, reason=outcome.state.value)
            return outcome

        current = outcome.value
        if is_terminal_response(current, self._terminal_types):
            outcome = outcome.terminal()
        elif is_falsy(current):
            outcome = outcome.falsy()

        if outcome.short_circuited:
            ctx.log(event="chain.short_circuit", step_index=index, state=outcome.state.value)
            ctx.log(event="step.skipped", step_index=index, step_name=name, reason=outcome.state.value)
            return outcome

        ctx.log(event="step.invoked", step_index=index, step_name=name)
        try:
            result = await ensure_awaitable(step(current))
        except Exception as exc:
            failed = outcome.failed(exc)
            ctx.log(
                event="step.failed",
                step_index=index,
                step_name=name,
                error=step_failure(exc=exc, step_index=index, step_name=name).to_dict(),
            )
            return failed

        ctx.log(event="step.completed", step_index=index, step_name=name)
        return outcome.continuing(result)
