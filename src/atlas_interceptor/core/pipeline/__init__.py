# src/atlas_interceptor/core/pipeline/__init__.py
"""
# Pipeline Core - Atlas Interceptor

Contratos e estruturas fundamentais de um pipeline.

## Componentes

- **step**: `Step` (Protocol), validação de candidatos e `ensure_awaitable`
- **registry**: `StepRegistry`, o Builder (formas variádica e coleção)
- **types**: `ChainState` e `ChainOutcome`, o estado imutável de uma invocação
- **context**: `InvocationContext`, eventos estruturados de uma invocação

## Invariantes

- Um pipeline possui ao menos um Step
- A ordem de declaração é a ordem de execução
- O estado de uma invocação nunca é visível a outra
"""

from .context import InvocationContext
from .registry import StepRegistry, normalize_arguments, validate_steps
from .step import Step, ensure_awaitable, step_name
from .types import ChainOutcome, ChainState

__all__ = [
    "ChainOutcome",
    "ChainState",
    "InvocationContext",
    "Step",
    "StepRegistry",
    "ensure_awaitable",
    "normalize_arguments",
    "step_name",
    "validate_steps",
]
