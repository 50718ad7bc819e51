# src/atlas_interceptor/core/pipeline/registry.py
"""
Registro estrutural de Steps do pipeline (Builder).

Este módulo define o `StepRegistry`, responsável por normalizar os
argumentos de construção do pipeline e validar a integridade estrutural
dos Steps antes de qualquer execução.

Formas de entrada aceitas:
    - (a) um ou mais Steps posicionais
    - (b) uma única coleção ordenada (list ou tuple) de Steps

Regra de forma:
    Se o primeiro e único argumento é uma coleção ordenada, trata como (b);
    caso contrário, todos os argumentos são tratados como (a). Misturar uma
    coleção com argumentos posicionais não é suportado: a coleção passa a ser
    um elemento não-callable e a validação falha.

Decisões arquiteturais:
    - A validação ocorre na construção, de forma síncrona
    - Erros estruturais são fatais: o pipeline nunca é criado
    - A ordem de declaração é a ordem de execução
    - O resultado é uma tupla imutável

Invariantes:
    - Um registry sempre possui ao menos um Step
    - Todo Step registrado é callable com um argumento
    - A lista de Steps nunca é estendida nem reordenada após a construção

Limites explícitos:
    - Não executa pipeline
    - Não interage com InvocationContext
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple

from atlas_interceptor.core.errors import invalid_argument
from atlas_interceptor.core.exceptions import InvalidArgument

from .step import Step, invalid_step_reason, step_name


_ORDERED_COLLECTIONS = (list, tuple)


def _invalid(reason: str, message: str, *, index: Any = None, received: Any = None) -> InvalidArgument:
    payload = invalid_argument(reason=reason, index=index, received=received)
    return InvalidArgument(message=message, details=payload.details, hint=payload.hint)


def normalize_arguments(args: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """
    Resolve a forma de entrada (variádica ou coleção) em uma tupla de candidatos.

    Raises:
        InvalidArgument: Se nenhum argumento for fornecido.
    """
    if len(args) == 0:
        raise _invalid(
            "no_arguments",
            "No Argument passed - please provide interceptor functions "
            "(One or more) or a single array of interceptor functions",
        )

    if len(args) == 1 and isinstance(args[0], _ORDERED_COLLECTIONS):
        return tuple(args[0])
    return tuple(args)


def validate_steps(candidates: Sequence[Any]) -> Tuple[Step, ...]:
    """
    Valida candidatos a Step e devolve a tupla imutável final.

    Raises:
        InvalidArgument: Se a coleção for vazia ou algum elemento não for um Step.
    """
    steps = tuple(candidates)
    if not steps:
        raise _invalid(
            "empty_collection",
            "Empty collection passed - please provide at least one interceptor function",
        )

    for index, candidate in enumerate(steps):
        reason = invalid_step_reason(candidate)
        if reason is not None:
            raise _invalid(
                reason,
                "Only functions or a single array of functions can be passed "
                "as a parameter to this function",
                index=index,
                received=type(candidate).__name__,
            )
    return steps


@dataclass(frozen=True)
class StepRegistry:
    """
    Registro canônico e imutável dos Steps de um pipeline.

    Use `StepRegistry.of(*steps)` (forma variádica), `StepRegistry.from_list(steps)`
    (forma coleção) ou `StepRegistry.build(*args)` (regra de forma genérica).
    """

    steps: Tuple[Step, ...]

    @classmethod
    def build(cls, *args: Any) -> "StepRegistry":
        return cls(steps=validate_steps(normalize_arguments(args)))

    @classmethod
    def of(cls, *steps: Any) -> "StepRegistry":
        if not steps:
            raise _invalid(
                "no_arguments",
                "No Argument passed - please provide one or more interceptor functions",
            )
        return cls(steps=validate_steps(steps))

    @classmethod
    def from_list(cls, steps: Sequence[Any]) -> "StepRegistry":
        if not isinstance(steps, _ORDERED_COLLECTIONS):
            raise _invalid(
                "not_a_collection",
                "Expected a list or tuple of interceptor functions",
                received=type(steps).__name__,
            )
        return cls(steps=validate_steps(steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def names(self) -> Tuple[str, ...]:
        return tuple(step_name(s) for s in self.steps)
