# src/atlas_interceptor/core/pipeline/types.py
"""
Tipos canônicos do pipeline do Atlas Interceptor.

Este módulo define as estruturas que representam o estado transitório de
uma invocação do pipeline, encadeado explicitamente pelo fold do Executor.

Componentes principais:
    - ChainState   → enum dos estados de uma invocação
    - ChainOutcome → estado imutável (estado + valor corrente + erro)

Princípios fundamentais:
    - O estado de uma invocação é um valor, não um conjunto de flags mutáveis
    - Cada transição produz uma nova instância
    - Nenhuma lógica de execução vive neste módulo

Invariantes:
    - Um ChainOutcome FAILED sempre carrega `error`
    - Um ChainOutcome fora de CONTINUING nunca volta a CONTINUING
    - TERMINAL, FALSY e FAILED são mutuamente exclusivos por invocação

Limites explícitos:
    - Não executa Steps
    - Não é compartilhado entre invocações
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ChainState(str, Enum):
    """
    Estados possíveis de uma invocação do pipeline.

    Estados definidos:
        - CONTINUING: nenhum short-circuit detectado; Steps seguem sendo invocados
        - TERMINAL: um TerminalResponse foi observado e é repassado até o fim
        - FALSY: um valor falsy foi observado e é repassado até o fim
        - FAILED: um Step lançou erro; o erro é propagado até o fim

    Os valores são strings para facilitar serialização em eventos.
    """
    CONTINUING = "continuing"
    TERMINAL = "terminal"
    FALSY = "falsy"
    FAILED = "failed"


@dataclass(frozen=True)
class ChainOutcome:
    """
    Estado imutável de uma invocação em um ponto do fold.

    Campos:
        - state: estado corrente (ChainState)
        - value: valor corrente (input, saída do último Step ou valor retido)
        - error: erro registrado quando `state` é FAILED
    """
    state: ChainState
    value: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def start(cls, value: Any) -> "ChainOutcome":
        return cls(state=ChainState.CONTINUING, value=value)

    def continuing(self, value: Any) -> "ChainOutcome":
        return ChainOutcome(state=ChainState.CONTINUING, value=value)

    def terminal(self) -> "ChainOutcome":
        return ChainOutcome(state=ChainState.TERMINAL, value=self.value)

    def falsy(self) -> "ChainOutcome":
        return ChainOutcome(state=ChainState.FALSY, value=self.value)

    def failed(self, error: BaseException) -> "ChainOutcome":
        # o erro passa a ser o "valor" propagado; o input é descartado
        return ChainOutcome(state=ChainState.FAILED, value=None, error=error)

    @property
    def short_circuited(self) -> bool:
        return self.state is not ChainState.CONTINUING

    def unwrap(self) -> Any:
        """Retorna o valor final ou levanta o erro registrado, sem encapsular."""
        if self.state is ChainState.FAILED:
            raise self.error  # type: ignore[misc]
        return self.value
