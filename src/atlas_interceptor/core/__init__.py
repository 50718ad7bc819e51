# src/atlas_interceptor/core/__init__.py
"""
Core do Atlas Interceptor.

Componentes principais:
    - pipeline     → contrato de Step, Builder e estado transitório de invocação
    - engine       → execução do fold com short-circuit
    - config       → resolução de configuração (merge, hashing)
    - traceability → Event Log de invocações

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo short-circuit é explícito e testado
    - Nenhum estado compartilhado mutável entre invocações
    - Erros de Steps chegam ao chamador exatamente como foram lançados

Limites explícitos:
    - Não depende de framework HTTP, roteamento ou formato de request
    - Não implementa retry, branching, fan-out ou persistência de estado
"""
