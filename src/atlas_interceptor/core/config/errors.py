# src/atlas_interceptor/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Interceptor.

Estas exceções representam violações estruturais explícitas durante o
carregamento, o merge ou a resolução de Steps declarados em configuração.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de Step em tempo de execução
"""


class ConfigError(Exception):
    """Exceção base para erros de configuração do Atlas Interceptor."""


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    O arquivo de defaults é obrigatório: sem ele não existe configuração
    efetiva válida. O loader não tenta inferir nem criar defaults.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"interceptor": {"trace": false}}
        - override: {"interceptor": "on"}

    Nenhum merge parcial é produzido e nenhuma coerção é tentada.
    """


class StepResolutionError(ConfigError):
    """
    Caminho de Step (ou de tipo terminal) declarado na configuração não pôde
    ser importado/resolvido.

    Carrega o payload canônico em `payload` para registro estruturado.
    """

    def __init__(self, message: str, *, payload=None):
        super().__init__(message)
        self.payload = payload
