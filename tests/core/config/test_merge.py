# tests/core/config/test_merge.py
"""
Testes do deep-merge determinístico de configuração.

Os testes asseguram que:
- valores escalares do override substituem os da base
- dicionários aninhados são combinados recursivamente
- listas (ex.: `interceptor.steps`) são sobrescritas por inteiro
- conflitos de tipo são rejeitados
- nenhum input é mutado
"""

import pytest

try:
    from atlas_interceptor.core.config.merge import deep_merge
    from atlas_interceptor.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/atlas_interceptor/core/config/merge.py (deep_merge)\n"
            "- src/atlas_interceptor/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    _require_imports()

    base = {"a": 1, "b": 2}
    override = {"b": 99}

    out = deep_merge(base, override)

    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    _require_imports()

    base = {"interceptor": {"trace": False, "steps": ["a:b"]}}
    override = {"interceptor": {"trace": True}}

    out = deep_merge(base, override)

    assert out == {"interceptor": {"trace": True, "steps": ["a:b"]}}


def test_merge_step_list_is_replaced_not_concatenated():
    """
    A cadeia de Steps declarada no override substitui a dos defaults.

    Concatenar listas mudaria silenciosamente a ordem de execução.
    """
    _require_imports()

    base = {"interceptor": {"steps": ["m:auth", "m:normalize", "m:enrich"]}}
    override = {"interceptor": {"steps": ["m:enrich", "m:auth"]}}

    out = deep_merge(base, override)

    assert out["interceptor"]["steps"] == ["m:enrich", "m:auth"]


def test_merge_null_placeholder_accepts_value():
    _require_imports()

    base = {"interceptor": {"terminal_types": None}}
    override = {"interceptor": {"terminal_types": ["m:Redirect"]}}

    out = deep_merge(base, override)

    assert out["interceptor"]["terminal_types"] == ["m:Redirect"]


def test_merge_type_conflict_raises():
    _require_imports()

    base = {"interceptor": {"trace": False}}
    override = {"interceptor": "on"}  # dict vs str

    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)


def test_merge_rejects_non_dict_root():
    _require_imports()

    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["not", "a", "dict"])
