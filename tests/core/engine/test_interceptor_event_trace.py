# tests/core/engine/test_interceptor_event_trace.py
"""
Testes do rastreamento opcional de invocações (EventLog).

Os testes asseguram que:
- a sequência de eventos reflete o protocolo de execução
- Steps pulados registram o motivo (terminal, falsy ou failed)
- `step.failed` carrega o payload canônico de erro
- registrar eventos não altera valor nem erro propagados
"""

import pytest

from atlas_interceptor import ApiResponse, EventLog, Interceptor
from atlas_interceptor.core.errors import INTERCEPTOR_STEP_FAILURE


def _sequence(log: EventLog):
    return [(e["event"], e.get("step_index")) for e in log.events]


@pytest.mark.asyncio
async def test_successful_run_sequence(make_step):
    log = EventLog()
    interceptor = Interceptor(make_step("a"), make_step("b"), event_log=log)

    await interceptor.run(1)

    assert _sequence(log) == [
        ("chain.started", None),
        ("step.invoked", 0),
        ("step.completed", 0),
        ("step.invoked", 1),
        ("step.completed", 1),
        ("chain.finished", None),
    ]
    assert log.events[0]["meta"] == {"steps": 2}
    assert log.events[1]["step_name"] == "a"
    assert log.events[-1]["state"] == "continuing"


@pytest.mark.asyncio
async def test_falsy_short_circuit_sequence(make_step):
    log = EventLog()
    interceptor = Interceptor(
        make_step("a", lambda v: ""),
        make_step("b"),
        make_step("c"),
        event_log=log,
    )

    assert await interceptor.run(1) == ""

    assert _sequence(log) == [
        ("chain.started", None),
        ("step.invoked", 0),
        ("step.completed", 0),
        ("chain.short_circuit", 1),
        ("step.skipped", 1),
        ("step.skipped", 2),
        ("chain.finished", None),
    ]
    assert {e["reason"] for e in log.of_type("step.skipped")} == {"falsy"}
    assert log.events[-1]["state"] == "falsy"


@pytest.mark.asyncio
async def test_terminal_short_circuit_reason(make_step):
    log = EventLog()
    response = ApiResponse("early")
    interceptor = Interceptor(make_step("a", lambda v: response), make_step("b"), event_log=log)

    assert await interceptor.run(1) is response

    assert log.of_type("chain.short_circuit")[0]["state"] == "terminal"
    assert [e["reason"] for e in log.of_type("step.skipped")] == ["terminal"]


@pytest.mark.asyncio
async def test_failure_is_recorded_and_still_raised(make_step):
    log = EventLog()
    err = RuntimeError("upstream down")
    interceptor = Interceptor(
        make_step("fetch", error=err),
        make_step("render"),
        event_log=log,
    )

    with pytest.raises(RuntimeError) as exc:
        await interceptor.run({"id": 1})

    assert exc.value is err
    assert _sequence(log) == [
        ("chain.started", None),
        ("step.invoked", 0),
        ("step.failed", 0),
        ("step.skipped", 1),
        ("chain.finished", None),
    ]

    failed = log.of_type("step.failed")[0]
    assert failed["error"]["type"] == INTERCEPTOR_STEP_FAILURE
    assert failed["error"]["message"] == "upstream down"
    assert failed["error"]["details"] == {
        "step_index": 0,
        "step_name": "fetch",
        "exc_type": "RuntimeError",
    }
    assert log.of_type("step.skipped")[0]["reason"] == "failed"
    assert log.events[-1]["state"] == "failed"


@pytest.mark.asyncio
async def test_each_run_has_its_own_run_id(make_step):
    log = EventLog()
    interceptor = Interceptor(make_step("a"), event_log=log)

    await interceptor.run(1)
    await interceptor.run(2)

    first, second = log.run_ids()
    assert first != second
    assert len(log.for_run(first)) == len(log.for_run(second)) == 4


@pytest.mark.asyncio
async def test_tracing_does_not_change_result(make_step):
    steps = [make_step("a", lambda v: v * 3), make_step("b", lambda v: v - 1)]

    traced = Interceptor(steps, event_log=EventLog())
    plain = Interceptor(steps)

    assert await traced.run(4) == await plain.run(4) == 11
    assert plain.event_log is None


@pytest.mark.asyncio
async def test_caller_meta_is_nested_and_cannot_clobber_record_fields(make_step):
    log = EventLog()
    interceptor = Interceptor.of(
        make_step("a"),
        event_log=log,
        meta={"event": "custom", "run_id": "caller-id", "tenant": "acme"},
    )

    assert await interceptor.run(1) == 1

    started = log.of_type("chain.started")
    assert len(started) == 1
    assert started[0]["run_id"] != "caller-id"
    assert started[0]["meta"] == {"steps": 1, "event": "custom", "run_id": "caller-id", "tenant": "acme"}
    assert {e["run_id"] for e in log.events} == {started[0]["run_id"]}
