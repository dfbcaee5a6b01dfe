from __future__ import annotations

import re
from typing import Any, Callable, Iterator, List

import pytest

from script_synth.console import ConsoleChannels, OutputKind, OutputSink
from script_synth.document import Document
from script_synth.execution import ExecutionSandbox, evaluate, fresh_namespace

COMPLETED = re.compile(r"^Execution completed in \d+\.\d{2}ms$")


def make_channels(sink: List[str] | None = None) -> ConsoleChannels:
    host = sink if sink is not None else []
    return ConsoleChannels(
        log=lambda *args: host.append("log"),
        info=lambda *args: host.append("info"),
        warn=lambda *args: host.append("warn"),
        error=lambda *args: host.append("error"),
    )


def make_sandbox(
    channels: ConsoleChannels | None = None,
    clock: Callable[[], float] | None = None,
) -> ExecutionSandbox:
    kwargs: dict[str, Any] = {}
    if clock is not None:
        kwargs["clock"] = clock
    return ExecutionSandbox(OutputSink(), channels or make_channels(), **kwargs)


def kinds(sandbox: ExecutionSandbox) -> List[OutputKind]:
    return [entry.kind for entry in sandbox.sink.all()]


def texts(sandbox: ExecutionSandbox) -> List[str]:
    return sandbox.sink.texts()


def test_console_log_scenario() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("console.log(1+1)", "python"))

    entries = sandbox.sink.all()
    assert [entry.kind for entry in entries] == [
        OutputKind.SYSTEM,
        OutputKind.INFO,
        OutputKind.SYSTEM,
    ]
    assert entries[0].text == "Execution started: untitled.py"
    assert entries[1].text == "[log] 2"
    assert COMPLETED.match(entries[2].text)
    assert [entry.sequence for entry in entries] == [0, 1, 2]


def test_raised_exception_scenario() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("raise Exception('boom')", "python"))

    assert kinds(sandbox) == [OutputKind.SYSTEM, OutputKind.ERROR, OutputKind.SYSTEM]
    assert texts(sandbox)[1] == "boom"
    assert COMPLETED.match(texts(sandbox)[2])


def test_unsupported_language_reports_single_system_entry() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("console.log(1)", "javascript"))

    assert kinds(sandbox) == [OutputKind.SYSTEM]
    assert texts(sandbox) == [
        "Execution of javascript code requires a server environment."
    ]


def test_language_tag_is_case_insensitive() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("console.log('hi')", "Python"))

    assert texts(sandbox)[1] == "[log] hi"


def test_channel_output_keeps_call_order_between_markers() -> None:
    host: List[str] = []
    sandbox = make_sandbox(make_channels(host))
    script = "\n".join(
        [
            "console.info('a')",
            "console.warn('b')",
            "print('c', 3)",
            "console.error('d')",
            "console.log('e')",
        ]
    )

    sandbox.run(Document(script, "python"))

    assert texts(sandbox)[1:-1] == [
        "[info] a",
        "[warn] b",
        "[log] c 3",
        "[error] d",
        "[log] e",
    ]
    assert kinds(sandbox)[1:-1] == [
        OutputKind.INFO,
        OutputKind.WARNING,
        OutputKind.INFO,
        OutputKind.ERROR,
        OutputKind.INFO,
    ]
    assert host == ["info", "warn", "log", "error", "log"]


def test_failure_after_output_keeps_earlier_lines() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("console.log('before')\n1 / 0\nconsole.log('after')", "python"))

    assert texts(sandbox)[1:3] == ["[log] before", "division by zero"]
    assert kinds(sandbox).count(OutputKind.ERROR) == 1
    assert COMPLETED.match(texts(sandbox)[-1])


def test_syntax_error_is_reported_not_raised() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("def broken(:\n    pass", "python"))

    assert kinds(sandbox) == [OutputKind.SYSTEM, OutputKind.ERROR, OutputKind.SYSTEM]
    assert "line 1" in texts(sandbox)[1]


def test_empty_exception_message_uses_type_name() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("raise ValueError()", "python"))

    assert texts(sandbox)[1] == "ValueError"


def test_trailing_expression_value_is_reported() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("x = 20\nx + 1", "python"))

    assert texts(sandbox)[1] == "Return value: 21"
    assert kinds(sandbox)[1] is OutputKind.INFO


def test_structured_arguments_are_indented() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("console.log('data', {'a': [1]})", "python"))

    assert texts(sandbox)[1] == '[log] data {\n  "a": [\n    1\n  ]\n}'


def test_scripts_cannot_see_caller_locals() -> None:
    secret = "hidden"  # noqa: F841
    sandbox = make_sandbox()

    sandbox.run(Document("console.log(secret)", "python"))

    assert texts(sandbox)[1] == "name 'secret' is not defined"


def test_each_run_gets_a_fresh_namespace() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("counter = 1", "python"))
    sandbox.run(Document("console.log(counter)", "python"))

    assert texts(sandbox)[1] == "name 'counter' is not defined"


def test_run_clears_previous_output() -> None:
    sandbox = make_sandbox()
    sandbox.sink.append(OutputKind.INFO, "stale")

    sandbox.run(Document("pass", "python"))

    assert "stale" not in texts(sandbox)
    assert sandbox.sink.all()[0].sequence == 0


def test_channels_restored_after_success_and_failure() -> None:
    channels = make_channels()
    before = channels.bindings()
    sandbox = make_sandbox(channels)

    sandbox.run(Document("console.log('ok')", "python"))
    assert channels.bindings() == before

    sandbox.run(Document("raise RuntimeError('nope')", "python"))
    assert channels.bindings() == before


def test_missing_channel_does_not_abort_the_run() -> None:
    channels = make_channels()
    channels.bind("warn", None)
    sandbox = make_sandbox(channels)

    sandbox.run(Document("console.log('fine')\nconsole.warn('gone')", "python"))

    assert texts(sandbox)[1] == "[log] fine"
    assert kinds(sandbox).count(OutputKind.ERROR) == 1
    assert COMPLETED.match(texts(sandbox)[-1])
    assert channels.warn is None


def test_elapsed_time_uses_injected_clock() -> None:
    ticks: Iterator[float] = iter([10.0, 10.0025])
    sandbox = make_sandbox(clock=lambda: next(ticks))

    sandbox.run(Document("pass", "python"))

    assert texts(sandbox)[-1] == "Execution completed in 2.50ms"


def test_file_name_appears_in_started_marker() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("pass", "python"), file_name="demo.py")

    assert texts(sandbox)[0] == "Execution started: demo.py"


def test_reentrant_run_is_ignored() -> None:
    sink = OutputSink()
    holder: dict[str, ExecutionSandbox] = {}

    def nested_log(*_args: Any) -> None:
        holder["sandbox"].run(Document("console.log('nested')", "python"))

    channels = make_channels()
    channels.bind("log", nested_log)
    sandbox = ExecutionSandbox(sink, channels)
    holder["sandbox"] = sandbox

    sandbox.run(Document("console.log('outer')", "python"))

    assert sink.texts()[1] == "[log] outer"
    assert "[log] nested" not in sink.texts()
    assert len(sink) == 3
    assert sandbox.running is False


def test_evaluate_returns_failures_as_values() -> None:
    namespace = fresh_namespace()

    ok = evaluate("y = 2\ny * 3", namespace)
    failed = evaluate("undefined_name", namespace)

    assert ok.ok and ok.value == 6
    assert namespace["y"] == 2
    assert not failed.ok
    assert failed.error_type == "NameError"


def test_evaluate_reports_system_exit() -> None:
    result = evaluate("raise SystemExit(3)", fresh_namespace())

    assert result.error == "3"
    assert result.error_type == "SystemExit"


def test_base_exception_from_script_is_reported() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("raise BaseException('boom')", "python"))

    assert kinds(sandbox) == [OutputKind.SYSTEM, OutputKind.ERROR, OutputKind.SYSTEM]
    assert texts(sandbox)[1] == "boom"
    assert COMPLETED.match(texts(sandbox)[2])


def test_generator_exit_from_script_is_reported() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("raise GeneratorExit", "python"))

    assert texts(sandbox)[1] == "GeneratorExit"
    assert COMPLETED.match(texts(sandbox)[-1])
    assert sandbox.running is False


def test_keyboard_interrupt_still_reaches_the_host() -> None:
    with pytest.raises(KeyboardInterrupt):
        evaluate("raise KeyboardInterrupt", fresh_namespace())


def test_print_honours_sep_and_end() -> None:
    sandbox = make_sandbox()
    script = "\n".join(
        [
            "print('a', 'b', sep='-')",
            "print('x', end='!')",
            "print('p', 'q', sep=None, end=None)",
            "print()",
        ]
    )

    sandbox.run(Document(script, "python"))

    assert texts(sandbox)[1:-1] == ["[log] a-b", "[log] x!", "[log] p q", "[log] "]


def test_print_rejects_unknown_keywords() -> None:
    sandbox = make_sandbox()

    sandbox.run(Document("print('a', colour='red')", "python"))

    assert kinds(sandbox) == [OutputKind.SYSTEM, OutputKind.ERROR, OutputKind.SYSTEM]
    assert "colour" in texts(sandbox)[1]
