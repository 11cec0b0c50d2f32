"""
Tests for the CLI loop and entry point.
"""
import io
import json

import pytest
from rich.console import Console

from think_tool import main as main_module
from think_tool.cli import CLI
from think_tool.constants import API_KEY_ENV_VAR, DEFAULT_THOUGHT
from think_tool.errors import APIError
from think_tool.rich_ui import RichRenderer

from helpers import FakeAPIClient, response_payload, text_block, tool_use_block


def make_renderer():
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, width=200, color_system=None)
    return RichRenderer(console), buffer


def line_reader(lines):
    remaining = list(lines)

    def read(prompt):
        return remaining.pop(0) if remaining else None

    return read


def test_run_once_prints_text(config):
    renderer, buffer = make_renderer()
    client = FakeAPIClient(response_payload("end_turn", text_block("hello")))
    cli = CLI(config, client, renderer=renderer)

    assert cli.run_once("Simple thought") == 0
    assert "hello" in buffer.getvalue()


def test_run_once_json_format(config):
    renderer, buffer = make_renderer()
    payload = response_payload("end_turn", text_block("hello"))
    cli = CLI(config, FakeAPIClient(payload), output_format="json", renderer=renderer)

    cli.run_once("t")

    assert json.loads(buffer.getvalue()) == payload


def test_run_once_writes_output_file(config, tmp_path):
    renderer, buffer = make_renderer()
    client = FakeAPIClient(
        response_payload("tool_use", tool_use_block("tu_1")),
        response_payload("end_turn", text_block("done")),
    )
    out = tmp_path / "analysis.txt"
    cli = CLI(config, client, renderer=renderer)

    assert cli.run_once("Launch it", output_file=str(out)) == 0
    assert out.read_text() == "done\n"
    assert f"Analysis written to {out}" in buffer.getvalue()


def test_run_once_reports_failure(config):
    renderer, buffer = make_renderer()
    cli = CLI(config, FakeAPIClient(APIError(500, "server exploded")), renderer=renderer)

    assert cli.run_once("t") == 1
    assert "initial request failed" in buffer.getvalue()


def test_interactive_reads_one_line_per_thought(config):
    renderer, buffer = make_renderer()
    client = FakeAPIClient(
        response_payload("end_turn", text_block("first answer")),
        response_payload("end_turn", text_block("second answer")),
    )
    cli = CLI(
        config,
        client,
        renderer=renderer,
        read_line=line_reader(["first thought", "", "  second thought  ", "exit", "never read"]),
    )

    assert cli.run_interactive() == 0

    prompts = [r["messages"][0]["content"] for r in client.requests]
    assert prompts == [
        "Please analyze the following thought: first thought",
        "Please analyze the following thought: second thought",
    ]
    output = buffer.getvalue()
    assert "first answer" in output
    assert "second answer" in output
    assert output.rstrip().endswith("Goodbye!")


def test_interactive_continues_after_error(config):
    renderer, buffer = make_renderer()
    client = FakeAPIClient(
        APIError(503, "unavailable"),
        response_payload("end_turn", text_block("recovered")),
    )
    cli = CLI(config, client, renderer=renderer, read_line=line_reader(["one", "two", "quit"]))

    cli.run_interactive()

    assert len(client.requests) == 2
    assert "initial request failed" in buffer.getvalue()
    assert "recovered" in buffer.getvalue()


def test_interactive_stops_at_end_of_input(config):
    renderer, buffer = make_renderer()
    client = FakeAPIClient()
    cli = CLI(config, client, renderer=renderer, read_line=line_reader([]))

    assert cli.run_interactive() == 0
    assert client.requests == []
    assert "Goodbye!" in buffer.getvalue()


@pytest.fixture
def fake_client_factory(monkeypatch):
    """Swap AnthropicClient for a scripted fake inside main()."""
    created = []

    def install(*answers):
        def factory(api_key=None, **kwargs):
            client = FakeAPIClient(*answers)
            client.api_key_used = api_key
            created.append(client)
            return client

        monkeypatch.setattr("think_tool.llm.AnthropicClient", factory)
        return created

    return install


def test_main_requires_api_key(monkeypatch, tmp_path, capsys):
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)

    status = main_module.main(["--config", str(tmp_path / "none.json"), "hello"])

    assert status == 1
    assert "API key not found" in capsys.readouterr().out


def test_main_reports_mistyped_config_file(monkeypatch, tmp_path, capsys, fake_client_factory):
    monkeypatch.setenv(API_KEY_ENV_VAR, "sk-env")
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"timeout": "30"}))
    created = fake_client_factory()

    status = main_module.main(["--config", str(path), "hi"])

    assert status == 1
    assert created == []
    output = capsys.readouterr().out
    assert "Configuration error" in output
    assert "timeout must be a number" in output


def test_main_uses_default_thought(monkeypatch, tmp_path, capsys, fake_client_factory):
    monkeypatch.setenv(API_KEY_ENV_VAR, "sk-env")
    created = fake_client_factory(response_payload("end_turn", text_block("analysis")))

    status = main_module.main(["--config", str(tmp_path / "none.json")])

    assert status == 0
    client = created[0]
    assert client.api_key_used == "sk-env"
    assert client.requests[0]["messages"][0]["content"].endswith(DEFAULT_THOUGHT)
    assert "analysis" in capsys.readouterr().out


def test_main_flags_flow_into_request(monkeypatch, tmp_path, fake_client_factory):
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)
    thought_file = tmp_path / "thought.txt"
    thought_file.write_text("Japan is cool")
    output_file = tmp_path / "out.json"
    created = fake_client_factory(response_payload("end_turn", text_block("ok")))

    status = main_module.main([
        "--config", str(tmp_path / "none.json"),
        "--apikey", "sk-flag",
        "--model", "claude-x",
        "--max-tokens", "256",
        "--prompt", "Critique:",
        "--input", str(thought_file),
        "--output", str(output_file),
        "--format", "json",
    ])

    assert status == 0
    client = created[0]
    assert client.api_key_used == "sk-flag"
    request = client.requests[0]
    assert request["model"] == "claude-x"
    assert request["max_tokens"] == 256
    assert request["messages"][0]["content"] == "Critique: Japan is cool"
    assert json.loads(output_file.read_text())["content"] == [{"type": "text", "text": "ok"}]


def test_main_missing_input_file(monkeypatch, tmp_path, capsys, fake_client_factory):
    monkeypatch.setenv(API_KEY_ENV_VAR, "sk-env")
    fake_client_factory()

    status = main_module.main(["--config", str(tmp_path / "none.json"), "--input", str(tmp_path / "nope.txt")])

    assert status == 1
    assert "failed to read file" in capsys.readouterr().out


def test_version_flag_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main_module.parse_args(["--version"])

    assert excinfo.value.code == 0
    assert "0.1.0" in capsys.readouterr().out
