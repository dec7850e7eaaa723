# tests/test_tool.py
import pytest

from gamma_mcp.features.generation import tool
from gamma_mcp.features.generation.schemas import GenerationResult
from gamma_mcp.main import SERVER_NAME, create_server, parse_args, build_config


def test_format_success_with_file():
    text = tool.format_result(GenerationResult(view_url="https://gamma.app/docs/a", file_path="/tmp/generation-a.pdf"))
    assert text == "Presentation generated! View it here: https://gamma.app/docs/a\nSaved exported file to: /tmp/generation-a.pdf"


def test_format_success_link_only():
    assert tool.format_result(GenerationResult(view_url="u")) == "Presentation generated! View it here: u"


def test_format_success_without_link():
    assert tool.format_result(GenerationResult(generation_id="g")).startswith("Presentation generated, but")


def test_format_failure():
    text = tool.format_result(GenerationResult.failed("Gamma init failed: 401 nope"))
    assert text == "Failed to generate presentation using Gamma API. Error: Gamma init failed: 401 nope"


@pytest.mark.asyncio
async def test_run_generation_drops_unset_arguments(monkeypatch, config):
    seen = {}

    def _fake_generate(params, *, config):
        seen["params"] = params
        seen["config"] = config
        return GenerationResult(view_url="https://gamma.app/docs/z")

    monkeypatch.setattr(tool, "generate_presentation", _fake_generate)
    text = await tool.run_generation({"inputText": "x", "tone": None, "numCards": 5}, config)

    assert text == "Presentation generated! View it here: https://gamma.app/docs/z"
    assert seen["params"] == {"inputText": "x", "numCards": 5}
    assert seen["config"] is config


@pytest.mark.asyncio
async def test_server_registers_generate_presentation(config):
    server = create_server(config)
    assert server.name == SERVER_NAME
    tools = await server.list_tools()
    (t,) = [t for t in tools if t.name == tool.TOOL_NAME]
    props = t.inputSchema["properties"]
    assert t.inputSchema["required"] == ["inputText"]
    for name in ("textMode", "exportAs", "textAmount", "imageSource", "cardDimensions", "workspaceAccess"):
        assert name in props


def test_cli_flags_become_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GAMMA_API_KEY", raising=False)
    args = parse_args([
        "--api-key", "cli-key",
        "--header", "Authorization: Bearer t",
        "--poll-timeout-ms", "1000",
        "--output-dir", str(tmp_path / "out"),
    ])
    cfg = build_config(args)
    assert cfg.api_key == "cli-key"
    assert cfg.header_overrides["Authorization"] == "Bearer t"
    assert cfg.poll_timeout == 1.0
    assert cfg.headers()["X-API-KEY"] == "Bearer t"


def test_cli_rejects_malformed_header():
    with pytest.raises(SystemExit):
        parse_args(["--header", "no-colon"])
