# tests/test_service.py
import pytest

from conftest import FakeResponse, FakeSession, created, status
from gamma_mcp.features.generation import service
from gamma_mcp.features.generation.service import generate_presentation


def _run(params, config, session, fake_clock):
    return generate_presentation(params, config=config, session=session, sleep=fake_clock.sleep, clock=fake_clock.clock)


def test_happy_path_with_export(config, session, fake_clock):
    session.queue("POST", created("gen-9"))
    session.queue(
        "GET",
        status("pending"),
        status("completed", gammaUrl="https://gamma.app/docs/x", exportUrl="https://cdn.test/x.pdf"),
        FakeResponse(200, content=b"pdf-bytes"),
    )
    res = _run({"inputText": "Climate", "exportAs": "pdf", "textAmount": "short"}, config, session, fake_clock)

    assert res.ok
    assert res.generation_id == "gen-9"
    assert res.view_url == "https://gamma.app/docs/x"
    assert res.file_url == "https://cdn.test/x.pdf"
    assert res.file_path == str(config.output_dir.resolve() / "generation-gen-9.pdf")
    assert open(res.file_path, "rb").read() == b"pdf-bytes"

    posted = session.calls_for("POST")[0][2]["json"]
    assert posted == {"inputText": "Climate", "exportAs": "pdf", "textOptions": {"amount": "brief"}}


def test_no_download_without_export(config, session, fake_clock):
    session.queue("POST", created())
    session.queue("GET", status("completed", url="https://gamma.app/u", pdfUrl="https://cdn.test/p.pdf"))
    res = _run({"inputText": "x"}, config, session, fake_clock)
    assert res.view_url == "https://gamma.app/u"
    assert res.file_url is None and res.file_path is None
    assert len(session.calls_for("GET")) == 1


def test_failed_download_still_reports_link(config, session, fake_clock):
    session.queue("POST", created())
    session.queue(
        "GET",
        status("completed", gammaUrl="https://gamma.app/docs/y", pptxUrl="https://cdn.test/y.pptx"),
        FakeResponse(500, text="oops"),
    )
    res = _run({"inputText": "x", "exportAs": "pptx"}, config, session, fake_clock)
    assert res.ok
    assert res.view_url == "https://gamma.app/docs/y"
    assert res.file_path is None


def test_missing_generation_id_fails_without_polling(config, session, fake_clock):
    session.queue("POST", FakeResponse(200, {"message": "accepted"}))
    res = _run({"inputText": "x"}, config, session, fake_clock)
    assert not res.ok
    assert "missing generation id" in res.error
    assert res.view_url is None and res.generation_id is None
    assert session.calls_for("GET") == []


def test_remote_failure_skips_download(config, session, fake_clock):
    session.queue("POST", created())
    session.queue("GET", status("failed", pdfUrl="https://cdn.test/p.pdf"))
    res = _run({"inputText": "x", "exportAs": "pdf"}, config, session, fake_clock)
    assert res.model_dump(exclude_none=True) == {"error": res.error}
    assert "failed" in res.error
    assert len(session.calls_for("GET")) == 1


def test_timeout_becomes_error_result(config, session, fake_clock):
    session.queue("POST", created())
    session.queue("GET", *[status("queued") for _ in range(200)])
    res = _run({"inputText": "x"}, config, session, fake_clock)
    assert not res.ok
    assert "timed out" in res.error


def test_invalid_params_become_error_result(config, session, fake_clock):
    res = _run({"inputText": ""}, config, session, fake_clock)
    assert not res.ok
    assert session.calls == []


def test_owned_session_is_closed(config, monkeypatch, fake_clock):
    made = []

    def _factory():
        s = FakeSession().queue("POST", FakeResponse(400, text="bad request"))
        made.append(s)
        return s

    monkeypatch.setattr(service.requests, "Session", _factory)
    res = generate_presentation({"inputText": "x"}, config=config, sleep=fake_clock.sleep, clock=fake_clock.clock)
    assert "400" in res.error
    assert made[0].closed


def test_caller_session_is_left_open(config, session, fake_clock):
    session.queue("POST", FakeResponse(400, text="bad"))
    _run({"inputText": "x"}, config, session, fake_clock)
    assert not session.closed
