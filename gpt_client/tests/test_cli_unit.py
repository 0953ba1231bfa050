from __future__ import annotations

import io
import json
from typing import Iterator

import httpx
import pytest

from gpt_client import GPTClient
from gpt_client.cli import main
from gpt_client.cli.cli_actions import client_overrides, handle_chat, handle_complete
from gpt_client.cli.cli_parser import _str2bool, build_parser

from .helpers import API_KEY, BASE_URL, Recorder, chat_delta, chat_reply, completion_reply, data_line, sse

pytestmark = pytest.mark.anyio


def _factory(*responses: httpx.Response):
    recorder = Recorder(list(responses))

    def factory(**kwargs) -> GPTClient:
        kwargs.setdefault("api_key", API_KEY)
        kwargs["base_url"] = kwargs.get("base_url") or BASE_URL
        kwargs["http_client"] = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return GPTClient.from_env(**kwargs)

    return factory, recorder


def _inputs(*lines: str):
    it: Iterator[str] = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_parser_complete_flags():
    args = build_parser().parse_args(
        ["complete", "--prompt", "hi", "--model", "gpt-4", "--temperature", "0.5", "--max-tokens", "9", "--stream"]
    )
    assert args.cmd == "complete"
    assert args.stream is True
    assert client_overrides(args) == {"model": "gpt-4", "temperature": 0.5, "max_tokens": 9, "base_url": None}


def test_parser_chat_defaults():
    args = build_parser().parse_args(["chat", "--no-stream"])
    assert args.stream is False
    assert args.remember_replies is False


def test_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


@pytest.mark.parametrize("raw, expected", [(None, True), ("yes", True), ("0", False), ("off", False)])
def test_str2bool(raw, expected):
    assert _str2bool(raw) is expected


async def test_complete_prints_text():
    factory, recorder = _factory(httpx.Response(200, json=completion_reply("Hello")))
    out, err = io.StringIO(), io.StringIO()
    args = build_parser().parse_args(["complete", "--prompt", "hi", "--max-tokens", "3"])
    assert await handle_complete(args, client_factory=factory, out=out, err=err) == 0
    assert out.getvalue() == "Hello\n"
    assert recorder.json_bodies()[0]["max_tokens"] == 3


async def test_complete_json_output():
    factory, _ = _factory(httpx.Response(200, json=completion_reply("Hello")))
    out = io.StringIO()
    args = build_parser().parse_args(["complete", "--prompt", "hi", "--json"])
    assert await handle_complete(args, client_factory=factory, out=out, err=io.StringIO()) == 0
    assert json.loads(out.getvalue())["choices"][0]["text"] == "Hello"


async def test_complete_stream_prints_fragments():
    body = sse(data_line(completion_reply("He")), data_line(completion_reply("y")), "data: [DONE]")
    factory, _ = _factory(httpx.Response(200, content=body))
    out = io.StringIO()
    args = build_parser().parse_args(["complete", "--prompt", "hi", "--stream"])
    assert await handle_complete(args, client_factory=factory, out=out, err=io.StringIO()) == 0
    assert out.getvalue() == "Hey\n"


async def test_complete_error_returns_1_with_json_error():
    factory, _ = _factory(httpx.Response(401, text="invalid key"))
    err = io.StringIO()
    args = build_parser().parse_args(["complete", "--prompt", "hi"])
    assert await handle_complete(args, client_factory=factory, out=io.StringIO(), err=err) == 1
    payload = json.loads(err.getvalue())
    assert payload == {"error": "HTTP 401: invalid key", "code": "auth", "status": 401}


async def test_missing_key_returns_2():
    err = io.StringIO()
    args = build_parser().parse_args(["complete", "--prompt", "hi"])
    assert await handle_complete(args, client_factory=GPTClient.from_env, out=io.StringIO(), err=err) == 2
    assert json.loads(err.getvalue()) == {"error": "missing_api_key"}


async def test_chat_loop_commands():
    factory, recorder = _factory(
        httpx.Response(200, json=chat_reply("hi there")),
        httpx.Response(500, text="oops"),
    )
    out, err = io.StringIO(), io.StringIO()
    args = build_parser().parse_args(["chat"])
    read = _inputs("hello", "", "/history", "again", "/clear", "/history", "/exit", "never")
    assert await handle_chat(args, client_factory=factory, read_input=read, out=out, err=err) == 0
    assert out.getvalue() == "hi there\nhello\n"
    assert json.loads(err.getvalue())["status"] == 500
    assert len(recorder.requests) == 2


async def test_chat_loop_streaming_until_eof():
    body = sse(data_line(chat_delta("fi")), data_line(chat_delta("ne")), "data: [DONE]")
    factory, recorder = _factory(httpx.Response(200, content=body))
    out = io.StringIO()
    args = build_parser().parse_args(["chat", "--stream", "--remember-replies"])
    assert await handle_chat(args, client_factory=factory, read_input=_inputs("how are you", "/history"), out=out, err=io.StringIO()) == 0
    assert out.getvalue() == "fine\nhow are you\nfine\n"
    assert recorder.json_bodies()[0]["stream"] is True


def test_main_reports_missing_key(capsys):
    assert main(["complete", "--prompt", "hi"]) == 2
    assert "missing_api_key" in capsys.readouterr().err
