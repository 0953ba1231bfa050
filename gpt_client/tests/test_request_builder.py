from __future__ import annotations

import json

from gpt_client.base.models import ChatBody, CompletionBody, Configuration, EndPoint, Message, Model, custom
from gpt_client.base.request_builder import build_envelope, build_headers, build_request, build_url

from .helpers import API_KEY, BASE_URL


def _request(endpoint=EndPoint.COMPLETIONS, body=None, *, stream=False, configuration=None, base_url=BASE_URL):
    return build_request(
        endpoint,
        body or CompletionBody(prompt="Hi"),
        stream=stream,
        configuration=configuration or Configuration.standard(),
        api_key=API_KEY,
        base_url=base_url,
    )


def test_build_url_joins_path():
    assert build_url("https://x.test/v1", EndPoint.CHAT) == "https://x.test/v1/chat/completions"
    assert build_url("https://x.test/v1/", EndPoint.COMPLETIONS) == "https://x.test/v1/completions"


def test_headers_carry_bearer_token_and_json_type():
    headers = build_headers("abc")
    assert headers == {"Authorization": "Bearer abc", "Content-Type": "application/json"}


def test_completion_request_shape():
    req = _request()
    assert req.method == "POST"
    assert str(req.url) == f"{BASE_URL}/completions"
    assert req.headers["Authorization"] == f"Bearer {API_KEY}"
    assert req.headers["Content-Type"] == "application/json"
    assert json.loads(req.content) == {"model": "text-davinci-003", "stream": False, "prompt": "Hi"}


def test_configured_model_and_settings_win():
    cfg = Configuration(model=Model.GPT_4, temperature=0.2, max_tokens=32)
    req = _request(EndPoint.CHAT, ChatBody(messages=[Message(content="yo")]), stream=True, configuration=cfg)
    assert str(req.url) == f"{BASE_URL}/chat/completions"
    assert json.loads(req.content) == {
        "model": "gpt-4",
        "max_tokens": 32,
        "temperature": 0.2,
        "stream": True,
        "messages": [{"role": "user", "content": "yo"}],
    }


def test_chat_default_model_is_first_compatible():
    env = build_envelope(
        EndPoint.CHAT,
        ChatBody(messages=[]),
        stream=False,
        configuration=Configuration.standard(),
    )
    assert env.model == "gpt-3.5-turbo"


def test_custom_model_id_is_sent_verbatim():
    env = build_envelope(
        EndPoint.COMPLETIONS,
        CompletionBody(prompt="p"),
        stream=False,
        configuration=Configuration(model=custom("foo")),
    )
    assert env.model == "foo"
