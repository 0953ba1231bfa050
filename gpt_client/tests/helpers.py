"""Fakes shared by the client tests.

``make_client`` wires a :class:`GPTClient` to an ``httpx.MockTransport`` whose
handler records every request it receives.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

import httpx

from gpt_client import GPTClient

BASE_URL = "https://api.unit.local/v1"
API_KEY = "sk-unit-key"  # pragma: allowlist secret - fake credential

Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class Recorder:
    """Mock transport handler returning canned responses in order."""

    responses: List[httpx.Response]
    requests: List[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    def json_bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


def make_client(*responses: httpx.Response, **kwargs: Any) -> tuple[GPTClient, Recorder]:
    recorder = Recorder(list(responses))
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    client = GPTClient(API_KEY, base_url=BASE_URL, http_client=http_client, **kwargs)
    return client, recorder


def sse(*lines: str) -> bytes:
    """Join event-stream lines into a response body."""
    return ("\n".join(lines) + "\n").encode("utf-8")


def data_line(payload: Dict[str, Any]) -> str:
    return "data: " + json.dumps(payload)


def chat_reply(content: str | None, role: str = "assistant") -> Dict[str, Any]:
    message: Dict[str, Any] = {"role": role}
    if content is not None:
        message["content"] = content
    return {
        "choices": [{"message": message, "index": 0, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
    }


def chat_delta(content: str | None = None, role: str | None = None, finish_reason: str | None = None) -> Dict[str, Any]:
    delta: Dict[str, Any] = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    return {"choices": [{"delta": delta, "index": 0, "finish_reason": finish_reason}]}


def completion_reply(text: str) -> Dict[str, Any]:
    return {
        "choices": [{"text": text, "index": 0, "finish_reason": "length"}],
        "usage": {"prompt_tokens": 1, "completion_tokens": 7, "total_tokens": 8},
    }
