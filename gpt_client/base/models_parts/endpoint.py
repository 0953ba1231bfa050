"""
EndPoint descriptors for the two supported API routes.

An endpoint couples the path segment appended to the base URL with the
ordered list of models compatible with it. The first model is used when the
caller has not configured one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from .model import Model


@dataclass(frozen=True)
class EndPoint:
    """Immutable description of an API route.

    Attributes:
        path: Path segment relative to the API base URL.
        models: Compatible models in preference order.
    """

    path: str
    models: Tuple[Model, ...]

    COMPLETIONS: ClassVar["EndPoint"]
    CHAT: ClassVar["EndPoint"]

    @property
    def default_model(self) -> Model:
        return self.models[0]


EndPoint.COMPLETIONS = EndPoint(path="completions", models=(Model.TEXT_DAVINCI_003,))
EndPoint.CHAT = EndPoint(
    path="chat/completions",
    models=(Model.GPT_3_5_TURBO, Model.GPT_4, Model.GPT_4_32K),
)


__all__ = ["EndPoint"]
