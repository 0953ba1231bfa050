"""
Model registry: symbolic model identifiers and their wire ids.

`Model` enumerates the models known to the client. Any other model is
expressed with :func:`custom` (or a plain string), which passes its id through
unchanged. :func:`resolve` is the single place where a symbolic model becomes
the literal id sent on the wire.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Model(str, Enum):
    """Models known to the client, valued by their wire id."""

    GPT_4 = "gpt-4"
    GPT_4_32K = "gpt-4-32k"
    GPT_3_5_TURBO = "gpt-3.5-turbo"
    TEXT_DAVINCI_003 = "text-davinci-003"


@dataclass(frozen=True)
class CustomModel:
    """A model not listed in :class:`Model`, referenced by its raw id."""

    id: str


ModelRef = Union[Model, CustomModel, str]


def custom(model_id: str) -> CustomModel:
    """Return a reference to a model the registry does not know about."""
    return CustomModel(id=model_id)


def resolve(model: ModelRef) -> str:
    """Return the wire id for ``model``."""
    if isinstance(model, Model):
        return model.value
    if isinstance(model, CustomModel):
        return model.id
    return str(model)


__all__ = ["Model", "CustomModel", "ModelRef", "custom", "resolve"]
