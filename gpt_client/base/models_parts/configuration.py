"""
Runtime request configuration owned by a client instance.

Pydantic model with assignment validation so that a bad value is rejected
when it is set rather than when the next request is sent.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .model import CustomModel, Model


class Configuration(BaseModel):
    """Mutable per-client request settings.

    Attributes:
        model: Model override; when unset the endpoint's default model is used.
        temperature: Sampling temperature in ``[0.0, 2.0]``; omitted from the
            request when unset.
        max_tokens: Completion token cap (positive); omitted when unset.

    Raises:
        pydantic.ValidationError: On construction or assignment of an
            out-of-range value.
    """

    model_config = ConfigDict(validate_assignment=True, protected_namespaces=())

    model: Optional[Union[Model, CustomModel, str]] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)

    @classmethod
    def standard(cls) -> "Configuration":
        """Return a configuration with every field unset."""
        return cls()


__all__ = ["Configuration"]
