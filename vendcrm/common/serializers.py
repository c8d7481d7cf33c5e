"""Serializer helpers shared by the CRM apps."""

from __future__ import annotations

import re
from collections.abc import Container
from collections.abc import Mapping
from typing import Any

from django.http import QueryDict

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def camel_to_snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def normalize_frontend_payload(data: Any, fields: Container[str] = ()) -> Any:
    """Map camelCase keys sent by the dashboard to serializer field names.

    ``customerId`` becomes ``customer`` (the FK field) unless ``customer_id``
    is itself one of ``fields``, as ``machine_id`` is on maintenance records.
    Other keys are plain snake_case. Snake_case keys win when both spellings
    are present.
    """
    if not isinstance(data, Mapping):
        return data
    out = data.dict() if isinstance(data, QueryDict) else dict(data)
    for key in list(out):
        snake = camel_to_snake(key)
        if snake == key:
            continue
        if snake.endswith("_id") and snake not in fields:
            snake = snake[: -len("_id")]
        if snake not in out:
            out[snake] = out.pop(key)
    return out


class FrontendAliasMixin:
    """Accept camelCase input on any ModelSerializer."""

    def to_internal_value(self, data):
        fields = self.fields  # type: ignore[attr-defined]
        return super().to_internal_value(normalize_frontend_payload(data, fields))  # type: ignore[misc]
