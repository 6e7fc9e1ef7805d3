"""Header-setting interceptors."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any

from multi_interceptors.interceptors.base import RequestInterceptor
from multi_interceptors.types import RequestTemplate


class StaticHeaderInterceptor(RequestInterceptor):
    """Sets one header to a fixed value on every request."""

    def __init__(self, name: str, value: str):
        self._name = name
        self._value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    def apply(self, request: RequestTemplate) -> None:
        request.header(self._name, self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._value!r})"


class RandomTokenHeaderInterceptor(RequestInterceptor):
    """Sets one header to a freshly generated UUID4 on every request.

    The value is the canonical 36 character hyphenated hex form. Uniqueness
    relies on the generator alone and is never checked.

    Args:
        name: Header name to set.
        token_factory: Zero-argument callable used instead of ``uuid.uuid4``.
            Its result is converted with ``str()``.
    """

    def __init__(self, name: str, token_factory: Callable[[], Any] | None = None):
        self._name = name
        self._token_factory = token_factory or uuid.uuid4

    @property
    def name(self) -> str:
        return self._name

    def apply(self, request: RequestTemplate) -> None:
        request.header(self._name, str(self._token_factory()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
