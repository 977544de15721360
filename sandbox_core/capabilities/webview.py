"""Webview capability; rendering needs a real host and always fails here."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import CapabilityNotImplementedError


@dataclass(frozen=True)
class WebviewOptions:
    enable_find_widget: bool = False
    retain_context_when_hidden: bool = False


@dataclass(frozen=True)
class WebviewContentOptions:
    allow_scripts: bool = False
    local_resource_roots: tuple[str, ...] = ()
    port_mapping: Mapping[str, Any] = field(default_factory=dict)


class WebviewService(ABC):
    active_webview: Any

    @abstractmethod
    def create_webview_element(
        self,
        id: str,
        options: WebviewOptions,
        content_options: WebviewContentOptions,
        extension: Any | None = None,
    ) -> Any: ...

    @abstractmethod
    def create_webview_overlay(
        self,
        id: str,
        options: WebviewOptions,
        content_options: WebviewContentOptions,
        extension: Any | None = None,
    ) -> Any: ...


class SandboxWebviewService(WebviewService):
    active_webview = None

    def create_webview_element(
        self,
        id: str,
        options: WebviewOptions,
        content_options: WebviewContentOptions,
        extension: Any | None = None,
    ) -> Any:
        raise CapabilityNotImplementedError("create_webview_element")

    def create_webview_overlay(
        self,
        id: str,
        options: WebviewOptions,
        content_options: WebviewContentOptions,
        extension: Any | None = None,
    ) -> Any:
        raise CapabilityNotImplementedError("create_webview_overlay")
