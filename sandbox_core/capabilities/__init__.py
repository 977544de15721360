"""Capability interfaces and the stand-ins bound for them in the sandbox."""

from sandbox_core.environment import EnvironmentService, SandboxEnvironmentService

from .errors import CapabilityError, CapabilityNotImplementedError
from .extensions import ExtensionService, NullExtensionService
from .log import LogLevel, LogService, SandboxLogService
from .tasks import SandboxTaskService, TaskService
from .terminal import SandboxTerminalInstanceService, TerminalInstanceService
from .textfile import SandboxTextFileService, TextFileService
from .tunnel import SandboxTunnelService, TunnelService
from .webview import SandboxWebviewService, WebviewService

SANDBOX_CAPABILITIES: tuple[type, ...] = (
    EnvironmentService,
    LogService,
    ExtensionService,
    WebviewService,
    TextFileService,
    TunnelService,
    TaskService,
    TerminalInstanceService,
)

__all__ = [
    "SANDBOX_CAPABILITIES",
    "CapabilityError",
    "CapabilityNotImplementedError",
    "EnvironmentService",
    "SandboxEnvironmentService",
    "LogLevel",
    "LogService",
    "SandboxLogService",
    "ExtensionService",
    "NullExtensionService",
    "WebviewService",
    "SandboxWebviewService",
    "TextFileService",
    "SandboxTextFileService",
    "TunnelService",
    "SandboxTunnelService",
    "TaskService",
    "SandboxTaskService",
    "TerminalInstanceService",
    "SandboxTerminalInstanceService",
]
