"""Bootstrap for a self-contained, deterministic sandbox environment."""

from .app import SandboxApp, SandboxStatus
from .config import ConfigResolver, SandboxConfiguration
from .environment import SandboxEnvironmentService
from .errors import AddressingError, SandboxError, SeedWriteError
from .events import Event, EventBus
from .files import InMemoryFileSystem
from .paths import UserDirs
from .registry import CapabilityRegistry
from .resources import Resource
from .workspace import WorkspaceIdentifier, WorkspaceSeeder

__all__ = [
    "SandboxApp",
    "SandboxStatus",
    "ConfigResolver",
    "SandboxConfiguration",
    "SandboxEnvironmentService",
    "SandboxError",
    "AddressingError",
    "SeedWriteError",
    "Event",
    "EventBus",
    "InMemoryFileSystem",
    "UserDirs",
    "CapabilityRegistry",
    "Resource",
    "WorkspaceIdentifier",
    "WorkspaceSeeder",
]
