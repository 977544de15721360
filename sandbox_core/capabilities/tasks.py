"""Task runner capability.

Nothing can be built, run or terminated without spawning host processes, so
every operation that would act on a task fails with
:class:`CapabilityNotImplementedError`. Queries about tasks answer as if the
workspace defined none.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Sequence

from sandbox_core.events import NEVER, Disposable, EventStream

from .errors import CapabilityNotImplementedError


@dataclass(frozen=True)
class Task:
    id: str
    label: str
    type: str = "shell"
    group: str | None = None


@dataclass(frozen=True)
class TaskSummary:
    exit_code: int | None = None


@dataclass(frozen=True)
class TaskTerminateResponse:
    success: bool
    task: Task | None = None


@dataclass(frozen=True)
class TaskFilter:
    version: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class WorkspaceFolderTaskResult:
    workspace_folder: str
    tasks: tuple[Task, ...] = field(default_factory=tuple)


class TaskService(ABC):
    supports_multiple_task_executions: bool

    @property
    @abstractmethod
    def on_did_state_change(self) -> EventStream: ...

    # Queries
    @abstractmethod
    async def is_active(self) -> bool: ...

    @abstractmethod
    async def get_active_tasks(self) -> Sequence[Task]: ...

    @abstractmethod
    async def get_busy_tasks(self) -> Sequence[Task]: ...

    @abstractmethod
    async def tasks(self, filter: TaskFilter | None = None) -> Sequence[Task]: ...

    @abstractmethod
    def task_types(self) -> Sequence[str]: ...

    @abstractmethod
    async def get_workspace_tasks(
        self, run_source: str | None = None
    ) -> Mapping[str, WorkspaceFolderTaskResult]: ...

    @abstractmethod
    async def read_recent_tasks(self) -> Sequence[Task]: ...

    @abstractmethod
    async def get_tasks_for_group(self, group: str) -> Sequence[Task]: ...

    @abstractmethod
    def get_recently_used_tasks(self) -> "OrderedDict[str, str]": ...

    # Operations
    @abstractmethod
    def configure_action(self) -> Any: ...

    @abstractmethod
    async def build(self) -> TaskSummary: ...

    @abstractmethod
    async def run_test(self) -> TaskSummary: ...

    @abstractmethod
    async def run(self, task: Task | None, options: Mapping[str, Any] | None = None) -> TaskSummary | None: ...

    @abstractmethod
    def in_terminal(self) -> bool: ...

    @abstractmethod
    def restart(self, task: Task) -> None: ...

    @abstractmethod
    async def terminate(self, task: Task) -> TaskTerminateResponse: ...

    @abstractmethod
    async def terminate_all(self) -> Sequence[TaskTerminateResponse]: ...

    @abstractmethod
    async def get_task(self, workspace_folder: str, alias: str, compare_id: bool = False) -> Task | None: ...

    @abstractmethod
    async def try_resolve_task(self, configuring_task: Task) -> Task | None: ...

    @abstractmethod
    def remove_recently_used_task(self, key: str) -> None: ...

    @abstractmethod
    async def migrate_recent_tasks(self, tasks: Sequence[Task]) -> None: ...

    @abstractmethod
    def create_sorter(self) -> Callable[[Task, Task], int]: ...

    @abstractmethod
    def get_task_description(self, task: Task) -> str | None: ...

    @abstractmethod
    def can_customize(self, task: Task) -> bool: ...

    @abstractmethod
    async def customize(
        self, task: Task, properties: Mapping[str, Any] | None = None, open_config: bool = False
    ) -> None: ...

    @abstractmethod
    async def open_config(self, task: Task | None) -> bool: ...

    @abstractmethod
    def register_task_provider(self, task_provider: Any, type: str) -> Disposable: ...

    @abstractmethod
    def register_task_system(self, scheme: str, task_system_info: Any) -> None: ...

    @abstractmethod
    def register_supported_executions(
        self, custom: bool = False, shell: bool = False, process: bool = False
    ) -> None: ...

    @abstractmethod
    def set_json_tasks_supported(self, are_supported: Awaitable[bool]) -> None: ...

    @abstractmethod
    async def extension_callback_task_complete(self, task: Task, result: int | None) -> None: ...


class SandboxTaskService(TaskService):
    supports_multiple_task_executions = False
    on_did_state_change = NEVER

    async def is_active(self) -> bool:
        return False

    async def get_active_tasks(self) -> Sequence[Task]:
        return ()

    async def get_busy_tasks(self) -> Sequence[Task]:
        return ()

    async def tasks(self, filter: TaskFilter | None = None) -> Sequence[Task]:
        return ()

    def task_types(self) -> Sequence[str]:
        return ()

    async def get_workspace_tasks(
        self, run_source: str | None = None
    ) -> Mapping[str, WorkspaceFolderTaskResult]:
        return {}

    async def read_recent_tasks(self) -> Sequence[Task]:
        return ()

    async def get_tasks_for_group(self, group: str) -> Sequence[Task]:
        return ()

    def get_recently_used_tasks(self) -> "OrderedDict[str, str]":
        return OrderedDict()

    def configure_action(self) -> Any:
        raise CapabilityNotImplementedError("configure_action")

    async def build(self) -> TaskSummary:
        raise CapabilityNotImplementedError("build")

    async def run_test(self) -> TaskSummary:
        raise CapabilityNotImplementedError("run_test")

    async def run(self, task: Task | None, options: Mapping[str, Any] | None = None) -> TaskSummary | None:
        raise CapabilityNotImplementedError("run")

    def in_terminal(self) -> bool:
        raise CapabilityNotImplementedError("in_terminal")

    def restart(self, task: Task) -> None:
        raise CapabilityNotImplementedError("restart")

    async def terminate(self, task: Task) -> TaskTerminateResponse:
        raise CapabilityNotImplementedError("terminate")

    async def terminate_all(self) -> Sequence[TaskTerminateResponse]:
        raise CapabilityNotImplementedError("terminate_all")

    async def get_task(self, workspace_folder: str, alias: str, compare_id: bool = False) -> Task | None:
        raise CapabilityNotImplementedError("get_task")

    async def try_resolve_task(self, configuring_task: Task) -> Task | None:
        raise CapabilityNotImplementedError("try_resolve_task")

    def remove_recently_used_task(self, key: str) -> None:
        raise CapabilityNotImplementedError("remove_recently_used_task")

    async def migrate_recent_tasks(self, tasks: Sequence[Task]) -> None:
        raise CapabilityNotImplementedError("migrate_recent_tasks")

    def create_sorter(self) -> Callable[[Task, Task], int]:
        raise CapabilityNotImplementedError("create_sorter")

    def get_task_description(self, task: Task) -> str | None:
        raise CapabilityNotImplementedError("get_task_description")

    def can_customize(self, task: Task) -> bool:
        raise CapabilityNotImplementedError("can_customize")

    async def customize(
        self, task: Task, properties: Mapping[str, Any] | None = None, open_config: bool = False
    ) -> None:
        raise CapabilityNotImplementedError("customize")

    async def open_config(self, task: Task | None) -> bool:
        raise CapabilityNotImplementedError("open_config")

    def register_task_provider(self, task_provider: Any, type: str) -> Disposable:
        raise CapabilityNotImplementedError("register_task_provider")

    def register_task_system(self, scheme: str, task_system_info: Any) -> None:
        raise CapabilityNotImplementedError("register_task_system")

    def register_supported_executions(
        self, custom: bool = False, shell: bool = False, process: bool = False
    ) -> None:
        raise CapabilityNotImplementedError("register_supported_executions")

    def set_json_tasks_supported(self, are_supported: Awaitable[bool]) -> None:
        raise CapabilityNotImplementedError("set_json_tasks_supported")

    async def extension_callback_task_complete(self, task: Task, result: int | None) -> None:
        raise CapabilityNotImplementedError("extension_callback_task_complete")
