"""Tests for the capability stand-ins."""

import asyncio
import logging

import pytest

from sandbox_core.capabilities import (
    CapabilityNotImplementedError,
    LogLevel,
    NullExtensionService,
    SandboxLogService,
    SandboxTaskService,
    SandboxTerminalInstanceService,
    SandboxTextFileService,
    SandboxTunnelService,
    SandboxWebviewService,
)
from sandbox_core.capabilities.tasks import Task
from sandbox_core.capabilities.terminal import ShellLaunchConfig
from sandbox_core.capabilities.tunnel import TunnelProviderFeatures
from sandbox_core.capabilities.webview import WebviewContentOptions, WebviewOptions
from sandbox_core.events import NEVER
from sandbox_core.files import EntryExistsError, EntryNotFoundError, InMemoryFileSystem
from sandbox_core.resources import Resource

SAMPLE_TASK = Task(id="build", label="npm: compile")


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=1)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_tunnel_queries_are_inert() -> None:
    service = SandboxTunnelService()
    assert asyncio.run(service.get_tunnels()) == ()
    assert service.can_elevate is False
    assert service.can_make_public is False
    assert service.can_tunnel(Resource.file("/remote", is_windows=False)) is False


def test_open_tunnel_resolves_to_none() -> None:
    service = SandboxTunnelService()
    assert asyncio.run(service.open_tunnel(None, "example.com", 8080)) is None
    assert asyncio.run(service.open_tunnel(object(), None, 22, local_port=2222)) is None
    assert asyncio.run(service.change_tunnel_privacy("example.com", 8080, True)) is None
    assert asyncio.run(service.close_tunnel("example.com", 8080)) is None
    handle = service.set_tunnel_provider(None, TunnelProviderFeatures())
    handle.dispose()
    assert handle.disposed


def test_no_op_event_streams_never_fire() -> None:
    fired: list[object] = []
    service = SandboxTunnelService()
    subscription = service.on_tunnel_opened.subscribe(fired.append)
    service.on_tunnel_closed(fired.append)
    asyncio.run(service.open_tunnel(None, "example.com", 8080))
    subscription.dispose()
    assert fired == []
    assert SandboxTaskService().on_did_state_change is NEVER


def test_task_queries_are_inert() -> None:
    service = SandboxTaskService()
    assert asyncio.run(service.is_active()) is False
    assert asyncio.run(service.get_active_tasks()) == ()
    assert asyncio.run(service.get_busy_tasks()) == ()
    assert asyncio.run(service.tasks()) == ()
    assert asyncio.run(service.get_workspace_tasks()) == {}
    assert asyncio.run(service.read_recent_tasks()) == ()
    assert asyncio.run(service.get_tasks_for_group("build")) == ()
    assert service.task_types() == ()
    assert len(service.get_recently_used_tasks()) == 0
    assert service.supports_multiple_task_executions is False


@pytest.mark.parametrize(
    "operation, call",
    [
        ("build", lambda s: asyncio.run(s.build())),
        ("run_test", lambda s: asyncio.run(s.run_test())),
        ("run", lambda s: asyncio.run(s.run(SAMPLE_TASK))),
        ("terminate", lambda s: asyncio.run(s.terminate(SAMPLE_TASK))),
        ("terminate_all", lambda s: asyncio.run(s.terminate_all())),
        ("get_task", lambda s: asyncio.run(s.get_task("folder", "build"))),
        ("customize", lambda s: asyncio.run(s.customize(SAMPLE_TASK))),
        ("open_config", lambda s: asyncio.run(s.open_config(None))),
        ("restart", lambda s: s.restart(SAMPLE_TASK)),
        ("configure_action", lambda s: s.configure_action()),
        ("in_terminal", lambda s: s.in_terminal()),
        ("create_sorter", lambda s: s.create_sorter()),
        ("register_task_provider", lambda s: s.register_task_provider(object(), "npm")),
        ("register_supported_executions", lambda s: s.register_supported_executions()),
        ("try_resolve_task", lambda s: asyncio.run(s.try_resolve_task(SAMPLE_TASK))),
        ("remove_recently_used_task", lambda s: s.remove_recently_used_task("build")),
        ("migrate_recent_tasks", lambda s: asyncio.run(s.migrate_recent_tasks([SAMPLE_TASK]))),
        ("get_task_description", lambda s: s.get_task_description(SAMPLE_TASK)),
        ("can_customize", lambda s: s.can_customize(SAMPLE_TASK)),
        ("register_task_system", lambda s: s.register_task_system("file", {})),
        ("set_json_tasks_supported", lambda s: s.set_json_tasks_supported(object())),
        (
            "extension_callback_task_complete",
            lambda s: asyncio.run(s.extension_callback_task_complete(SAMPLE_TASK, 0)),
        ),
    ],
)
def test_task_operations_fail_with_their_name(operation: str, call) -> None:
    with pytest.raises(CapabilityNotImplementedError) as excinfo:
        call(SandboxTaskService())
    assert excinfo.value.operation == operation
    assert operation in str(excinfo.value)


def test_webview_creation_is_not_implemented() -> None:
    service = SandboxWebviewService()
    assert service.active_webview is None
    with pytest.raises(CapabilityNotImplementedError) as excinfo:
        service.create_webview_element("id", WebviewOptions(), WebviewContentOptions())
    assert excinfo.value.operation == "create_webview_element"
    with pytest.raises(NotImplementedError) as excinfo:
        service.create_webview_overlay("id", WebviewOptions(), WebviewContentOptions())
    assert excinfo.value.operation == "create_webview_overlay"


def test_null_extension_service_reports_nothing_installed() -> None:
    service = NullExtensionService()
    assert asyncio.run(service.get_extensions()) == ()
    assert asyncio.run(service.get_extension("publisher.ext")) is None
    assert asyncio.run(service.when_installed_extensions_registered()) is True
    assert asyncio.run(service.activate_by_event("*")) is None
    assert asyncio.run(service.get_inspect_port(True)) == 0
    assert service.get_extensions_status() == {}
    service.stop_extension_hosts()
    asyncio.run(service.start_extension_hosts())


def test_terminal_instances_cannot_be_created() -> None:
    service = SandboxTerminalInstanceService()
    with pytest.raises(CapabilityNotImplementedError):
        service.create_instance(ShellLaunchConfig(name="bash"))
    with pytest.raises(CapabilityNotImplementedError):
        asyncio.run(service.get_default_shell_and_args(False))
    with pytest.raises(CapabilityNotImplementedError) as excinfo:
        service.create_windows_shell_helper(4242)
    assert excinfo.value.operation == "create_windows_shell_helper"
    assert asyncio.run(service.prepare_path_for_terminal("/a b", None, "bash")) == "/a b"
    assert asyncio.run(service.get_main_process_parent_env()) == {}


def test_not_implemented_failures_stay_local() -> None:
    tasks = SandboxTaskService()
    tunnels = SandboxTunnelService()
    with pytest.raises(CapabilityNotImplementedError):
        asyncio.run(tasks.build())
    assert asyncio.run(tunnels.get_tunnels()) == ()
    assert asyncio.run(tasks.get_active_tasks()) == ()


def test_log_service_writes_through_logging() -> None:
    logger = logging.getLogger("tests.sandbox.log")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        service = SandboxLogService(LogLevel.INFO, logger=logger)
        service.debug("hidden")
        service.info("hello %s", "sandbox")
        service.error(RuntimeError("boom"))
        service.flush()
    finally:
        logger.removeHandler(handler)
    assert [record.getMessage() for record in handler.records] == ["hello sandbox", "boom"]


def test_log_services_sharing_a_logger_keep_their_own_levels() -> None:
    logger = logging.getLogger("tests.sandbox.shared")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        chatty = SandboxLogService(LogLevel.DEBUG, logger=logger)
        quiet = SandboxLogService(LogLevel.ERROR, logger=logger)
        chatty.debug("from chatty")
        quiet.info("from quiet")
        quiet.set_level(LogLevel.OFF)
        quiet.critical("silenced")
        chatty.trace("below debug")
    finally:
        logger.removeHandler(handler)
    assert [record.getMessage() for record in handler.records] == ["from chatty"]
    assert logger.level == logging.NOTSET
    assert chatty.get_level() is LogLevel.DEBUG
    assert quiet.get_level() is LogLevel.OFF


def test_log_level_changes_are_announced_once() -> None:
    service = SandboxLogService(LogLevel.INFO, logger=logging.getLogger("tests.sandbox.level"))
    seen: list[LogLevel] = []
    service.on_did_change_log_level.subscribe(lambda event: seen.append(event.payload["level"]))
    service.set_level(LogLevel.DEBUG)
    service.set_level(LogLevel.DEBUG)
    assert service.get_level() is LogLevel.DEBUG
    assert seen == [LogLevel.DEBUG]


def test_log_level_parsing() -> None:
    assert LogLevel.parse("warn") is LogLevel.WARNING
    assert LogLevel.parse(" Trace ") is LogLevel.TRACE
    with pytest.raises(ValueError):
        LogLevel.parse("loud")


def test_text_file_service_round_trips_through_the_store() -> None:
    store = InMemoryFileSystem()
    folder = Resource.file("/workspace", is_windows=False)
    store.mkdir(folder)
    service = SandboxTextFileService(store)
    saved: list[str] = []
    service.on_did_save.subscribe(lambda event: saved.append(event.payload["resource"].path))

    target = folder.join_path("notes.md")
    asyncio.run(service.create(target, "# notes"))
    content = asyncio.run(service.read(target))
    assert content.value == "# notes"
    assert content.encoding == "utf8"
    assert content.name == "notes.md"
    assert content.size == len("# notes")
    assert asyncio.run(service.exists(target)) is True
    assert saved == ["/workspace/notes.md"]

    with pytest.raises(EntryExistsError):
        asyncio.run(service.create(target, "again"))
    with pytest.raises(EntryNotFoundError):
        asyncio.run(service.write(folder.join_path("missing", "file.md"), "x"))
