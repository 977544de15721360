"""Tests for seeding the sandboxed workspace."""

import pytest

from sandbox_core.errors import SeedWriteError
from sandbox_core.files import FileType, InMemoryFileSystem
from sandbox_core.resources import Resource
from sandbox_core.seed import SEED_FILES
from sandbox_core.workspace import SIMPLE_WORKSPACE_ID, WorkspaceIdentifier, WorkspaceSeeder

EXPECTED_TREE = [
    ("/simpleWorkspace", FileType.DIRECTORY),
    ("/simpleWorkspace/.gitignore", FileType.FILE),
    ("/simpleWorkspace/.vscodeignore", FileType.FILE),
    ("/simpleWorkspace/CHANGELOG.md", FileType.FILE),
    ("/simpleWorkspace/package.json", FileType.FILE),
    ("/simpleWorkspace/src", FileType.DIRECTORY),
    ("/simpleWorkspace/src/extension.ts", FileType.FILE),
    ("/simpleWorkspace/test", FileType.DIRECTORY),
    ("/simpleWorkspace/test/extension.test.ts", FileType.FILE),
    ("/simpleWorkspace/test/index.ts", FileType.FILE),
    ("/simpleWorkspace/tsconfig.json", FileType.FILE),
    ("/simpleWorkspace/tslint.json", FileType.FILE),
]


def _seeder() -> WorkspaceSeeder:
    workspace = WorkspaceIdentifier.simple(is_windows=False)
    return WorkspaceSeeder(InMemoryFileSystem(), workspace.uri)


def _read(seeder: WorkspaceSeeder, relative: str) -> str:
    return seeder.store.read_file(seeder.workspace_root.join_path(relative)).decode("utf-8")


def test_workspace_identifier_is_fixed_on_every_platform() -> None:
    posix = WorkspaceIdentifier.simple(is_windows=False)
    windows = WorkspaceIdentifier.simple(is_windows=True)
    assert posix.id == windows.id == SIMPLE_WORKSPACE_ID
    assert posix.uri == windows.uri
    assert posix.uri.path == "/simpleWorkspace"


def test_seed_writes_exactly_the_manifest_tree() -> None:
    seeder = _seeder()
    seeder.seed()
    assert seeder.store.walk() == EXPECTED_TREE
    for seed_file in SEED_FILES:
        assert _read(seeder, seed_file.relative_path) == seed_file.content


def test_seeded_contents_match_the_published_templates() -> None:
    seeder = _seeder()
    seeder.seed()
    assert '"name": "test-ts"' in _read(seeder, "package.json")
    assert "node_modules" in _read(seeder, ".gitignore").splitlines()
    assert _read(seeder, ".vscodeignore").splitlines() == [
        ".vscode/**",
        ".vscode-test/**",
        "out/test/**",
        "src/**",
        ".gitignore",
        "vsc-extension-quickstart.md",
        "**/tsconfig.json",
        "**/tslint.json",
        "**/*.map",
        "**/*.ts",
    ]
    assert _read(seeder, "CHANGELOG.md").startswith("# Change Log\n")
    assert "\t\t\"module\": \"commonjs\"," in _read(seeder, "tsconfig.json")


def _snapshot(store: InMemoryFileSystem) -> dict[str, bytes]:
    return {
        path: store.read_file(Resource.file(path, is_windows=False))
        for path, kind in store.walk()
        if kind is FileType.FILE
    }


def test_seed_is_idempotent() -> None:
    seeder = _seeder()
    seeder.seed()
    first = _snapshot(seeder.store)
    seeder.seed()
    assert _snapshot(seeder.store) == first
    assert seeder.store.walk() == EXPECTED_TREE


def test_create_file_overwrites_previous_content() -> None:
    seeder = _seeder()
    seeder.create_folder("")
    seeder.create_file("", "notes.txt", "one")
    seeder.create_file("", "notes.txt", "two")
    assert _read(seeder, "notes.txt") == "two"


def test_create_file_without_folder_is_a_seed_error() -> None:
    seeder = _seeder()
    with pytest.raises(SeedWriteError):
        seeder.create_file("src", "extension.ts", "")


def test_create_folder_over_a_file_is_a_seed_error() -> None:
    seeder = _seeder()
    seeder.create_folder("")
    seeder.create_file("", "src", "not a folder")
    with pytest.raises(SeedWriteError):
        seeder.create_folder("src")
