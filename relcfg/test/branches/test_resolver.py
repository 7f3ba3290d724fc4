"""Tests for relcfg.branches.resolver."""

from __future__ import annotations

from relcfg.branches.resolver import BranchVersionResolver
from relcfg.core.config import Settings
from relcfg.core.version import Version
from relcfg.git.memory import MemoryRefs
from relcfg.output.console import MockConsole


def _resolver(
    contents: dict[str, str], settings: Settings | None = None
) -> tuple[BranchVersionResolver, MockConsole, MemoryRefs]:
    settings = settings or Settings()
    refs = MemoryRefs.with_file(settings.version_file, contents)
    console = MockConsole()
    return BranchVersionResolver(refs=refs, settings=settings, console=console), console, refs


def test_resolves_version() -> None:
    resolver, console, _ = _resolver({"origin/main": "mod_version = 1.6.3\n"})

    version = resolver.resolve("origin/main")

    assert version == Version("1", "6", "3")
    assert str(version) == "1.6.3"
    assert console.outputs == []


def test_reads_configured_file() -> None:
    settings = Settings(version_file="version.properties", version_key="version")
    resolver, _, refs = _resolver({"origin/main": "version=3.1.4"}, settings)

    assert resolver.resolve("origin/main") == Version("3", "1", "4")
    assert refs.shown == [("origin/main", "version.properties")]


def test_missing_ref_is_absent_with_warning() -> None:
    resolver, console, _ = _resolver({})

    assert resolver.resolve("origin/mc/1.20") is None
    assert console.has_warning()
    warning = console.messages[0]
    assert "origin/mc/1.20" in warning
    assert "gradle.properties" in warning


def test_missing_file_is_absent_with_warning() -> None:
    refs = MemoryRefs(refs={"origin/main": {"build.gradle": ""}})
    console = MockConsole()
    resolver = BranchVersionResolver(refs=refs, settings=Settings(), console=console)

    assert resolver.resolve("origin/main") is None
    assert console.has_warning()


def test_pattern_mismatch_is_absent_with_warning() -> None:
    resolver, console, _ = _resolver({"origin/main": "mod_version = 1.6\n"})

    assert resolver.resolve("origin/main") is None
    assert len(console.find("mod_version")) == 1


def test_keeps_version_text_as_written() -> None:
    resolver, _, _ = _resolver({"origin/main": "mod_version = 1.06.3\n"})

    version = resolver.resolve("origin/main")

    assert str(version) == "1.06.3"
    assert version is not None and version.release_range() == "1.06.x"
