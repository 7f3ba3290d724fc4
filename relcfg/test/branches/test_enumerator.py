"""Tests for relcfg.branches.enumerator."""

from __future__ import annotations

from relcfg.branches.enumerator import list_maintenance_branches, parse_branch_listing
from relcfg.core.result import Err, Ok
from relcfg.git.memory import MemoryRefs

LISTING = """\
  origin/HEAD -> origin/main
  origin/main
  origin/mc/1.21.7

  origin/feature/mc/1.20
  origin/mc/1.20.1   
  upstream/mc/1.19
"""


def test_parse_branch_listing_trims_and_drops_blanks() -> None:
    assert parse_branch_listing("  a\n\n   \n b \n") == ["a", "b"]
    assert parse_branch_listing("") == []


def test_filters_by_prefix_preserving_order() -> None:
    result = list_maintenance_branches(MemoryRefs(listing=LISTING), "origin/mc/")
    assert result == Ok(["origin/mc/1.21.7", "origin/mc/1.20.1"])


def test_no_maintenance_branches() -> None:
    result = list_maintenance_branches(MemoryRefs(listing="  origin/main\n"), "origin/mc/")
    assert result == Ok([])


def test_other_prefix() -> None:
    result = list_maintenance_branches(MemoryRefs(listing=LISTING), "upstream/")
    assert result == Ok(["upstream/mc/1.19"])


def test_listing_failure_is_returned() -> None:
    refs = MemoryRefs(listing_error="fatal: not a git repository")

    result = list_maintenance_branches(refs, "origin/mc/")

    assert isinstance(result, Err)
    assert result.error.message == "fatal: not a git repository"
