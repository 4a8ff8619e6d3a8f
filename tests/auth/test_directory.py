"""
Tests for the principal directory.
"""
from woundashare.auth.models import UserRole
from woundashare.auth.service import PrincipalDirectory, build_principal


def test_directory_is_seeded_with_demo_accounts():
    directory = PrincipalDirectory()
    assert [p.id for p in directory.list()] == ["admin-1", "user-1"]


def test_directory_search_matches_name_and_email():
    directory = PrincipalDirectory()
    directory.add(build_principal("sarah@example.com", "Sarah Johnson"))

    assert [p.name for p in directory.list("SARAH")] == ["Sarah Johnson"]
    assert [p.id for p in directory.list("woundashare")] == ["admin-1"]
    assert len(directory.list("  ")) == 3


def test_directory_filters_by_role():
    directory = PrincipalDirectory()
    directory.add(build_principal("sarah@example.com", "Sarah Johnson"))

    assert [p.id for p in directory.list(role=UserRole.ADMIN)] == ["admin-1"]
    assert len(directory.list(role=UserRole.PATIENT)) == 2
    assert [p.name for p in directory.list("sarah", UserRole.PATIENT)] == ["Sarah Johnson"]
    assert directory.list("sarah", UserRole.ADMIN) == []


def test_unseeded_directory_is_empty():
    assert len(PrincipalDirectory(seed=False)) == 0
