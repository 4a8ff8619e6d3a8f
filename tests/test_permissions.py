"""
Tests for the access policy.
"""
from datetime import datetime, timezone

import pytest

from woundashare.auth.models import DEMO_ADMIN_USER, DEMO_NORMAL_USER, Principal
from woundashare.core.permissions import (
    Permission,
    RouteAccess,
    can_create_prescription,
    can_view_report,
    classify_route,
    has_permission,
    requires_admin,
    requires_auth,
    resolve_redirect,
)
from woundashare.reports.models import Report

OTHER_PATIENT = Principal(id="user-2", email="sarah@example.com", name="Sarah Johnson")

REPORT = Report(
    id="r1", user_id="user-1", user_name="Demo Patient",
    created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
    title="Cut on hand", description="Sliced my palm while cooking.",
    image_url="/placeholder.svg", location="Left palm", pain_level=7,
)


def test_owner_and_admin_can_view_report():
    assert can_view_report(DEMO_NORMAL_USER, REPORT)
    assert can_view_report(DEMO_ADMIN_USER, REPORT)
    assert not can_view_report(OTHER_PATIENT, REPORT)
    assert not can_view_report(None, REPORT)


def test_only_admin_can_create_prescription():
    assert can_create_prescription(DEMO_ADMIN_USER)
    assert not can_create_prescription(DEMO_NORMAL_USER)
    assert not can_create_prescription(None)


def test_role_permissions():
    assert has_permission(DEMO_NORMAL_USER, Permission.CREATE_REPORT)
    assert not has_permission(DEMO_NORMAL_USER, Permission.VIEW_ALL_REPORTS)
    assert has_permission(DEMO_ADMIN_USER, Permission.VIEW_USERS)
    assert not has_permission(None, Permission.VIEW_OWN_REPORTS)


@pytest.mark.parametrize("route,access", [
    ("/login", RouteAccess.PUBLIC),
    ("/register", RouteAccess.PUBLIC),
    ("/", RouteAccess.AUTHENTICATED),
    ("/dashboard", RouteAccess.AUTHENTICATED),
    ("/reports/abc", RouteAccess.AUTHENTICATED),
    ("/my-reports?status=pending", RouteAccess.AUTHENTICATED),
    ("/admin", RouteAccess.ADMIN),
    ("/admin/reports/42", RouteAccess.ADMIN),
    ("/admin/users/", RouteAccess.ADMIN),
    ("/reports", RouteAccess.PUBLIC),
    ("/no-such-page", RouteAccess.PUBLIC),
])
def test_classify_route(route, access):
    assert classify_route(route) == access


def test_requires_auth_and_admin():
    assert requires_auth("/admin")
    assert requires_admin("/admin")
    assert requires_auth("/upload-report")
    assert not requires_admin("/upload-report")
    assert not requires_auth("/login")


@pytest.mark.parametrize("principal,route,redirect", [
    (None, "/dashboard", "/login"),
    (None, "/admin", "/login"),
    (None, "/login", None),
    (DEMO_NORMAL_USER, "/admin/users", "/dashboard"),
    (DEMO_NORMAL_USER, "/my-reports", None),
    (DEMO_NORMAL_USER, "/", "/dashboard"),
    (DEMO_ADMIN_USER, "/admin/reports/1", None),
    (None, "/register", None),
    (DEMO_NORMAL_USER, "/login", "/dashboard"),
    (DEMO_ADMIN_USER, "/register", "/dashboard"),
    (DEMO_NORMAL_USER, "/login/", "/dashboard"),
])
def test_resolve_redirect(principal, route, redirect):
    assert resolve_redirect(principal, route) == redirect
