"""
Tests for the report store operations.
"""
import asyncio
from datetime import date

import pytest

from woundashare.config import settings
from woundashare.exceptions import (
    InvalidInputException,
    InvalidTransitionException,
    NotFoundException,
)
from woundashare.reports import service
from woundashare.reports.models import ReportStatus

MEDICATIONS = [{"name": "Amoxicillin", "dosage": "500mg", "frequency": "Twice daily", "duration": "7 days"}]
DIAGNOSIS = "Superficial laceration"
TREATMENT = "Rinse with saline twice a day and keep covered."


def create(repository, user_id="user-1", user_name="Demo Patient", title="Cut on hand", pain_level=7):
    return asyncio.run(service.create_report(
        repository,
        user_id=user_id,
        user_name=user_name,
        title=title,
        description="Sliced my palm while cooking.",
        image_url="/placeholder.svg",
        location="Left palm",
        pain_level=pain_level,
    ))


def attach(repository, report_id, diagnosis=DIAGNOSIS, treatment=TREATMENT, medications=MEDICATIONS, **kwargs):
    return asyncio.run(service.attach_prescription(
        repository, report_id, diagnosis, treatment, medications, **kwargs
    ))


def test_created_report_is_pending(repository):
    report = create(repository, title="Cut on hand", pain_level=7)
    assert report.status == ReportStatus.PENDING
    assert report.pain_level == 7
    assert report.prescription is None
    assert report.user_name == "Demo Patient"
    assert repository.get(report.id) == report


@pytest.mark.parametrize("pain_level", [-1, 11, 42])
def test_out_of_range_pain_level_leaves_store_unchanged(repository, pain_level):
    with pytest.raises(InvalidInputException) as exc_info:
        create(repository, pain_level=pain_level)
    assert exc_info.value.field == "pain_level"
    assert len(repository) == 0


def test_reports_by_owner_are_newest_first_and_owned(repository):
    first = create(repository, title="First wound")
    create(repository, user_id="user-2", user_name="Sarah Johnson", title="Other patient")
    second = create(repository, title="Second wound")

    reports = asyncio.run(service.get_reports_by_owner(repository, "user-1"))
    assert [r.id for r in reports] == [second.id, first.id]
    assert all(r.user_id == "user-1" for r in reports)
    assert all(a.created_at >= b.created_at for a, b in zip(reports, reports[1:]))


def test_reports_by_owner_without_reports_is_empty(repository):
    assert asyncio.run(service.get_reports_by_owner(repository, "nobody")) == []


def test_all_reports_newest_first(seeded_repository):
    created = create(seeded_repository, user_id="user-2", user_name="Sarah Johnson")
    reports = asyncio.run(service.get_all_reports(seeded_repository))
    assert [r.id for r in reports] == [created.id, "2", "1"]


def test_get_report_missing_is_none(repository):
    assert asyncio.run(service.get_report(repository, "missing")) is None


def test_get_report_is_idempotent(seeded_repository):
    first = asyncio.run(service.get_report(seeded_repository, "1"))
    second = asyncio.run(service.get_report(seeded_repository, "1"))
    assert first == second


def test_returned_reports_do_not_alias_store(seeded_repository):
    report = asyncio.run(service.get_report(seeded_repository, "2"))
    report.title = "Changed by caller"
    assert seeded_repository.get("2").title == "Hand burn from cooking"


def test_attach_valid_prescription_completes_report(repository):
    report = create(repository)
    updated = attach(repository, report.id, follow_up_date=date(2030, 1, 15), doctor_notes="Call if worse")
    assert updated.status == ReportStatus.COMPLETED
    assert updated.prescription.report_id == report.id
    assert updated.prescription.follow_up_date == date(2030, 1, 15)
    assert updated.prescription.medications[0].name == "Amoxicillin"
    assert repository.get(report.id).status == ReportStatus.COMPLETED


def test_attach_to_missing_report_is_not_found(seeded_repository):
    before = seeded_repository.get_all()
    with pytest.raises(NotFoundException):
        attach(seeded_repository, "missing")
    assert seeded_repository.get_all() == before


def test_missing_report_wins_over_invalid_input(repository):
    with pytest.raises(NotFoundException):
        attach(repository, "missing", diagnosis="short")


def test_short_diagnosis_is_rejected(repository):
    report = create(repository)
    with pytest.raises(InvalidInputException) as exc_info:
        attach(repository, report.id, diagnosis="Laceratio")
    assert exc_info.value.field == "diagnosis"
    assert repository.get(report.id).status == ReportStatus.PENDING


def test_blank_medication_field_is_rejected(repository):
    report = create(repository)
    medications = [dict(MEDICATIONS[0], dosage="")]
    with pytest.raises(InvalidInputException) as exc_info:
        attach(repository, report.id, medications=medications)
    assert exc_info.value.field == "medications[0].dosage"


def test_reattaching_overwrites_prescription(repository):
    report = create(repository)
    first = attach(repository, report.id)
    second = attach(repository, report.id, diagnosis="Infected laceration")
    assert second.status == ReportStatus.COMPLETED
    assert second.prescription.id != first.prescription.id
    assert repository.get(report.id).prescription.diagnosis == "Infected laceration"


def test_reattaching_is_refused_when_overwrite_disabled(repository, monkeypatch):
    monkeypatch.setattr(settings, "allow_prescription_overwrite", False)
    report = create(repository)
    first = attach(repository, report.id)
    with pytest.raises(InvalidTransitionException):
        attach(repository, report.id, diagnosis="Infected laceration")
    assert repository.get(report.id).prescription.id == first.prescription.id


def test_concurrent_prescriptions_do_not_interleave(repository):
    report = create(repository)

    async def both():
        return await asyncio.gather(
            service.attach_prescription(repository, report.id, DIAGNOSIS, TREATMENT, MEDICATIONS),
            service.attach_prescription(repository, report.id, "Infected laceration", TREATMENT, MEDICATIONS),
        )

    results = asyncio.run(both())
    stored = repository.get(report.id)
    assert stored.prescription.id in {r.prescription.id for r in results}
    assert stored.prescription.report_id == report.id


def test_upload_image_returns_placeholder():
    url = asyncio.run(service.upload_image("wound.png", "image/png", 1024))
    assert url == settings.placeholder_image_url


@pytest.mark.parametrize("content_type,size", [
    ("application/pdf", 1024),
    ("image/png", 0),
    ("image/png", 6 * 1024 * 1024),
])
def test_upload_image_rejects_bad_files(content_type, size):
    with pytest.raises(InvalidInputException) as exc_info:
        asyncio.run(service.upload_image("wound", content_type, size))
    assert exc_info.value.field == "image"
