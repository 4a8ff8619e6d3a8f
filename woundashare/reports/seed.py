"""
Demo reports the mock data service starts with.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..auth.models import DEMO_NORMAL_USER
from .models import Medication, Prescription, Report, ReportStatus


def demo_reports(now: Optional[datetime] = None) -> List[Report]:
    """Two reports for the demo patient: one completed, one pending."""
    now = now or datetime.now(timezone.utc)
    return [
        Report(
            id="1",
            user_id=DEMO_NORMAL_USER.id,
            user_name=DEMO_NORMAL_USER.name,
            created_at=now - timedelta(hours=72),
            status=ReportStatus.COMPLETED,
            title="Ankle wound from cycling accident",
            description=(
                "I fell off my bike and got a deep cut on my right ankle. It seems to be "
                "healing slowly but there is some redness around the wound."
            ),
            image_url="/placeholder.svg",
            location="Right ankle",
            pain_level=3,
            prescription=Prescription(
                id="p1",
                report_id="1",
                created_at=now - timedelta(hours=48),
                diagnosis="Mild infection in healing laceration",
                treatment=(
                    "Clean the wound daily with mild soap and water. Apply antibiotic "
                    "ointment and cover with a sterile bandage."
                ),
                medications=[
                    Medication(name="Amoxicillin", dosage="500mg",
                               frequency="Twice daily", duration="7 days"),
                    Medication(name="Ibuprofen", dosage="400mg",
                               frequency="As needed for pain", duration="Up to 5 days"),
                ],
                follow_up_date=(now + timedelta(hours=168)).date(),
                doctor_notes="If redness increases or fever develops, seek immediate medical attention.",
            ),
        ),
        Report(
            id="2",
            user_id=DEMO_NORMAL_USER.id,
            user_name=DEMO_NORMAL_USER.name,
            created_at=now - timedelta(hours=24),
            status=ReportStatus.PENDING,
            title="Hand burn from cooking",
            description=(
                "I accidentally touched a hot pan while cooking and burned my palm. The skin "
                "is red and there are small blisters forming."
            ),
            image_url="/placeholder.svg",
            location="Left palm",
            pain_level=4,
        ),
    ]
