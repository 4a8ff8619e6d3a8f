"""
In-memory data stores and their FastAPI dependencies.

The process holds one report repository and one principal directory; each
process has its own, and nothing survives a restart.
"""
from .config import settings
from .auth.service import PrincipalDirectory
from .reports.repository import InMemoryReportRepository, ReportRepository
from .reports.seed import demo_reports

# Create the process-wide stores
report_repository = InMemoryReportRepository(
    demo_reports() if settings.seed_demo_data else None
)
principal_directory = PrincipalDirectory(seed=True)

def get_report_repository() -> ReportRepository:
    """
    Report repository dependency.
    
    Returns:
        ReportRepository: The process-wide report repository
    """
    return report_repository

def get_principal_directory() -> PrincipalDirectory:
    """
    Principal directory dependency.
    
    Returns:
        PrincipalDirectory: The process-wide principal directory
    """
    return principal_directory
