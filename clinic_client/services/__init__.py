from clinic_client.services.activity_log import ActivityLogService
from clinic_client.services.appointments import AppointmentService
from clinic_client.services.auth import AuthService
from clinic_client.services.dashboard import DashboardService
from clinic_client.services.financial import FinancialService
from clinic_client.services.patients import PatientService
from clinic_client.services.reports import ReportService

__all__ = [
    "ActivityLogService",
    "AppointmentService",
    "AuthService",
    "DashboardService",
    "FinancialService",
    "PatientService",
    "ReportService",
]
