from frontdesk.services.audit_service import AuditService
from frontdesk.services.auth_service import AuthService
from frontdesk.services.booking_action_service import (
    ActionOutcome,
    BookingActionService,
    RequestContext,
    SecondaryFailure,
)
from frontdesk.services.booking_service import BookingService, Duration
from frontdesk.services.export_service import EmailResult, ExportService
from frontdesk.services.setting_service import SettingService
from frontdesk.services.sms_service import SmsService

__all__ = [
    "ActionOutcome",
    "AuditService",
    "AuthService",
    "BookingActionService",
    "BookingService",
    "Duration",
    "EmailResult",
    "ExportService",
    "RequestContext",
    "SecondaryFailure",
    "SettingService",
    "SmsService",
]
