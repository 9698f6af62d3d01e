from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

import pandas as pd
from flask import current_app, render_template
from flask_mail import Message

from frontdesk.extensions import db, mail
from frontdesk.models import EmailLog, EmailStatus, EmailType
from frontdesk.services.setting_service import SettingService

CSV_COLUMNS = [
    "ID",
    "Resource",
    "Type",
    "Client Name",
    "Mobile",
    "Aadhar/License",
    "Receipt No",
    "Payment Mode",
    "Check-in",
    "Check-out",
    "Status",
    "Paid",
    "Amount",
    "Admin",
    "Created",
]


@dataclass(frozen=True)
class EmailResult:
    success: bool
    message: str


def _fmt_dt(value):
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else ""


class ExportService:
    @staticmethod
    def build_csv(bookings):
        rows = [
            {
                "ID": b.id,
                "Resource": b.resource.name,
                "Type": b.booking_type.value,
                "Client Name": b.client_name,
                "Mobile": b.client_mobile,
                "Aadhar/License": b.client_aadhar or b.client_license or "",
                "Receipt No": b.receipt_number or "",
                "Payment Mode": b.payment_mode or "",
                "Check-in": _fmt_dt(b.check_in),
                "Check-out": _fmt_dt(b.check_out),
                "Status": b.status.value,
                "Paid": "Yes" if b.is_paid else "No",
                "Amount": str(b.total_amount or 0),
                "Admin": b.admin.username if b.admin else "",
                "Created": _fmt_dt(b.created_at),
            }
            for b in bookings
        ]
        return pd.DataFrame(rows, columns=CSV_COLUMNS).to_csv(index=False)

    @staticmethod
    def _smtp_configured():
        config = current_app.config
        return bool(config.get("MAIL_SERVER") and config.get("MAIL_USERNAME") and config.get("MAIL_PASSWORD"))

    @staticmethod
    def send_email(to_email, subject, html_body, admin_id, attachment=None, email_type=EmailType.EXPORT):
        """Send one HTML email, optionally with a ``(filename, mimetype, data)`` attachment.

        Never raises for delivery problems; the outcome is returned and kept in
        ``email_logs``.
        """
        if not ExportService._smtp_configured():
            return EmailResult(False, "Email SMTP configuration not found. Please configure email settings.")

        log = EmailLog(
            recipient_email=to_email,
            subject=subject,
            email_type=email_type,
            status=EmailStatus.PENDING,
            admin_id=admin_id,
        )
        db.session.add(log)
        db.session.commit()

        try:
            message = Message(
                subject=subject,
                recipients=[to_email],
                html=html_body,
                sender=(SettingService.hotel_name(), current_app.config["MAIL_USERNAME"]),
            )
            if attachment:
                filename, mimetype, data = attachment
                message.attach(filename, mimetype, data)
            mail.send(message)
        except Exception as exc:
            detail = str(exc) or exc.__class__.__name__
            current_app.logger.warning("Email to %s failed: %s", to_email, detail)
            log.status = EmailStatus.FAILED
            log.response_data = f"Error: {detail}"
            db.session.commit()
            return EmailResult(False, detail)

        log.status = EmailStatus.SENT
        log.response_data = "Email sent successfully"
        db.session.commit()
        return EmailResult(True, "Email sent successfully")

    @staticmethod
    def send_export_email(to_email, bookings, filters, admin_id):
        now = datetime.now()
        hotel_name = SettingService.hotel_name()
        filename = f"bookings_export_{now.strftime('%Y-%m-%d_%H-%M-%S')}.csv"
        total_revenue = sum((Decimal(str(b.total_amount or 0)) for b in bookings), Decimal("0"))
        date_range = f"{filters.get('start_date') or 'All'} to {filters.get('end_date') or 'All'}"

        body = render_template(
            "emails/export_report.html",
            hotel_name=hotel_name,
            export_type="Booking Records",
            date_range=date_range,
            total_bookings=len(bookings),
            total_revenue=f"{total_revenue:,.2f}",
            generated_on=now.strftime("%d-%b-%Y %H:%M:%S"),
        )
        subject = f"{hotel_name} - Booking Export Report - {now.strftime('%d-%b-%Y')}"
        csv_data = ExportService.build_csv(bookings)
        return ExportService.send_email(
            to_email, subject, body, admin_id, attachment=(filename, "text/csv", csv_data)
        )

    @staticmethod
    def test_email_configuration(to_email, admin_id):
        hotel_name = SettingService.hotel_name()
        body = render_template(
            "emails/test_email.html",
            hotel_name=hotel_name,
            sent_on=datetime.now().strftime("%d-%b-%Y %H:%M:%S"),
        )
        return ExportService.send_email(
            to_email, f"{hotel_name} - Email Configuration Test", body, admin_id, email_type=EmailType.TEST
        )
