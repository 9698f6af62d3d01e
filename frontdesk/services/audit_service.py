from frontdesk.extensions import db
from frontdesk.models import BookingCancellation, Payment, PaymentStatus


class AuditService:
    @staticmethod
    def record_cancellation(booking, admin_id, reason, advance_date=None, duration_minutes=None):
        record = BookingCancellation(
            booking_id=booking.id,
            resource_id=booking.resource_id,
            cancelled_by=admin_id,
            cancellation_reason=reason,
            original_client_name=booking.client_name,
            original_advance_date=advance_date,
            duration_at_cancellation=duration_minutes,
        )
        db.session.add(record)
        db.session.commit()
        return record

    @staticmethod
    def record_payment(booking, admin_id, amount, method, notes):
        payment = Payment(
            booking_id=booking.id,
            resource_id=booking.resource_id,
            amount=amount,
            payment_method=method,
            payment_status=PaymentStatus.COMPLETED,
            admin_id=admin_id,
            payment_notes=notes,
        )
        db.session.add(payment)
        db.session.commit()
        return payment
