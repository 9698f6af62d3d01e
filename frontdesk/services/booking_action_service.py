from dataclasses import dataclass, field
from datetime import datetime, timezone

from frontdesk.extensions import db
from frontdesk.models import BookingAction, BookingStatus, PaymentMethod
from frontdesk.services.audit_service import AuditService
from frontdesk.services.booking_service import BookingService
from frontdesk.services.sms_service import SmsService

NOTIFICATION = "notification"
AUDIT = "audit"


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RequestContext:
    """Who is acting, and when. Built by the web layer from the session."""

    admin_id: int
    admin_username: str
    now: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class SecondaryFailure:
    effect: str
    detail: str


@dataclass
class ActionOutcome:
    ok: bool
    message: str
    secondary_failures: list = field(default_factory=list)

    @property
    def category(self):
        return "success" if self.ok else "error"


class BookingActionService:
    """Admin state changes on a single booking.

    Every action runs load -> mutate -> notify -> audit. Only the mutation
    decides the outcome; notification and audit failures are collected in
    ``ActionOutcome.secondary_failures`` and never undo the mutation.
    """

    @staticmethod
    def perform(ctx, action, booking_id):
        if not str(booking_id or "").strip():
            return ActionOutcome(False, "Booking ID required")

        parsed = action if isinstance(action, BookingAction) else BookingAction.parse(action)
        if parsed is None:
            return ActionOutcome(False, "Invalid action")

        booking = BookingService.get_booking(booking_id)
        if booking is None:
            return ActionOutcome(False, "Booking not found")

        handler = getattr(BookingActionService, f"_{parsed.value}")
        return handler(ctx, booking)

    @staticmethod
    def _best_effort(outcome, effect, func, *args, **kwargs):
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            db.session.rollback()
            outcome.secondary_failures.append(SecondaryFailure(effect, str(exc) or exc.__class__.__name__))
            return None
        if result is False:
            outcome.secondary_failures.append(SecondaryFailure(effect, "not delivered"))
        return result

    @staticmethod
    def _cancel_advanced(ctx, booking):
        booking_id = booking.id
        advance_date = booking.advance_date

        if not BookingService.cancel_advanced_booking(booking):
            return ActionOutcome(False, "Failed to cancel advanced booking")

        outcome = ActionOutcome(True, "Advanced booking cancelled successfully! Room is now available.")
        BookingActionService._best_effort(outcome, NOTIFICATION, SmsService.send_cancellation_sms, booking_id)
        BookingActionService._best_effort(
            outcome,
            AUDIT,
            AuditService.record_cancellation,
            booking,
            ctx.admin_id,
            f"Advanced booking cancelled by {ctx.admin_username}",
            advance_date=advance_date,
        )
        return outcome

    @staticmethod
    def _mark_paid(ctx, booking):
        booking_id = booking.id
        resource_name = booking.resource.name
        already_released = booking.status == BookingStatus.COMPLETED
        # A cancelled or checked-out stay is billed up to when it ended.
        billed_until = booking.actual_check_out or ctx.now
        duration = BookingService.calculate_duration(booking.check_in, billed_until)
        amount = BookingService.calculate_checkout_amount(booking.check_in, billed_until)

        if not BookingService.mark_booking_paid(booking_id, amount=amount, now=ctx.now):
            return ActionOutcome(False, "Failed to mark as paid")

        if already_released:
            outcome = ActionOutcome(True, "Booking marked as paid!")
        else:
            outcome = ActionOutcome(True, "Booking marked as paid! Room is now available.")
        BookingActionService._best_effort(
            outcome, NOTIFICATION, SmsService.send_checkout_confirmation_sms, booking_id
        )
        BookingActionService._best_effort(
            outcome,
            AUDIT,
            AuditService.record_payment,
            booking,
            ctx.admin_id,
            amount,
            PaymentMethod.CHECKOUT,
            f"Checkout payment for {resource_name} - Duration: {duration.formatted}",
        )
        return outcome

    @staticmethod
    def _checkout(ctx, booking):
        booking_id = booking.id
        resource_name = booking.resource.name
        duration = BookingService.calculate_duration(booking.check_in, ctx.now)
        amount = BookingService.calculate_checkout_amount(booking.check_in, ctx.now)

        if not BookingService.complete_checkout(booking_id, amount=amount, now=ctx.now):
            return ActionOutcome(False, "Failed to complete checkout")

        outcome = ActionOutcome(True, "Checkout completed successfully!")
        BookingActionService._best_effort(
            outcome, NOTIFICATION, SmsService.send_checkout_confirmation_sms, booking_id
        )
        BookingActionService._best_effort(
            outcome,
            AUDIT,
            AuditService.record_payment,
            booking,
            ctx.admin_id,
            amount,
            PaymentMethod.CHECKOUT_COMPLETE,
            f"Checkout completed for {resource_name} - Duration: {duration.formatted}",
        )
        return outcome

    @staticmethod
    def _cancel_booking(ctx, booking):
        booking_id = booking.id
        duration = BookingService.calculate_duration(booking.check_in, ctx.now)

        if not BookingService.cancel_regular_booking(booking, now=ctx.now):
            return ActionOutcome(False, "Failed to cancel booking")

        outcome = ActionOutcome(True, "Booking cancelled successfully! Room is now available.")
        BookingActionService._best_effort(outcome, NOTIFICATION, SmsService.send_cancellation_sms, booking_id)
        BookingActionService._best_effort(
            outcome,
            AUDIT,
            AuditService.record_cancellation,
            booking,
            ctx.admin_id,
            f"Regular booking cancelled by {ctx.admin_username} after {duration.formatted}",
            duration_minutes=duration.total_minutes,
        )
        return outcome
