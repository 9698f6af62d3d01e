import httpx
from flask import current_app

from frontdesk.extensions import db
from frontdesk.models import SmsLog, SmsStatus, SmsType
from frontdesk.services.booking_service import BookingService
from frontdesk.services.setting_service import SettingService


class SmsService:
    """Guest SMS through the configured HTTP gateway.

    Every attempt, including skipped ones, leaves a row in ``sms_logs``.
    Callers treat delivery as best-effort.
    """

    @staticmethod
    def _normalize_mobile(mobile):
        return "".join(ch for ch in (mobile or "") if ch.isdigit())

    @staticmethod
    def _deliver(mobile, message):
        url = current_app.config.get("SMS_GATEWAY_URL")
        if not url:
            return SmsStatus.SKIPPED, "SMS gateway not configured"
        if not mobile:
            return SmsStatus.SKIPPED, "No mobile number on booking"

        try:
            response = httpx.post(
                url,
                data={
                    "apikey": current_app.config.get("SMS_API_KEY") or "",
                    "sender": current_app.config.get("SMS_SENDER_ID") or "",
                    "numbers": mobile,
                    "message": message,
                },
                timeout=current_app.config.get("SMS_TIMEOUT", 10),
            )
        except httpx.HTTPError as exc:
            return SmsStatus.FAILED, f"Error: {exc}"

        if response.status_code in (200, 201, 202):
            return SmsStatus.SENT, response.text[:500]
        return SmsStatus.FAILED, f"HTTP {response.status_code}: {response.text[:500]}"

    @staticmethod
    def _send(booking_id, sms_type, build_message):
        booking = BookingService.get_booking(booking_id)
        if booking is None:
            current_app.logger.warning("SMS %s skipped: booking %s not found", sms_type.value, booking_id)
            return False

        message = build_message(booking, SettingService.hotel_name())
        mobile = SmsService._normalize_mobile(booking.client_mobile)
        status, response_data = SmsService._deliver(mobile, message)

        db.session.add(
            SmsLog(
                booking_id=booking.id,
                mobile=mobile,
                sms_type=sms_type,
                message=message,
                status=status,
                response_data=response_data,
            )
        )
        db.session.commit()

        if status != SmsStatus.SENT:
            current_app.logger.info("SMS %s for booking %s not sent: %s", sms_type.value, booking.id, response_data)
        return status == SmsStatus.SENT

    @staticmethod
    def send_cancellation_sms(booking_id):
        def build(booking, hotel_name):
            return (
                f"Dear {booking.client_name}, your booking for {booking.resource.name} "
                f"has been cancelled. - {hotel_name}"
            )

        return SmsService._send(booking_id, SmsType.CANCELLATION, build)

    @staticmethod
    def send_checkout_confirmation_sms(booking_id):
        def build(booking, hotel_name):
            return (
                f"Dear {booking.client_name}, checkout from {booking.resource.name} is complete. "
                f"Amount: Rs {booking.total_amount}. Thank you for staying with {hotel_name}."
            )

        return SmsService._send(booking_id, SmsType.CHECKOUT, build)
