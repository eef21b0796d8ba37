"""
Booking request notification

Every booking request is mailed to the resort inbox (GMAIL_EMAIL) so the
front desk can follow up. A failed send never fails the booking.
"""
import json
import logging
from html import escape
from typing import Optional
from resort.config import settings
from resort.models.entities import Booking
from resort.notification.email_channel import EmailChannel

logger = logging.getLogger(__name__)

_ROW = (
    '<tr><td style="padding: 12px; border-bottom: 1px solid #ecf0f1; font-weight: bold; '
    'width: 40%; vertical-align: top;">{label}</td>'
    '<td style="padding: 12px; border-bottom: 1px solid #ecf0f1;">{value}</td></tr>'
)


def booking_email_fields(booking: Booking) -> list:
    return [
        ("Guest Name", booking.name),
        ("Email", booking.email),
        ("Phone", booking.phone or "Not provided"),
        ("Check-in Date", booking.check_in.isoformat()),
        ("Check-out Date", booking.check_out.isoformat()),
        ("Number of Guests", str(booking.guests)),
        ("Room Type", booking.room_type or "Not specified"),
        ("Message", booking.message or "No message"),
    ]


def render_booking_email(booking: Booking) -> str:
    """HTML body of the booking notification"""
    rows = "".join(
        _ROW.format(label=f"{escape(label)}:", value=escape(value))
        for label, value in booking_email_fields(booking)
    )
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">'
        '<h2 style="color: #2c3e50; border-bottom: 2px solid #3498db; padding-bottom: 10px;">'
        'New Booking Request</h2>'
        f'<table style="width: 100%; border-collapse: collapse; margin-top: 20px;">{rows}</table>'
        '<div style="margin-top: 30px; padding: 20px; background-color: #f8f9fa; border-radius: 8px;">'
        '<p style="margin: 0; color: #7f8c8d; font-size: 14px;">'
        'Please respond to this booking request as soon as possible.</p></div>'
        '<div style="margin-top: 30px; text-align: center; color: #95a5a6; font-size: 12px;">'
        f'<p>This email was sent from the {escape(settings.APP_NAME)} booking system.</p></div>'
        '</div>'
    )


def default_channel() -> Optional[EmailChannel]:
    if not settings.GMAIL_EMAIL or not settings.GMAIL_APP_PASSWORD:
        return None
    return EmailChannel(settings.GMAIL_EMAIL, settings.GMAIL_APP_PASSWORD,
                        smtp_host=settings.SMTP_HOST, smtp_port=settings.SMTP_PORT)


def send_booking_notification(booking: Booking, channel: Optional[EmailChannel] = None) -> bool:
    """Mail a booking request to the resort inbox; returns whether it went out"""
    if settings.DEMO_MODE:
        details = dict(booking_email_fields(booking))
        logger.info(f"DEMO_MODE: would send booking email to {settings.GMAIL_EMAIL}")
        logger.info(f"Booking details: {json.dumps(details, indent=2)}")
        return True

    channel = channel or default_channel()
    if channel is None:
        logger.error("GMAIL_EMAIL or GMAIL_APP_PASSWORD not set; booking email not sent")
        return False

    sent = channel.send(
        recipient=settings.GMAIL_EMAIL or channel.account,
        subject=f"New Booking Request from {booking.name}",
        html=render_booking_email(booking),
        reply_to=booking.email,
    )
    if sent:
        logger.info("Booking email sent successfully")
    else:
        logger.warning("Booking email failed (check GMAIL credentials)")
    return sent
