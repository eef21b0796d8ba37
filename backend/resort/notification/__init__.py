from resort.notification.email_channel import EmailChannel
from resort.notification.booking_email import send_booking_notification

__all__ = ["EmailChannel", "send_booking_notification"]
