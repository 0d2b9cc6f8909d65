from .mailtrap import MailTrapClient

__all__ = ["MailTrapClient"]
