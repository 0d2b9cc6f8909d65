"""
Email Service
=============

Doğrulama, şifre sıfırlama, hoş geldin ve davet e-postalarını MailTrapClient
üzerinden gönderir. Linkler FRONTEND_URL'den üretilir.

Sağlayıcı hataları ExternalService* / MailTrap* exception'ları olarak yukarı
fırlatılır; kayıt ve davet akışları bunları yakalayıp loglar.
"""

from typing import Dict, Any, Optional

from postdeck.core.postdeck_logger import get_logger
from postdeck.infrastructure.clients import MailTrapClient
from postdeck.utils.handlers import EnvironmentHandler


DEFAULT_FRONTEND_URL = "http://localhost:3000"

# logs/services/Email Service/service.log
logger = get_logger("Email Service", parent_folder="services")


_LAYOUT = """<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><meta name="viewport" content="width=device-width, initial-scale=1.0"></head>
  <body style="margin: 0; padding: 20px; font-family: Arial, sans-serif; background-color: #f4f4f4;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; overflow: hidden;">
      <div style="background-color: {color}; padding: 30px; text-align: center;">
        <h1 style="color: #ffffff; margin: 0; font-size: 28px;">{title}</h1>
      </div>
      <div style="padding: 40px 30px; color: #666666; font-size: 16px; line-height: 1.6;">
        {body}
      </div>
      <div style="background-color: #f8f8f8; padding: 20px; text-align: center;">
        <p style="color: #999999; font-size: 12px; margin: 0;">{footer}</p>
      </div>
    </div>
  </body>
</html>"""

_BUTTON = (
    '<p style="text-align: center; margin: 30px 0;">'
    '<a href="{url}" style="display: inline-block; padding: 14px 40px; background-color: {color}; '
    'color: #ffffff; text-decoration: none; border-radius: 5px; font-weight: bold;">{label}</a></p>'
    '<p style="font-size: 14px;">Or copy and paste this link in your browser:</p>'
    '<p style="color: {color}; font-size: 14px; word-break: break-all;">{url}</p>'
)


def _render(title: str, body: str, footer: str, color: str = "#4CAF50") -> str:
    return _LAYOUT.format(title=title, body=body, footer=footer, color=color)


class EmailService:

    @classmethod
    def _frontend_url(cls) -> str:
        url = EnvironmentHandler.get_value_as_str("FRONTEND_URL", default=DEFAULT_FRONTEND_URL)
        return url.rstrip("/")

    @classmethod
    def _send(cls, to_email: str, subject: str, html: str, text: Optional[str], category: str) -> Dict[str, Any]:
        response = MailTrapClient.send_email(
            to_email=to_email,
            subject=subject,
            html_content=html,
            text_content=text,
            category=category,
        )
        logger.info(f"{category} e-postası gönderildi", extra={"to_email": to_email, "category": category})
        return response

    @classmethod
    def send_verification_email(cls, email: str, user_name: str, verification_token: str) -> Dict[str, Any]:
        verification_url = f"{cls._frontend_url()}/verify-email?token={verification_token}"
        body = (
            f'<h2 style="color: #333333; margin-top: 0;">Hi {user_name},</h2>'
            "<p>Thank you for signing up! We're excited to have you on board.</p>"
            "<p>Please verify your email address by clicking the button below:</p>"
            + _BUTTON.format(url=verification_url, label="Verify Email Address", color="#4CAF50")
            + '<p style="color: #999999; font-size: 12px;">This verification link will expire in 24 hours.</p>'
        )
        html = _render(
            title="Welcome to PostDeck!",
            body=body,
            footer="If you didn't create this account, please ignore this email.",
        )
        text = f"Hi {user_name}, verify your email address: {verification_url}"
        return cls._send(email, "Verify Your Email Address", html, text, "Email Verification")

    @classmethod
    def send_password_reset_email(cls, email: str, user_name: str, reset_token: str) -> Dict[str, Any]:
        reset_url = f"{cls._frontend_url()}/reset-password?token={reset_token}"
        body = (
            f'<h2 style="color: #333333; margin-top: 0;">Hi {user_name},</h2>'
            "<p>We received a request to reset your password.</p>"
            "<p>Click the button below to choose a new password:</p>"
            + _BUTTON.format(url=reset_url, label="Reset Password", color="#2196F3")
            + '<p style="color: #999999; font-size: 12px;">This reset link will expire in 1 hour.</p>'
        )
        html = _render(
            title="Password Reset Request",
            body=body,
            footer="If you didn't request a password reset, please ignore this email.",
            color="#2196F3",
        )
        text = f"Hi {user_name}, reset your password: {reset_url}"
        return cls._send(email, "Reset Your Password", html, text, "Password Reset")

    @classmethod
    def send_welcome_email(cls, email: str, user_name: str) -> Dict[str, Any]:
        login_url = f"{cls._frontend_url()}/login"
        body = (
            f'<h2 style="color: #333333; margin-top: 0;">Hi {user_name},</h2>'
            "<p>Your email has been verified and your account is ready to use.</p>"
            + _BUTTON.format(url=login_url, label="Go to Login", color="#4CAF50")
        )
        html = _render(title="Your Account is Verified", body=body, footer="Thanks for joining PostDeck.")
        text = f"Hi {user_name}, your account is verified. Login: {login_url}"
        return cls._send(email, "Welcome! Your Account is Verified", html, text, "Welcome")

    @classmethod
    def send_invitation_email(cls, email: str, inviter_name: str, organization_name: str,
                              invitation_token: str) -> Dict[str, Any]:
        invitation_url = f"{cls._frontend_url()}/accept-invitation?token={invitation_token}"
        body = (
            "<p>Hello,</p>"
            f"<p><strong>{inviter_name}</strong> has invited you to join "
            f"<strong>{organization_name}</strong> on PostDeck.</p>"
            + _BUTTON.format(url=invitation_url, label="Accept Invitation", color="#673AB7")
            + '<p style="color: #999999; font-size: 12px;">This invitation will expire in 7 days.</p>'
        )
        html = _render(
            title="You're Invited!",
            body=body,
            footer="If you weren't expecting this invitation, you can ignore this email.",
            color="#673AB7",
        )
        text = f"{inviter_name} invited you to join {organization_name}: {invitation_url}"
        return cls._send(email, f"You're invited to join {organization_name}", html, text, "Invitation")
