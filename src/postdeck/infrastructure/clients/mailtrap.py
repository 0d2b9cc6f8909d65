import mailtrap as mt
from typing import Optional, Dict, Any

from postdeck.utils.handlers import EnvironmentHandler, ConfigurationHandler
from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import (
    MailTrapError,
    MailTrapClientError,
    MailTrapSendError,
    ExternalServiceConnectionError,
    ExternalServiceTimeoutError,
    ExternalServiceValidationError,
    ExternalServiceAuthorizationError,
    ExternalServiceRateLimitError,
)


class MailTrapClient:
    """Transactional e-postalar için MailTrap istemcisi."""

    _api_token: Optional[str] = None
    _sender_name: Optional[str] = None
    _sender_email: Optional[str] = None

    _client: Optional[mt.MailtrapClient] = None
    _initialized: bool = False
    # logs/infrastructure/smtp/service.log
    _logger = get_logger("smtp", parent_folder="infrastructure")

    @classmethod
    def _load_configuration(cls):
        cls._api_token = EnvironmentHandler.get_value_as_str("MAILTRAP_API_TOKEN")
        cls._sender_email = ConfigurationHandler.get_value_as_str("Mail", "sender_email", fallback="no-reply@postdeck.app")
        cls._sender_name = ConfigurationHandler.get_value_as_str("Mail", "sender_name", fallback="PostDeck")

        cls._logger.debug(
            "MailTrap configuration yüklendi",
            extra={"api_token_set": bool(cls._api_token), "sender_email": cls._sender_email}
        )

    @classmethod
    def _handle_send_exception(cls, e: Exception, operation: str, to_email: str):
        """Sağlayıcı hatasını uygun ExternalService* hatasına çevirip fırlatır."""
        error_str = str(e).lower()
        status = getattr(e, "status", None)

        cls._logger.error(
            f"MailTrap {operation} hatası: {to_email}",
            extra={"to_email": to_email, "operation": operation, "error": str(e),
                   "error_type": type(e).__name__, "status": status}
        )

        common = {"service_name": "MailTrap", "operation_name": operation, "cause": e}
        if isinstance(e, TimeoutError) or "timed out" in error_str or "timeout" in error_str:
            raise ExternalServiceTimeoutError(**common) from e
        if isinstance(e, ConnectionError) or "connection" in error_str:
            raise ExternalServiceConnectionError(**common) from e
        if status == 401 or status == 403 or "unauthorized" in error_str:
            raise ExternalServiceAuthorizationError(**common) from e
        if status == 429 or "rate limit" in error_str:
            raise ExternalServiceRateLimitError(**common) from e
        if status == 400 or isinstance(e, ValueError):
            raise ExternalServiceValidationError(**common) from e
        raise MailTrapSendError(to_email=to_email, operation=operation, cause=e) from e

    @classmethod
    def load(cls):
        if cls._initialized:
            cls._logger.info("MailTrap client daha önce başlatılmış, tekrar başlatılamaz")
            return

        cls._load_configuration()
        try:
            cls._client = mt.MailtrapClient(token=cls._api_token)
        except (TypeError, ValueError) as e:
            cls._logger.error(f"MailTrap client başlatılırken hata oluştu: {e}", extra={"error": str(e)})
            raise MailTrapClientError(operation="initialization", cause=e) from e

        cls._initialized = True
        cls._logger.debug("MailTrap client başarıyla yüklendi", extra={"sender_email": cls._sender_email})

    @classmethod
    def test(cls) -> tuple[bool, Optional[str]]:
        if not cls._initialized:
            cls.load()

        is_valid = bool(cls._api_token) and bool(cls._sender_email) and cls._client is not None
        return is_valid, cls._sender_email if is_valid else None

    @classmethod
    def init(cls) -> bool:
        if cls._initialized:
            cls._logger.info("MailTrap client daha önce başlatılmış, tekrar başlatılamaz")
            return True

        cls.load()

        success, sender_email = cls.test()
        if not success:
            cls._logger.error(
                "MailTrap client test başarısız, konfigürasyonu kontrol ediniz",
                extra={"api_token_set": bool(cls._api_token), "sender_email": cls._sender_email}
            )
            raise MailTrapClientError(
                operation="test",
                message="MailTrap client test failed. Check MAILTRAP_API_TOKEN and [Mail] sender settings."
            )

        cls._logger.info(f"MailTrap client başarıyla başlatıldı: {sender_email}")
        return cls._initialized

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def _ensure_initialized(cls):
        if not cls._initialized:
            cls._logger.error("MailTrap client başlatılmadan işlem yapılamaz")
            raise MailTrapClientError(operation="send_email", message="MailTrap client is not initialized")

    @classmethod
    def send_email(
        cls,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        category: str = "General",
    ) -> Dict[str, Any]:
        cls._ensure_initialized()

        mail = mt.Mail(
            sender=mt.Address(email=cls._sender_email, name=cls._sender_name),
            to=[mt.Address(email=to_email)],
            subject=subject,
            text=text_content or "",
            html=html_content,
            category=category,
        )

        try:
            response = cls._client.send(mail)
        except MailTrapError:
            raise
        except Exception as e:
            cls._handle_send_exception(e, "send_email", to_email)

        cls._logger.debug(
            f"E-posta gönderildi: {to_email}",
            extra={"to_email": to_email, "subject": subject, "category": category}
        )
        return response

    @classmethod
    def reset(cls):
        cls._initialized = False
        cls._client = None
        cls._api_token = None
        cls._sender_email = None
        cls._sender_name = None
