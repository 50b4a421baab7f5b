from __future__ import annotations

import logging
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from fastapi import Request

from techhub.application.ports.booking_store import BookingStorePort
from techhub.application.ports.email_provider import EmailProviderPort
from techhub.application.use_cases.admin_login import AdminAccount, AdminLoginUseCase
from techhub.application.use_cases.booking import BookingUseCase
from techhub.application.use_cases.notify_booking import NotifyBookingUseCase
from techhub.application.use_cases.send_email import SendEmailUseCase
from techhub.application.use_cases.submit_contact import SubmitContactUseCase
from techhub.application.utils.rate_limiter import RateLimiter
from techhub.core.config import Settings, settings as default_settings
from techhub.domain.entities.admin_user import AdminUser
from techhub.infrastructure.auth.jwt_tokens import JwtTokenService
from techhub.infrastructure.email.formspree_client import FormspreeEmailProvider
from techhub.infrastructure.email.mock_email import MockEmailProvider
from techhub.infrastructure.email.resend_client import ResendEmailProvider
from techhub.infrastructure.store.json_store import JsonBookingStore
from techhub.infrastructure.store.memory_store import MemoryBookingStore

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings: Settings
    store: BookingStorePort
    contact_rate_limiter: RateLimiter
    booking: BookingUseCase
    notify_booking: NotifyBookingUseCase
    submit_contact: SubmitContactUseCase
    admin_login: AdminLoginUseCase


def _is_dev(cfg: Settings) -> bool:
    return cfg.ENV.lower() in {"dev", "local", "test"}


def _safe_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except Exception:
        logger.warning("Unknown BUSINESS_TIMEZONE, using UTC", extra={"error": name})
        return ZoneInfo("UTC")


def get_booking_store(cfg: Settings) -> BookingStorePort:
    if cfg.STORE_PROVIDER.lower() == "json":
        logger.info("Using JsonBookingStore", extra={"path": cfg.BOOKINGS_FILE})
        return JsonBookingStore(path=cfg.BOOKINGS_FILE)
    return MemoryBookingStore()


def get_email_providers(cfg: Settings) -> tuple[EmailProviderPort, EmailProviderPort | None]:
    if not cfg.RESEND_API_KEY and _is_dev(cfg):
        logger.info("Using MockEmailProvider (RESEND_API_KEY missing, ENV=%s)", cfg.ENV)
        return MockEmailProvider(), None

    primary = ResendEmailProvider(
        api_key=cfg.RESEND_API_KEY,
        api_url=cfg.RESEND_API_URL,
        from_email=cfg.EMAIL_FROM,
        timeout=cfg.EMAIL_TIMEOUT_SECONDS,
    )
    fallback = FormspreeEmailProvider(
        endpoint=cfg.FORMSPREE_ENDPOINT,
        timeout=cfg.EMAIL_TIMEOUT_SECONDS,
    )
    return primary, fallback


def get_admin_login_use_case(cfg: Settings) -> AdminLoginUseCase:
    default_secret = Settings.model_fields["JWT_SECRET"].default
    if not _is_dev(cfg) and cfg.JWT_SECRET in ("", default_secret):
        raise RuntimeError(f"JWT_SECRET must be set to a private value when ENV={cfg.ENV}")
    accounts = [
        AdminAccount(
            user=AdminUser(id="admin-1", username=cfg.ADMIN_USERNAME, role="admin"),
            password=cfg.ADMIN_PASSWORD or "",
        ),
        AdminAccount(
            user=AdminUser(id="staff-1", username=cfg.STAFF_USERNAME, role="staff"),
            password=cfg.STAFF_PASSWORD or "",
        ),
    ]
    tokens = JwtTokenService(
        secret=cfg.JWT_SECRET,
        algorithm=cfg.JWT_ALGORITHM,
        ttl_minutes=cfg.ADMIN_TOKEN_TTL_MINUTES,
    )
    return AdminLoginUseCase(accounts=accounts, tokens=tokens)


def build_container(
    cfg: Settings | None = None,
    store: BookingStorePort | None = None,
    email_providers: tuple[EmailProviderPort, EmailProviderPort | None] | None = None,
) -> Container:
    cfg = cfg or default_settings
    store = store or get_booking_store(cfg)
    primary, fallback = email_providers or get_email_providers(cfg)
    send_email = SendEmailUseCase(primary=primary, fallback=fallback)

    return Container(
        settings=cfg,
        store=store,
        contact_rate_limiter=RateLimiter(
            max_attempts=cfg.CONTACT_RATE_LIMIT_ATTEMPTS,
            window_ms=cfg.CONTACT_RATE_LIMIT_WINDOW_MS,
            max_keys=cfg.RATE_LIMIT_MAX_KEYS,
        ),
        booking=BookingUseCase(store=store, timezone=_safe_timezone(cfg.BUSINESS_TIMEZONE)),
        notify_booking=NotifyBookingUseCase(
            send_email=send_email,
            recipients=cfg.STAFF_NOTIFICATION_EMAILS,
            business_name=cfg.BUSINESS_NAME,
        ),
        submit_contact=SubmitContactUseCase(
            send_email=send_email,
            inbox=cfg.CONTACT_INBOX,
            business_name=cfg.BUSINESS_NAME,
        ),
        admin_login=get_admin_login_use_case(cfg),
    )


def get_container(request: Request) -> Container:
    return request.app.state.container
