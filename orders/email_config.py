"""
orders.email_config

Env-driven email configuration for order notifications (transactional email).

LOCKED INTENT
- Django sends the order emails (admin notification + customer confirmation).
- Provider choice is infra-only (env vars), not business logic.

SUPPORTED PROVIDERS (set BAKERY_EMAIL_PROVIDER)
- resend     (default)
- mailgun
- postmark
- sendgrid
- smtp       (fallback / basic)
- console    (local development; prints mail to stdout)

ENV VARS (common)
- BAKERY_EMAIL_PROVIDER         (default: "resend")
- DEFAULT_FROM_EMAIL            (recommended)

Provider-specific ENV
RESEND    - RESEND_API_KEY
MAILGUN   - MAILGUN_API_KEY, MAILGUN_SENDER_DOMAIN
POSTMARK  - POSTMARK_SERVER_TOKEN
SENDGRID  - SENDGRID_API_KEY
SMTP      - EMAIL_HOST, EMAIL_PORT, EMAIL_HOST_USER, EMAIL_HOST_PASSWORD, EMAIL_USE_TLS/SSL

Imported by bakery.settings, so nothing here may touch Django models or settings.
"""

from __future__ import annotations

import os
from typing import Dict


def _env(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _bool_env(name: str, default: str = "0") -> bool:
    v = _env(name, default).lower()
    return v in ("1", "true", "yes", "on")


_ANYMAIL_PROVIDERS = {
    "resend": ("anymail.backends.resend.EmailBackend", {"RESEND_API_KEY": "RESEND_API_KEY"}),
    "mailgun": (
        "anymail.backends.mailgun.EmailBackend",
        {"MAILGUN_API_KEY": "MAILGUN_API_KEY", "MAILGUN_SENDER_DOMAIN": "MAILGUN_SENDER_DOMAIN"},
    ),
    "postmark": ("anymail.backends.postmark.EmailBackend", {"POSTMARK_SERVER_TOKEN": "POSTMARK_SERVER_TOKEN"}),
    "sendgrid": ("anymail.backends.sendgrid.EmailBackend", {"SENDGRID_API_KEY": "SENDGRID_API_KEY"}),
}


def get_email_settings() -> Dict[str, object]:
    """
    Returns a dict of Django settings to merge into the settings module.

    Usage:
        from orders.email_config import get_email_settings
        globals().update(get_email_settings())
    """
    provider = _env("BAKERY_EMAIL_PROVIDER", "resend").lower()

    base: Dict[str, object] = {
        "DEFAULT_FROM_EMAIL": _env("DEFAULT_FROM_EMAIL", "Pandí Dorty <objednavky@pandidorty.cz>"),
        "EMAIL_TIMEOUT": int(_env("EMAIL_TIMEOUT", "10") or "10"),
    }

    if provider in _ANYMAIL_PROVIDERS:
        backend, keys = _ANYMAIL_PROVIDERS[provider]
        base.update(
            {
                "EMAIL_BACKEND": backend,
                "ANYMAIL": {setting: _env(env_name) for setting, env_name in keys.items()},
            }
        )
        return base

    if provider == "console":
        base["EMAIL_BACKEND"] = "django.core.mail.backends.console.EmailBackend"
        return base

    # --- SMTP fallback ---
    base.update(
        {
            "EMAIL_BACKEND": "django.core.mail.backends.smtp.EmailBackend",
            "EMAIL_HOST": _env("EMAIL_HOST", "localhost"),
            "EMAIL_PORT": int(_env("EMAIL_PORT", "25") or "25"),
            "EMAIL_HOST_USER": _env("EMAIL_HOST_USER", ""),
            "EMAIL_HOST_PASSWORD": _env("EMAIL_HOST_PASSWORD", ""),
            "EMAIL_USE_TLS": _bool_env("EMAIL_USE_TLS", "0"),
            "EMAIL_USE_SSL": _bool_env("EMAIL_USE_SSL", "0"),
        }
    )
    return base
