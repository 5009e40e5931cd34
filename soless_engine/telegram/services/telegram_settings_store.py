"""
Service: TelegramSettingsStore

Feature flag and credential record for the Telegram bridge, persisted as
the "telegram" JSON record:

    {"enabled": false, "bot_token": ""}

TELEGRAM_BOT_TOKEN from the environment wins over the stored token.
The record is read once when the bridge starts; edits apply on restart.
"""

# Python Packages
import logging
import re
import threading

# Validations
from ..validations.telegram_validation import TelegramValidation

# Constants
from ...base import constants


logger = logging.getLogger(__name__)

TELEGRAM_RECORD = "telegram"

TELEGRAM_DEFAULTS = {
    "enabled":   False,
    "bot_token": "",
}

# <bot id>:<secret>, as issued by BotFather
TELEGRAM_TOKEN_RE = re.compile(r"^\d+:[A-Za-z0-9_-]{30,}$")


def is_valid_bot_token(token) -> bool:
    return isinstance(token, str) and bool(TELEGRAM_TOKEN_RE.match(token.strip()))


def mask_token(token: str) -> str:
    if not token:
        return ""
    return f"{token[:4]}…{token[-4:]}" if len(token) > 8 else "…"


class TelegramSettingsStore:
    """
    Read-modify-write access to the Telegram record.
    record_store may be None for an in-memory record.
    """

    def __init__(self, record_store = None, env_token: str = None):
        self.record_store = record_store
        self.env_token    = constants.TELEGRAM_BOT_TOKEN if env_token is None else env_token
        self._lock        = threading.Lock()
        self._record      = self._load()


    def get(self) -> dict:
        with self._lock:
            return dict(self._record)


    def update(self, data: dict) -> dict:
        """
        Merge validated fields into the record and persist it.

        Raises:
            ValidationException: wrong field types.
        """

        changes = TelegramValidation.validate_settings(data)

        with self._lock:
            record = dict(self._record)
            record.update(changes)

            if self.record_store is not None:
                self.record_store.save(TELEGRAM_RECORD, record)
            self._record = record

        logger.info(f"📨 Telegram settings updated (enabled={record['enabled']})")
        return dict(record)


    def resolve_token(self) -> str:
        """Environment token first, then the stored one."""
        return (self.env_token or self.get().get("bot_token") or "").strip()


    def public_view(self) -> dict:
        """Settings safe to return over HTTP."""
        record = self.get()
        token  = self.resolve_token()
        return {
            "enabled":          bool(record.get("enabled")),
            "bot_token":        mask_token(record.get("bot_token", "")),
            "token_source":     "environment" if self.env_token else ("record" if record.get("bot_token") else None),
            "token_configured": is_valid_bot_token(token),
        }


    def should_start(self) -> bool:
        """True when the bridge is enabled and a well-formed token exists."""
        if not self.get().get("enabled"):
            return False

        if not is_valid_bot_token(self.resolve_token()):
            logger.warning("⚠️ Telegram bridge enabled but the bot token is missing or malformed")
            return False

        return True



    # ── Private ────────────────────────────────────────────────────────────────
    def _load(self) -> dict:
        if self.record_store is None:
            return dict(TELEGRAM_DEFAULTS)
        return self.record_store.load(TELEGRAM_RECORD, TELEGRAM_DEFAULTS)
