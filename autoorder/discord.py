import logging
import os
from typing import Optional

import requests

logger = logging.getLogger(__name__)


def _get_webhook_url() -> Optional[str]:
    """
    Prefer a dedicated alerts URL, else fall back to the health webhook.
    """
    return os.getenv("DISCORD_ALERTS_URL") or os.getenv("DISCORD_HEALTH_WEBHOOK_URL")


def send_discord_message(content: str, username: Optional[str] = "GMaps AutoOrder") -> bool:
    """
    Best-effort alert. Never raises; returns True when Discord accepted the message.

    Missing webhook config is logged and ignored so alerting can never fail a run.
    """
    webhook_url = _get_webhook_url()

    if not webhook_url:
        logger.warning("[discord] No webhook configured. Content:\n%s", content)
        return False

    payload = {"content": content[:1900]}
    if username:
        payload["username"] = username

    try:
        resp = requests.post(webhook_url, json=payload, timeout=10)
    except requests.exceptions.RequestException:
        logger.exception("[discord] Exception while sending Discord message")
        return False

    if resp.status_code >= 400:
        logger.error("[discord] Failed to send message: %s %s", resp.status_code, resp.text[:200])
        return False

    logger.info("[discord] Sent message")
    return True


__all__ = ["send_discord_message"]
