import logging

import requests

logger = logging.getLogger(__name__)


def send_slack_notification(message, webhook_url=None):
    """Send a message to Slack via Webhook"""
    if not webhook_url:
        logger.info("Slack notification (dry run): %s", message)
        return

    payload = {"text": message}
    try:
        response = requests.post(webhook_url, json=payload, timeout=10)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Failed to send Slack notification: %s", e)
