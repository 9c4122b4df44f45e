import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value, default):
    if value is None:
        return default
    return value.strip().lower() == "true"


class Config:
    def __init__(self, env=None):
        env = os.environ if env is None else env

        # Webflow Settings
        self.WEBFLOW_TOKEN = env.get("WEBFLOW_TOKEN")
        self.WEBFLOW_COLLECTION_ID = env.get("WEBFLOW_COLLECTION_ID")
        self.WEBFLOW_BASE_URL = env.get("WEBFLOW_BASE_URL", "https://api.webflow.com")
        self.WEBFLOW_CODE_FIELD = env.get("WEBFLOW_CODE_FIELD", "code")
        self.WEBFLOW_INVENTORY_FIELD = env.get("WEBFLOW_INVENTORY_FIELD", "size-quantity")
        self.WEBFLOW_PAGE_SIZE = int(env.get("WEBFLOW_PAGE_SIZE", 100))
        self.WEBFLOW_MAX_OFFSET = int(env.get("WEBFLOW_MAX_OFFSET", 500))
        self.WEBFLOW_LIVE = _as_bool(env.get("WEBFLOW_LIVE"), True)
        self.WEBFLOW_TIMEOUT = float(env.get("WEBFLOW_TIMEOUT", 30))

        # FoxyCart Settings
        self.FOXY_WEBHOOK_ENCRYPTION_KEY = env.get("FOXY_WEBHOOK_ENCRYPTION_KEY")
        self.FOXY_SIZE_OPTION = env.get("FOXY_SIZE_OPTION", "size")

        # Slack Settings
        self.SLACK_WEBHOOK_URL = env.get("SLACK_WEBHOOK_URL")

        # App Settings
        self.PORT = int(env.get("PORT", 5000))
        self.DEBUG = _as_bool(env.get("DEBUG"), False)
        self.LOG_LEVEL = env.get("LOG_LEVEL", "INFO").upper()
        self.MAX_WORKERS = int(env.get("MAX_WORKERS", 8))
