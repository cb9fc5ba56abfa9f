import os
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE_URL = "https://api.hellosign.com/v3"


def get_hellosign_config() -> Dict[str, Any]:
    """Get HelloSign configuration from environment variables."""
    return {
        "api_key": os.getenv("HELLOSIGN_API_KEY"),
        "api_base_url": os.getenv("HELLOSIGN_API_BASE_URL", DEFAULT_API_BASE_URL),
        "timeout": float(os.getenv("HELLOSIGN_TIMEOUT", "30")),
        "log_level": os.getenv("HELLOSIGN_LOG_LEVEL", "INFO").upper(),
        "callback_verify": os.getenv("HELLOSIGN_CALLBACK_VERIFY", "true").lower() == "true",
    }
