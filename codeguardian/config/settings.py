import os
from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "production").lower()
DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./codeguardian.db")
WEBHOOK_SECRET = os.getenv("WEBHOOK_SECRET")
ENCRYPTION_KEY = os.getenv("ENCRYPTION_KEY")

LLM = os.getenv("LLM", "gemini")
VALID_LLMS = ["gemini", "litellm"]
if LLM not in VALID_LLMS:
    raise ValueError(f"Invalid LLM: {LLM}. Must be one of {VALID_LLMS}")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-pro")
LITELLM_MODEL = os.getenv("LITELLM_MODEL", "gemini/gemini-2.5-pro")

MAX_DIFF_LENGTH = int(os.getenv("MAX_DIFF_LENGTH", 4000))
NOTIFY_ON_OVERSIZED_DIFF = (
    os.getenv("NOTIFY_ON_OVERSIZED_DIFF", "false").lower() == "true"
)
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", 30))
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")

LOG_DRIVER: str = os.getenv("LOG_DRIVER", "console")
LOG_FILE: str = os.getenv("LOG_FILE", "codeguardian.log")


if WEBHOOK_SECRET is None:
    raise ValueError("WEBHOOK_SECRET environment variable is not set.")

if ENCRYPTION_KEY is None:
    raise ValueError("ENCRYPTION_KEY environment variable is not set.")
