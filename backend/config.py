import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Mock mode (for testing without API key)
MOCK_MODE = os.environ.get("MOCK_MODE", "false").lower() == "true"

# OpenAI
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
CHAT_MODEL = os.environ.get("CHAT_MODEL", "gpt-3.5-turbo")
OPENAI_TIMEOUT_SECONDS = float(os.environ.get("OPENAI_TIMEOUT_SECONDS", "60"))

# Generation settings
REWRITE_TEMPERATURE = float(os.environ.get("REWRITE_TEMPERATURE", "0.2"))
LEGAL_REVIEW_TEMPERATURE = float(os.environ.get("LEGAL_REVIEW_TEMPERATURE", "0.2"))
CHAT_TEMPERATURE = float(os.environ.get("CHAT_TEMPERATURE", "0.2"))
MAX_COMPLETION_TOKENS = int(os.environ.get("MAX_COMPLETION_TOKENS", "4096"))
CHAT_MAX_TOKENS = int(os.environ.get("CHAT_MAX_TOKENS", "500"))

# Pipeline hardening. One attempt means generation failures are not retried.
LLM_MAX_ATTEMPTS = max(1, int(os.environ.get("LLM_MAX_ATTEMPTS", "1")))
LLM_RETRY_BACKOFF_SECONDS = float(os.environ.get("LLM_RETRY_BACKOFF_SECONDS", "0.5"))
STRICT_CLAUSE_PARSING = os.environ.get("STRICT_CLAUSE_PARSING", "false").lower() == "true"

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def get_api_key():
    key = os.environ.get("OPENAI_API_KEY")
    if key:
        return key
    env_path = Path(__file__).parent / ".env"
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                if line.startswith("OPENAI_API_KEY="):
                    key = line.split("=", 1)[1].strip()
                    if key:
                        return key
    home_config = Path.home() / ".openai" / "api_key"
    if home_config.exists():
        return home_config.read_text().strip()
    return None
