import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    WORKERS: int = int(os.getenv("STATUS_CHECKER_WORKERS") or os.cpu_count() or 1)
    TIMEOUT_SECONDS: float = float(os.getenv("STATUS_CHECKER_TIMEOUT", "5"))
    RETRIES: int = int(os.getenv("STATUS_CHECKER_RETRIES", 0))
    RETRY_DELAY_MS: int = int(os.getenv("STATUS_CHECKER_RETRY_DELAY_MS", 100))
    OUTPUT_PATH: str = os.getenv("STATUS_CHECKER_OUTPUT_PATH", "status.json")
    # Upper bounds for runs requested over the HTTP API.
    MAX_WORKERS: int = int(os.getenv("STATUS_CHECKER_MAX_WORKERS", 64))
    MAX_URLS: int = int(os.getenv("STATUS_CHECKER_MAX_URLS", 1000))
    LOG_LEVEL: str = os.getenv("STATUS_CHECKER_LOG_LEVEL", "WARNING")


settings = Settings()
