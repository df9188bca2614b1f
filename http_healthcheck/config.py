import os
from dotenv import load_dotenv

load_dotenv()

VERSION = "1.0.0"


class Settings:
    # requests has no default timeout; this bounds both connect and read.
    HEALTHCHECK_TIMEOUT_SECONDS: float = float(
        os.getenv("HEALTHCHECK_TIMEOUT_SECONDS", "10")
    )
    HEALTHCHECK_LOG_LEVEL: str = os.getenv("HEALTHCHECK_LOG_LEVEL", "WARNING").upper()


settings = Settings()
