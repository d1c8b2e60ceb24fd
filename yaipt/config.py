import logging
import os
from dataclasses import dataclass

APP_VERSION = "0.3.0"


@dataclass(frozen=True)
class EngineSettings:
    source_url: str
    port: int
    timeout: float
    retries: int
    blur_size: int
    gaussian_sigma: float
    log_level: str

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            source_url=os.getenv("SOURCE_URL", "http://127.0.0.1:9000/sample.png"),
            port=int(os.getenv("PORT", "5600")),
            timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            retries=int(os.getenv("SOURCE_RETRIES", "2")),
            blur_size=int(os.getenv("BLUR_SIZE", "3")),
            gaussian_sigma=float(os.getenv("GAUSSIAN_SIGMA", "1.0")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


SETTINGS = EngineSettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("yaipt")
