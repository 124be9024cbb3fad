import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


class ServerConfig(BaseModel):
    openai_api_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3002
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)


def load_config() -> ServerConfig:
    # Read on every call so a key added to the environment is picked up per request.
    load_dotenv()
    return ServerConfig(
        openai_api_key=(os.getenv("OPENAI_API_KEY") or "").strip() or None,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3002")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
