from pydantic import BaseModel
import yaml

DEFAULT_BACKEND_URL = "http://localhost:3002"


class ExtensionConfig(BaseModel):
    backend_url: str = DEFAULT_BACKEND_URL
    keepalive_seconds: float = 30.0
    settings_path: str = "findn_settings.json"


def load_config(path: str = "") -> ExtensionConfig:
    if not path:
        return ExtensionConfig()
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return ExtensionConfig(**data)
