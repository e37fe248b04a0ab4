from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    MOCK_DOWNLOAD_URL: str = "https://example.com/mock-split-parts.zip"
    MOCK_MESSAGE: str = "Mock job started successfully"
    ALLOWED_EXT: tuple = ("stl", "obj", "glb", "gltf")
    # Extension filtering is client-side only unless this is switched on
    ENFORCE_EXTENSIONS: bool = False
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_prefix="AUTOSPLIT_")


settings = Settings()
