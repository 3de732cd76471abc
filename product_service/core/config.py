from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./products.db"

    app_port: int = 5007

    # API
    api_prefix: str = "/api"
    project_name: str = "Product Service"

    # CORS: frontend y transaction service
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5008",
    ]

    # Archivos públicos (imágenes de productos)
    static_dir: str = "wwwroot"

    log_level: str = "INFO"
    debug: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
