from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./transactions.db"

    app_port: int = 5008

    # Product service (URL fija, sin service discovery)
    product_service_base_url: str = "http://localhost:5007"
    product_service_timeout: float = 5.0

    # API
    api_prefix: str = "/api"
    project_name: str = "Transaction Service"

    # CORS: frontend y product service
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5007",
    ]

    log_level: str = "INFO"
    debug: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
