import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = ""  # empty = SQLite file under data_dir
    database_name: str = "exercise_tracker"
    data_dir: str = "./data"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    default_log_limit: int = 100
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite+aiosqlite:///{os.path.join(self.data_dir, self.database_name)}.sqlite3"


settings = Settings()
