# prompthub/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Optional

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra="allow")

    # Database (full URL wins over the MySQL parts)
    database_url: Optional[str] = None
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "prompthub"
    mysql_password: str = ""
    mysql_database: str = "prompthub"
    db_echo: bool = False

    # GitHub repository metrics
    github_repo: Optional[str] = None  # "{owner}/{repo}", unset = not configured
    github_token: Optional[str] = None
    github_api_url: str = "https://api.github.com"
    github_timeout_seconds: float = 10.0
    github_cache_seconds: int = 3600

    # Cache directives for aggregate statistics
    stats_cache_max_age: int = 300
    stats_stale_while_revalidate: int = 600

    # Sessions issued by the OAuth integration
    session_cookie_name: str = "next-auth.session-token"

    # Maintenance scheduler
    scheduler_enabled: bool = True

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"mysql+aiomysql://{self.mysql_user}:{self.mysql_password}@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"

    @property
    def stats_cache_control(self) -> str:
        return f"public, s-maxage={self.stats_cache_max_age}, stale-while-revalidate={self.stats_stale_while_revalidate}"

    @property
    def github_cache_control(self) -> str:
        return f"public, s-maxage={self.github_cache_seconds}"

settings = Settings()
