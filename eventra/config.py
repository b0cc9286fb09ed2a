# eventra/config.py
from dataclasses import dataclass, field
from typing import List

from decouple import Csv, config
from fastapi import Request


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup."""

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "eventra"
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 1440  # 0 disables expiry
    cookie_secure: bool = False
    cookie_samesite: str = "lax"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:5173"])
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_upload_url: str = "https://api.cloudinary.com/v1_1"
    port: int = 4000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            mongo_uri=config("MONGO_URI", default=cls.mongo_uri),
            mongo_db=config("MONGO_DB", default=cls.mongo_db),
            jwt_secret=config("JWT_SECRET", default=cls.jwt_secret),
            jwt_algorithm=config("JWT_ALGORITHM", default=cls.jwt_algorithm),
            access_token_expire_minutes=config(
                "ACCESS_TOKEN_EXPIRE_MINUTES", default=cls.access_token_expire_minutes, cast=int
            ),
            cookie_secure=config("COOKIE_SECURE", default=False, cast=bool),
            cookie_samesite=config("COOKIE_SAMESITE", default=cls.cookie_samesite),
            cors_origins=config("CORS_ORIGINS", default="http://localhost:5173", cast=Csv()),
            cloudinary_cloud_name=config("CLOUDINARY_CLOUD_NAME", default=""),
            cloudinary_api_key=config("CLOUDINARY_API_KEY", default=""),
            cloudinary_api_secret=config("CLOUDINARY_API_SECRET", default=""),
            cloudinary_upload_url=config("CLOUDINARY_UPLOAD_URL", default=cls.cloudinary_upload_url),
            port=config("PORT", default=cls.port, cast=int),
            log_level=config("LOG_LEVEL", default=cls.log_level).upper(),
        )

    @property
    def cloudinary_configured(self) -> bool:
        return all((self.cloudinary_cloud_name, self.cloudinary_api_key, self.cloudinary_api_secret))


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
