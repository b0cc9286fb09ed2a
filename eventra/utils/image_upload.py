# eventra/utils/image_upload.py
import hashlib
import time
from typing import Optional

import httpx
from fastapi import Request
from loguru import logger

from eventra.config import Settings
from eventra.exceptions import ImageUploadError


def sign_upload(params: dict, api_secret: str) -> str:
    """Cloudinary signature: sorted ``key=value`` pairs joined by ``&``, secret appended, SHA-1 hex."""
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode()).hexdigest()


class CloudinaryUploader:
    """Pushes event images to Cloudinary and hands back the hosted URL."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.client = client or httpx.AsyncClient(timeout=30.0)

    @property
    def endpoint(self) -> str:
        return f"{self.settings.cloudinary_upload_url}/{self.settings.cloudinary_cloud_name}/image/upload"

    async def upload(self, data: bytes, filename: str = "image") -> str:
        if not self.settings.cloudinary_configured:
            raise ImageUploadError("Image host credentials are not configured")

        params = {"timestamp": int(time.time())}
        form = {
            **{key: str(value) for key, value in params.items()},
            "api_key": self.settings.cloudinary_api_key,
            "signature": sign_upload(params, self.settings.cloudinary_api_secret),
        }

        try:
            response = await self.client.post(self.endpoint, data=form, files={"file": (filename, data)})
        except httpx.HTTPError as exc:
            raise ImageUploadError(f"Could not reach image host: {exc}") from exc

        if response.is_error:
            raise ImageUploadError(f"Image host answered {response.status_code}: {response.text}")

        secure_url = response.json().get("secure_url")
        if not secure_url:
            raise ImageUploadError("Image host response carried no secure_url")

        logger.info(f"Uploaded {filename} ({len(data)} bytes) to {secure_url}")
        return secure_url

    async def aclose(self) -> None:
        await self.client.aclose()


def get_image_uploader(request: Request) -> CloudinaryUploader:
    return request.app.state.image_uploader
