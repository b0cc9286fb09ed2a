# eventra/exceptions.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger
from pymongo.errors import PyMongoError


class ImageUploadError(Exception):
    """Raised when the image host rejects or cannot receive an upload."""


async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database operation failed"},
    )


async def image_upload_error_handler(request: Request, exc: ImageUploadError) -> JSONResponse:
    logger.exception(f"Image upload failed on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Failed to upload event image"},
    )


EXCEPTION_HANDLERS = {
    PyMongoError: database_error_handler,
    ImageUploadError: image_upload_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
