"""Avatar storage in MinIO."""

import io
import time

from fastapi import Depends
from loguru import logger
from minio import Minio
from minio.error import S3Error

from ..schemas.profile import ALLOWED_AVATAR_EXTENSIONS
from .config import get_server_settings
from .dependencies import get_minio_client
from .services.errors import StorageError, ValidationError

# Variants removed when an avatar is deleted
REMOVABLE_AVATAR_EXTENSIONS = ("png", "jpg", "jpeg", "webp")


def avatar_extension(filename: str | None) -> str:
    """Lower-cased extension of an uploaded file, validated."""
    name = filename or ""
    ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
    if ext not in ALLOWED_AVATAR_EXTENSIONS:
        raise ValidationError(
            f"Unsupported avatar type '{ext}', "
            f"expected one of: {', '.join(ALLOWED_AVATAR_EXTENSIONS)}"
        )
    return ext


class AvatarStorage:
    """Stores one avatar per user at `<user_id>/avatar.<ext>`."""

    def __init__(self, client: Minio, bucket_name: str, public_url: str):
        self.client = client
        self.bucket_name = bucket_name
        self.public_url = public_url.rstrip("/")

    def ensure_bucket_exists(self) -> None:
        if not self.client.bucket_exists(self.bucket_name):
            self.client.make_bucket(self.bucket_name)
            logger.info(f"Created MinIO bucket: {self.bucket_name}")
        else:
            logger.debug(f"MinIO bucket already exists: {self.bucket_name}")

    def upload(
        self,
        user_id: int,
        filename: str | None,
        data: bytes,
        content_type: str | None = None,
    ) -> str:
        """Upload (overwrite) the avatar of a user.

        Returns:
            Public URL with a cache-busting `t` parameter
        """
        ext = avatar_extension(filename)
        object_name = f"{user_id}/avatar.{ext}"
        try:
            self.client.put_object(
                self.bucket_name,
                object_name,
                io.BytesIO(data),
                len(data),
                content_type=content_type or f"image/{ext}",
            )
        except S3Error as e:
            logger.error(f"Failed to upload avatar for user {user_id}: {e}")
            raise StorageError("Failed to upload avatar")

        logger.info(f"Uploaded avatar: {object_name}")
        timestamp = int(time.time() * 1000)
        return f"{self.public_url}/{self.bucket_name}/{object_name}?t={timestamp}"

    def remove(self, user_id: int) -> None:
        for ext in REMOVABLE_AVATAR_EXTENSIONS:
            object_name = f"{user_id}/avatar.{ext}"
            try:
                self.client.remove_object(self.bucket_name, object_name)
            except S3Error as e:
                if e.code != "NoSuchKey":
                    logger.error(f"Failed to delete {object_name}: {e}")
                    raise StorageError("Failed to remove avatar")
        logger.info(f"Removed avatar of user {user_id}")


def get_avatar_storage(client: Minio = Depends(get_minio_client)) -> AvatarStorage:
    settings = get_server_settings()
    return AvatarStorage(client, settings.minio_bucket_name, settings.minio_public_url)
