"""
Course image lookup

Finds the first image in a course's overview files and turns its storage key
into a URL, either under the bucket's public URL or as a presigned GET URL.
"""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy import select
from sqlalchemy.orm import Session

from models.models import CourseOverviewFile
from .. import config

logger = logging.getLogger(__name__)


def build_storage_client():
    """R2/S3 client from the environment, or None when storage is not configured."""
    if not (config.R2_ENDPOINT and config.R2_ACCESS_KEY and config.R2_SECRET_KEY):
        return None
    session = boto3.session.Session()
    return session.client(
        service_name="s3",
        aws_access_key_id=config.R2_ACCESS_KEY,
        aws_secret_access_key=config.R2_SECRET_KEY,
        endpoint_url=config.R2_ENDPOINT,
    )


class CourseImageLookup:
    """
    Args:
        db: Session on the host database
        client: boto3 S3 client used to presign URLs when there is no public URL
        bucket: Bucket holding the course files
        public_url: Public base URL of the bucket
    """

    def __init__(
        self,
        db: Session,
        client=None,
        bucket: Optional[str] = config.R2_BUCKET,
        public_url: Optional[str] = config.R2_PUBLIC_URL,
        expires_in: int = config.IMAGE_URL_EXPIRY_SECONDS
    ):
        self.db = db
        self.client = client
        self.bucket = bucket
        self.public_url = public_url.rstrip("/") if public_url else None
        self.expires_in = expires_in

    def find_image_key(self, course_id: int) -> Optional[str]:
        """Storage key of the first valid overview image, if any."""
        stmt = (
            select(CourseOverviewFile)
            .where(CourseOverviewFile.courseid == course_id)
            .order_by(CourseOverviewFile.sortorder.asc(), CourseOverviewFile.id.asc())
        )
        for f in self.db.execute(stmt).scalars():
            if _is_valid_image(f):
                return f.storage_key
        return None

    def get_image_url(self, course_id: int) -> Optional[str]:
        key = self.find_image_key(course_id)
        if not key:
            return None
        if self.public_url:
            return f"{self.public_url}/{key.lstrip('/')}"
        if self.client is not None and self.bucket:
            try:
                return self.client.generate_presigned_url(
                    "get_object",
                    Params={"Bucket": self.bucket, "Key": key},
                    ExpiresIn=self.expires_in,
                )
            except (BotoCoreError, ClientError) as e:
                logger.warning(f"Could not presign image for course {course_id}: {e}")
                return None
        return None


def _is_valid_image(f: CourseOverviewFile) -> bool:
    # "." entries are directories
    if not f.filename or f.filename == "." or not f.storage_key:
        return False
    return bool(f.mimetype) and f.mimetype.lower().startswith("image/")
