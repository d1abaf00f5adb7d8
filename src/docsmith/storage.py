import logging
import time

import boto3

from docsmith import config

logger = logging.getLogger(__name__)


def new_upload_key(file_name: str) -> str:
    """`uploads/<epoch-millis>-<file_name>`"""
    return f"{config.UPLOAD_PREFIX}{int(time.time() * 1000)}-{file_name}"


class S3Storage:
    """
    Thin wrapper around a boto3 S3 client bound to a single bucket.
    All object-storage traffic of the service (presigning, listing, reading,
    writing and deleting objects) goes through this class.
    """

    def __init__(self, client, bucket: str):
        self.client = client
        self.bucket = bucket

    @classmethod
    def from_config(cls) -> "S3Storage":
        if not config.UPLOAD_BUCKET:
            raise RuntimeError("UPLOAD_BUCKET is not configured")
        client = boto3.client("s3", region_name=config.AWS_REGION)
        return cls(client, config.UPLOAD_BUCKET)

    # ------------------------------------------------------------------
    # Presigned URLs
    # ------------------------------------------------------------------

    def presign_upload(self, key: str, content_type: str | None, expires_in: int = config.UPLOAD_URL_TTL) -> str:
        params = {"Bucket": self.bucket, "Key": key}
        if content_type:
            params["ContentType"] = content_type
        return self.client.generate_presigned_url("put_object", Params=params, ExpiresIn=expires_in)

    def presign_download(self, key: str, expires_in: int = config.DOWNLOAD_URL_TTL) -> str:
        return self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=expires_in,
        )

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def list_keys(self, prefix: str) -> list[str]:
        keys = []
        paginator = self.client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
            keys.extend(obj["Key"] for obj in page.get("Contents", []))
        return keys

    def get_bytes(self, key: str) -> bytes:
        response = self.client.get_object(Bucket=self.bucket, Key=key)
        return response["Body"].read()

    def put_bytes(self, key: str, body: bytes, content_type: str) -> None:
        self.client.put_object(Bucket=self.bucket, Key=key, Body=body, ContentType=content_type)
        logger.info("Stored s3://%s/%s (%d bytes)", self.bucket, key, len(body))

    def delete(self, key: str) -> None:
        self.client.delete_object(Bucket=self.bucket, Key=key)
