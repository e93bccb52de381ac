"""
Manual store backed by an S3 bucket.

Objects are read from directly under a key prefix; nested "folders" below
the prefix are ignored.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from backoffice.dal import BaseManualStore, ManualStoreError
from backoffice.handlers.utils.observability import logger, tracer


class S3ManualStore(BaseManualStore):
    """Reads training documents from S3 objects."""

    source = 's3'

    def __init__(
        self,
        bucket_name: str,
        key_prefix: str = '',
        s3_client: Optional[Any] = None,
    ) -> None:
        """
        Initialize the S3 store.

        Args:
            bucket_name: Bucket holding the module documents
            key_prefix: Key prefix the documents live under
            s3_client: Injected boto3 S3 client, created on demand otherwise
        """
        self.bucket_name = bucket_name
        self.key_prefix = key_prefix
        self.s3_client = s3_client or boto3.client('s3')

    @tracer.capture_method
    def list_files(self) -> List[str]:
        names = []
        try:
            paginator = self.s3_client.get_paginator('list_objects_v2')
            for page in paginator.paginate(Bucket=self.bucket_name, Prefix=self.key_prefix):
                for item in page.get('Contents', []):
                    name = item['Key'][len(self.key_prefix):]
                    if name and '/' not in name:
                        names.append(name)
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to list training documents", extra={
                "bucket": self.bucket_name,
                "prefix": self.key_prefix,
                "error": str(e),
            })
            raise ManualStoreError(
                message=f"Unable to list s3://{self.bucket_name}/{self.key_prefix}",
                source=self.source,
            ) from e
        return sorted(names)

    @tracer.capture_method
    def read_file(self, filename: str) -> str:
        key = f'{self.key_prefix}{filename}'
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=key)
            return response['Body'].read().decode('utf-8')
        except (ClientError, BotoCoreError, UnicodeDecodeError) as e:
            logger.error("Failed to read training document", extra={
                "bucket": self.bucket_name,
                "key": key,
                "error": str(e),
            })
            raise ManualStoreError(message=f"Unable to read s3://{self.bucket_name}/{key}", source=self.source) from e

    def health_check(self) -> dict:
        result = {
            "source": self.source,
            "bucket": self.bucket_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        try:
            self.s3_client.head_bucket(Bucket=self.bucket_name)
            result["status"] = "healthy"
        except (ClientError, BotoCoreError) as e:
            logger.warning("S3 manual store health check failed", extra={"error": str(e)})
            result.update({"status": "unhealthy", "error": str(e)})
        return result
