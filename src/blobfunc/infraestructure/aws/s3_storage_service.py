import io
import logging
from typing import Optional
import boto3
from botocore.exceptions import ClientError
from blobfunc.core.errors import StorageError
from blobfunc.core.ports.storage_service import (
    StorageService,
    UploadBlobRequest,
    DeleteBlobRequest,
    DownloadBlobRequest,
)

LOGGER = logging.getLogger(__name__)

NOT_FOUND_CODES = ("404", "NoSuchBucket", "NoSuchKey", "NotFound")
GLOBAL_REGIONS = ("us-east-1", "aws-global")


def error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


class S3StorageService(StorageService):
    """StorageService over S3: containers are buckets and snapshots are
    object versions."""

    def __init__(self, endpoint_url: Optional[str] = None):
        self.s3_client = boto3.client("s3", endpoint_url=endpoint_url)

    def ensure_container(self, container_name: str) -> bool:
        if self.__bucket_exists(container_name):
            return False
        create_args = {"Bucket": container_name}
        region = self.s3_client.meta.region_name
        if region and region not in GLOBAL_REGIONS:
            create_args["CreateBucketConfiguration"] = {"LocationConstraint": region}
        try:
            self.s3_client.create_bucket(**create_args)
        except ClientError as e:
            # Otra invocación pudo crearlo al mismo tiempo
            if error_code(e) == "BucketAlreadyOwnedByYou":
                return False
            raise StorageError(
                f"Could not create bucket {container_name}: {e}"
            ) from e
        LOGGER.info("Bucket %s created", container_name)
        return True

    def upload_blob(self, request: UploadBlobRequest) -> None:
        if not request.overwrite and self.__object_exists(
            request.container_name, request.blob_name
        ):
            raise StorageError(f"Blob {request.blob_name} already exists")
        data = request.data
        if isinstance(data, bytes):
            data = io.BytesIO(data)
        try:
            self.s3_client.upload_fileobj(
                data, request.container_name, request.blob_name
            )
        except ClientError as e:
            raise StorageError(f"Could not upload blob {request.blob_name}: {e}") from e

    def delete_blob(self, request: DeleteBlobRequest) -> bool:
        if not self.__bucket_exists(request.container_name):
            return False
        existed = self.__object_exists(request.container_name, request.blob_name)
        try:
            if request.include_snapshots and self.__is_versioned(
                request.container_name
            ):
                self.__delete_versions(request.container_name, request.blob_name)
            else:
                self.s3_client.delete_object(
                    Bucket=request.container_name, Key=request.blob_name
                )
        except ClientError as e:
            raise StorageError(f"Could not delete blob {request.blob_name}: {e}") from e
        return existed

    def download_blob(self, request: DownloadBlobRequest) -> bytes:
        try:
            response = self.s3_client.get_object(
                Bucket=request.container_name, Key=request.blob_name
            )
        except ClientError as e:
            raise StorageError(
                f"Could not download blob {request.blob_name}: {e}"
            ) from e
        return response["Body"].read()

    def __bucket_exists(self, bucket_name: str) -> bool:
        try:
            self.s3_client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as e:
            if error_code(e) in NOT_FOUND_CODES:
                return False
            raise StorageError(f"Could not read bucket {bucket_name}: {e}") from e

    def __object_exists(self, bucket_name: str, key: str) -> bool:
        try:
            self.s3_client.head_object(Bucket=bucket_name, Key=key)
            return True
        except ClientError as e:
            if error_code(e) in NOT_FOUND_CODES:
                return False
            raise StorageError(f"Could not read blob {key}: {e}") from e

    def __is_versioned(self, bucket_name: str) -> bool:
        response = self.s3_client.get_bucket_versioning(Bucket=bucket_name)
        return response.get("Status") in ("Enabled", "Suspended")

    def __delete_versions(self, bucket_name: str, key: str) -> None:
        paginator = self.s3_client.get_paginator("list_object_versions")
        for page in paginator.paginate(Bucket=bucket_name, Prefix=key):
            for version in page.get("Versions", []) + page.get("DeleteMarkers", []):
                # Prefix también devuelve claves como "key.bak"
                if version["Key"] != key:
                    continue
                self.s3_client.delete_object(
                    Bucket=bucket_name, Key=key, VersionId=version["VersionId"]
                )
