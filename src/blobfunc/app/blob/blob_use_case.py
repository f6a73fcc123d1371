import logging
from typing import Optional
from urllib.parse import urlparse
from blobfunc.app.blob.blob_entities import (
    PRODUCTS_CONTAINER,
    DeleteRequest,
    OperationResult,
    OperationStatus,
    UploadRequest,
)
from blobfunc.core.errors import (
    BlobOperationError,
    ParseError,
    StorageError,
    ValidationError,
)
from blobfunc.core.ports.storage_service import (
    DeleteBlobRequest,
    StorageService,
    UploadBlobRequest,
)

LOGGER = logging.getLogger(__name__)

UPLOAD_FAILED_MESSAGE = "Failed to upload blob."
DELETE_FAILED_MESSAGE = "Failed to delete blob."


def blob_name_from_uri(blob_uri: Optional[str]) -> str:
    """Returns the last path segment of ``blob_uri``.

    The segment is returned as it appears in the URI, without
    percent-decoding.
    """
    if not blob_uri:
        raise ValidationError("Blob URI is missing from the query string.")
    try:
        uri = urlparse(blob_uri)
    except ValueError as e:
        raise ParseError(f"Invalid blob URI: {blob_uri}") from e
    if not uri.scheme or not uri.netloc:
        raise ParseError(f"Blob URI is not absolute: {blob_uri}")
    blob_name = uri.path.rsplit("/", 1)[-1]
    if not blob_name:
        raise ParseError(f"Blob URI has no blob name: {blob_uri}")
    return blob_name


class BlobUseCase:
    def __init__(
        self,
        storage_service: StorageService,
        container_name: str = PRODUCTS_CONTAINER,
        distinguish_client_errors: bool = False,
    ):
        self.storage_service = storage_service
        self.container_name = container_name
        self.distinguish_client_errors = distinguish_client_errors

    def failure(self, error: BlobOperationError, message: str) -> OperationResult:
        status = OperationStatus.INTERNAL_ERROR
        if self.distinguish_client_errors and error.client_error:
            status = OperationStatus.BAD_REQUEST
        return OperationResult(status=status, message=message, error=error)


class UploadBlobUseCase(BlobUseCase):
    def execute(self, request: UploadRequest) -> OperationResult:
        LOGGER.info("Uploading to Blob Storage...")
        try:
            self.storage_service.ensure_container(self.container_name)
            if request.file_name is None:
                raise ValidationError("File name is missing in the request headers.")
            if request.file_name == "":
                raise ValidationError("Invalid file name.")
            self.storage_service.upload_blob(
                UploadBlobRequest(
                    container_name=self.container_name,
                    blob_name=request.file_name,
                    data=request.body,
                    overwrite=True,
                )
            )
            LOGGER.info(
                "Blob %s uploaded to container %s", request.file_name, self.container_name
            )
            return OperationResult(
                status=OperationStatus.OK,
                message=f"Blob '{request.file_name}' uploaded successfully.",
            )
        except BlobOperationError as e:
            LOGGER.error("Error uploading to Blob Storage: %s", e)
            return self.failure(e, UPLOAD_FAILED_MESSAGE)
        except Exception as e:  # pylint: disable=broad-except
            LOGGER.exception("Error uploading to Blob Storage: %s", e)
            return self.failure(StorageError(str(e)), UPLOAD_FAILED_MESSAGE)


class DeleteBlobUseCase(BlobUseCase):
    def execute(self, request: DeleteRequest) -> OperationResult:
        LOGGER.info("Deleting from Blob Storage...")
        try:
            blob_name = blob_name_from_uri(request.blob_uri)
            existed = self.storage_service.delete_blob(
                DeleteBlobRequest(
                    container_name=self.container_name,
                    blob_name=blob_name,
                    include_snapshots=True,
                )
            )
            if not existed:
                LOGGER.info("Blob %s did not exist, nothing to delete", blob_name)
            return OperationResult(
                status=OperationStatus.OK,
                message=f"Blob '{blob_name}' deleted successfully.",
            )
        except BlobOperationError as e:
            LOGGER.error("Error deleting blob from Blob Storage: %s", e)
            return self.failure(e, DELETE_FAILED_MESSAGE)
        except Exception as e:  # pylint: disable=broad-except
            LOGGER.exception("Error deleting blob from Blob Storage: %s", e)
            return self.failure(StorageError(str(e)), DELETE_FAILED_MESSAGE)
