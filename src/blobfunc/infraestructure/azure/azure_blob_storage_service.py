import logging
from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient
from blobfunc.core.errors import StorageError
from blobfunc.core.ports.storage_service import (
    StorageService,
    UploadBlobRequest,
    DeleteBlobRequest,
    DownloadBlobRequest,
)

LOGGER = logging.getLogger(__name__)


class AzureBlobStorageService(StorageService):

    def __init__(self, blob_service_client: BlobServiceClient):
        self.blob_service_client = blob_service_client

    def ensure_container(self, container_name: str) -> bool:
        container_client = self.blob_service_client.get_container_client(
            container_name
        )
        try:
            container_client.create_container()
            LOGGER.info("Container %s created", container_name)
            return True
        except ResourceExistsError:
            return False
        except AzureError as e:
            raise StorageError(
                f"Could not create container {container_name}: {e}"
            ) from e

    def upload_blob(self, request: UploadBlobRequest) -> None:
        blob_client = self.blob_service_client.get_blob_client(
            container=request.container_name, blob=request.blob_name
        )
        try:
            blob_client.upload_blob(request.data, overwrite=request.overwrite)
        except AzureError as e:
            raise StorageError(f"Could not upload blob {request.blob_name}: {e}") from e

    def delete_blob(self, request: DeleteBlobRequest) -> bool:
        blob_client = self.blob_service_client.get_blob_client(
            container=request.container_name, blob=request.blob_name
        )
        # Cubre tanto el blob inexistente como el contenedor inexistente
        try:
            blob_client.delete_blob(
                delete_snapshots="include" if request.include_snapshots else None
            )
            return True
        except ResourceNotFoundError:
            return False
        except AzureError as e:
            raise StorageError(f"Could not delete blob {request.blob_name}: {e}") from e

    def download_blob(self, request: DownloadBlobRequest) -> bytes:
        blob_client = self.blob_service_client.get_blob_client(
            container=request.container_name, blob=request.blob_name
        )
        try:
            return blob_client.download_blob().readall()
        except AzureError as e:
            raise StorageError(
                f"Could not download blob {request.blob_name}: {e}"
            ) from e
