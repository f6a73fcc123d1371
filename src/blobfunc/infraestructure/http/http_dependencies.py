from dataclasses import dataclass
from blobfunc.app.blob.blob_entities import PRODUCTS_CONTAINER
from blobfunc.app.blob.blob_use_case import DeleteBlobUseCase, UploadBlobUseCase
from blobfunc.core.ports.storage_service import StorageService
from blobfunc.infraestructure.http.blob_http_handler import BlobHttpHandler


@dataclass
class HttpDependencies:
    blob_http_handler: BlobHttpHandler


def get_dependencies(
    storage_service: StorageService,
    distinguish_client_errors: bool = False,
) -> HttpDependencies:
    return HttpDependencies(
        blob_http_handler=BlobHttpHandler(
            upload_blob_use_case=UploadBlobUseCase(
                storage_service=storage_service,
                container_name=PRODUCTS_CONTAINER,
                distinguish_client_errors=distinguish_client_errors,
            ),
            delete_blob_use_case=DeleteBlobUseCase(
                storage_service=storage_service,
                container_name=PRODUCTS_CONTAINER,
                distinguish_client_errors=distinguish_client_errors,
            ),
        ),
    )
