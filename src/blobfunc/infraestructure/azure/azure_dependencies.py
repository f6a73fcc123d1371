from dataclasses import dataclass
from typing import Optional
from blobfunc.infraestructure.azure.azure_client_factory import AzureBlobClientFactory
from blobfunc.infraestructure.azure.azure_blob_storage_service import (
    AzureBlobStorageService,
)


@dataclass
class AzureDependencies:
    client_factory: AzureBlobClientFactory
    storage_service: AzureBlobStorageService


def get_dependencies(connection_string: Optional[str]) -> AzureDependencies:
    client_factory = AzureBlobClientFactory(connection_string)
    return AzureDependencies(
        client_factory=client_factory,
        storage_service=AzureBlobStorageService(client_factory.get_client()),
    )
