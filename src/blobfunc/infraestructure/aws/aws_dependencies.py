from dataclasses import dataclass
from typing import Optional
from blobfunc.infraestructure.aws.s3_storage_service import S3StorageService


@dataclass
class AwsDependencies:
    storage_service: S3StorageService


def get_dependencies(s3_endpoint_url: Optional[str] = None) -> AwsDependencies:
    return AwsDependencies(
        storage_service=S3StorageService(endpoint_url=s3_endpoint_url),
    )
