from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Union


@dataclass
class UploadBlobRequest:
    container_name: str
    blob_name: str
    data: Union[bytes, BinaryIO]
    overwrite: bool = True


@dataclass
class DeleteBlobRequest:
    container_name: str
    blob_name: str
    include_snapshots: bool = True


@dataclass
class DownloadBlobRequest:
    container_name: str
    blob_name: str


class StorageService(ABC):
    @abstractmethod
    def ensure_container(self, container_name: str) -> bool:
        pass

    @abstractmethod
    def upload_blob(self, request: UploadBlobRequest) -> None:
        pass

    @abstractmethod
    def delete_blob(self, request: DeleteBlobRequest) -> bool:
        pass

    @abstractmethod
    def download_blob(self, request: DownloadBlobRequest) -> bytes:
        pass
