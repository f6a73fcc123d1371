from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional
from blobfunc.core.errors import BlobOperationError

PRODUCTS_CONTAINER = "products"


class OperationStatus(Enum):
    OK = 200
    BAD_REQUEST = 400
    INTERNAL_ERROR = 500


@dataclass
class UploadRequest:
    file_name: Optional[str]
    body: BinaryIO


@dataclass
class DeleteRequest:
    blob_uri: Optional[str]


@dataclass
class OperationResult:
    status: OperationStatus
    message: str
    error: Optional[BlobOperationError] = None

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.OK
