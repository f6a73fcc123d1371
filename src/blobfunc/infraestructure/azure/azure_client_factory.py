import os
import logging
from typing import Optional
from azure.storage.blob import BlobServiceClient
from blobfunc.core.errors import ConfigurationError

LOGGER = logging.getLogger(__name__)

CONNECTION_STRING_VARIABLE = "AzureWebJobsStorage"


class AzureBlobClientFactory:
    """Builds the process-wide ``BlobServiceClient`` from a connection string.

    The client is created on the first ``get_client`` call and reused
    afterwards. Creating it does not contact the storage account.
    """

    def __init__(self, connection_string: Optional[str]):
        self.connection_string = connection_string
        self._client: Optional[BlobServiceClient] = None

    @classmethod
    def from_env(cls) -> "AzureBlobClientFactory":
        return cls(os.getenv(CONNECTION_STRING_VARIABLE))

    def get_client(self) -> BlobServiceClient:
        if self._client is not None:
            return self._client
        if not self.connection_string or not self.connection_string.strip():
            raise ConfigurationError(f"{CONNECTION_STRING_VARIABLE} is not set")
        try:
            self._client = BlobServiceClient.from_connection_string(
                self.connection_string
            )
        except ValueError as e:
            raise ConfigurationError(
                f"{CONNECTION_STRING_VARIABLE} is malformed: {e}"
            ) from e
        LOGGER.debug("Blob service client created for %s", self._client.account_name)
        return self._client
