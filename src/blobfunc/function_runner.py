import logging
from blobfunc.settings import Settings, AZURE_INFRASTRUCTURE, AWS_INFRASTRUCTURE
from blobfunc.core.errors import ConfigurationError
from blobfunc.core.ports.storage_service import StorageService
from blobfunc.infraestructure.azure.azure_dependencies import (
    get_dependencies as get_azure_dependencies,
)
from blobfunc.infraestructure.aws.aws_dependencies import (
    get_dependencies as get_aws_dependencies,
)
from blobfunc.infraestructure.http.blob_http_handler import BlobHttpHandler
from blobfunc.infraestructure.http.http_dependencies import (
    get_dependencies as get_http_dependencies,
)

LOGGER = logging.getLogger(__name__)

QUIET_LOGGERS = ("azure", "boto3", "botocore", "urllib3")


def configure_logging(settings: Settings) -> None:
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("blobfunc").setLevel(settings.log_level)


def get_storage_service(settings: Settings) -> StorageService:
    LOGGER.info("Infrastructure: %s", settings.infrastructure)
    if settings.infrastructure == AZURE_INFRASTRUCTURE:
        return get_azure_dependencies(settings.connection_string).storage_service
    if settings.infrastructure == AWS_INFRASTRUCTURE:
        LOGGER.debug("S3 endpoint url: %s", settings.s3_endpoint_url)
        return get_aws_dependencies(settings.s3_endpoint_url).storage_service
    LOGGER.error("Invalid infrastructure: %s", settings.infrastructure)
    raise ConfigurationError("Invalid infrastructure")


def create_blob_http_handler(settings: Settings) -> BlobHttpHandler:
    configure_logging(settings)
    storage_service = get_storage_service(settings)
    http_dependencies = get_http_dependencies(
        storage_service=storage_service,
        distinguish_client_errors=settings.distinguish_client_errors,
    )
    return http_dependencies.blob_http_handler
