import os
from dataclasses import dataclass
from typing import Optional
from dotenv import find_dotenv, load_dotenv
from blobfunc.core.errors import ConfigurationError
from blobfunc.infraestructure.azure.azure_client_factory import (
    CONNECTION_STRING_VARIABLE,
)

AZURE_INFRASTRUCTURE = "AZURE"
AWS_INFRASTRUCTURE = "AWS"
INFRASTRUCTURES = (AZURE_INFRASTRUCTURE, AWS_INFRASTRUCTURE)

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class Settings:
    infrastructure: str = AZURE_INFRASTRUCTURE
    connection_string: Optional[str] = None
    s3_endpoint_url: Optional[str] = None
    distinguish_client_errors: bool = False
    log_level: str = "INFO"


def _env_flag(name: str) -> bool:
    value = (os.getenv(name) or "").strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got: {value}")


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    infrastructure = (
        os.getenv("BLOBFUNC_STORAGE_INFRASTRUCTURE", AZURE_INFRASTRUCTURE)
        .strip()
        .upper()
    )
    if infrastructure not in INFRASTRUCTURES:
        raise ConfigurationError(f"Invalid infrastructure: {infrastructure}")
    return Settings(
        infrastructure=infrastructure,
        connection_string=os.getenv(CONNECTION_STRING_VARIABLE),
        s3_endpoint_url=os.getenv("BLOBFUNC_S3_ENDPOINT_URL") or None,
        distinguish_client_errors=_env_flag("BLOBFUNC_DISTINGUISH_CLIENT_ERRORS"),
        log_level=os.getenv("BLOBFUNC_LOG_LEVEL", "INFO").upper(),
    )
