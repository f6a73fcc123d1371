import io
import logging
import boto3
import pytest
from moto import mock_aws
from blobfunc.core.errors import StorageError
from blobfunc.core.ports.storage_service import (
    DeleteBlobRequest,
    DownloadBlobRequest,
    UploadBlobRequest,
)
from blobfunc.infraestructure.aws.s3_storage_service import S3StorageService

# Disable logging
logging.getLogger("boto3").setLevel(logging.WARNING)
logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("moto").setLevel(logging.WARNING)

# pylint: disable=redefined-outer-name


@pytest.fixture
def s3_bucket():
    """Fixture que crea un bucket S3 para pruebas."""
    bucket_name = "products"
    with mock_aws():
        s3_client = boto3.client("s3")
        s3_client.create_bucket(Bucket=bucket_name)
        yield bucket_name, s3_client


@mock_aws
def test_ensure_container_creates_bucket():
    """Test que verifica que el bucket se crea sólo la primera vez."""
    storage_service = S3StorageService()
    s3_client = boto3.client("s3")

    assert storage_service.ensure_container("products") is True
    assert storage_service.ensure_container("products") is False

    buckets = [bucket["Name"] for bucket in s3_client.list_buckets()["Buckets"]]
    assert buckets == ["products"]


@mock_aws
def test_upload_blob(s3_bucket):
    """Test que verifica la carga de un blob a S3."""
    # Preparar datos
    bucket_name, s3_client = s3_bucket
    storage_service = S3StorageService()

    # Cargar blob
    storage_service.upload_blob(
        UploadBlobRequest(
            container_name=bucket_name,
            blob_name="report.csv",
            data=io.BytesIO(b"a,b,c"),
        )
    )

    # Verificar que el blob se cargó correctamente
    response = s3_client.get_object(Bucket=bucket_name, Key="report.csv")
    assert response["Body"].read() == b"a,b,c"


@mock_aws
def test_upload_blob_overwrites(s3_bucket):
    """Test que verifica que la última carga es la que queda."""
    bucket_name, _ = s3_bucket
    storage_service = S3StorageService()

    for content in (b"primera version", b"segunda"):
        storage_service.upload_blob(
            UploadBlobRequest(
                container_name=bucket_name, blob_name="report.csv", data=content
            )
        )

    content = storage_service.download_blob(
        DownloadBlobRequest(container_name=bucket_name, blob_name="report.csv")
    )
    assert content == b"segunda"


@mock_aws
def test_upload_blob_without_overwrite(s3_bucket):
    bucket_name, s3_client = s3_bucket
    s3_client.put_object(Bucket=bucket_name, Key="report.csv", Body=b"original")
    storage_service = S3StorageService()

    with pytest.raises(StorageError):
        storage_service.upload_blob(
            UploadBlobRequest(
                container_name=bucket_name,
                blob_name="report.csv",
                data=b"nuevo",
                overwrite=False,
            )
        )


@mock_aws
def test_delete_blob(s3_bucket):
    """Test que verifica el borrado de un blob existente."""
    bucket_name, s3_client = s3_bucket
    s3_client.put_object(Bucket=bucket_name, Key="report.csv", Body=b"a,b,c")
    storage_service = S3StorageService()

    existed = storage_service.delete_blob(
        DeleteBlobRequest(container_name=bucket_name, blob_name="report.csv")
    )

    assert existed is True
    response = s3_client.list_objects_v2(Bucket=bucket_name)
    assert response.get("KeyCount", 0) == 0


@mock_aws
def test_delete_nonexistent_blob(s3_bucket):
    """Test que verifica que borrar un blob inexistente no lanza error."""
    bucket_name, _ = s3_bucket
    storage_service = S3StorageService()

    existed = storage_service.delete_blob(
        DeleteBlobRequest(container_name=bucket_name, blob_name="nada.txt")
    )

    assert existed is False


@mock_aws
def test_delete_blob_in_nonexistent_bucket():
    """Test que verifica que el borrado no crea el bucket."""
    storage_service = S3StorageService()
    s3_client = boto3.client("s3")

    existed = storage_service.delete_blob(
        DeleteBlobRequest(container_name="products", blob_name="report.csv")
    )

    assert existed is False
    assert s3_client.list_buckets()["Buckets"] == []


@mock_aws
def test_delete_blob_removes_all_versions(s3_bucket):
    """Test que verifica que se eliminan todas las versiones del objeto."""
    bucket_name, s3_client = s3_bucket
    s3_client.put_bucket_versioning(
        Bucket=bucket_name, VersioningConfiguration={"Status": "Enabled"}
    )
    s3_client.put_object(Bucket=bucket_name, Key="report.csv", Body=b"v1")
    s3_client.put_object(Bucket=bucket_name, Key="report.csv", Body=b"v2")
    s3_client.put_object(Bucket=bucket_name, Key="report.csv.bak", Body=b"copia")
    storage_service = S3StorageService()

    existed = storage_service.delete_blob(
        DeleteBlobRequest(container_name=bucket_name, blob_name="report.csv")
    )

    assert existed is True
    response = s3_client.list_object_versions(Bucket=bucket_name)
    remaining = [
        version["Key"]
        for version in response.get("Versions", []) + response.get("DeleteMarkers", [])
    ]
    assert remaining == ["report.csv.bak"]


@mock_aws
def test_download_nonexistent_blob(s3_bucket):
    """Test que verifica el comportamiento al descargar un blob inexistente."""
    bucket_name, _ = s3_bucket
    storage_service = S3StorageService()

    with pytest.raises(StorageError):
        storage_service.download_blob(
            DownloadBlobRequest(container_name=bucket_name, blob_name="nada.txt")
        )
