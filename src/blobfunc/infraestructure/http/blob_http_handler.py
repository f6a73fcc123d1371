import io
import logging
import azure.functions as func
from blobfunc.app.blob.blob_entities import (
    DeleteRequest,
    OperationResult,
    UploadRequest,
)
from blobfunc.app.blob.blob_use_case import DeleteBlobUseCase, UploadBlobUseCase

LOGGER = logging.getLogger(__name__)

FILE_NAME_HEADER = "file-name"
BLOB_URI_PARAM = "blobUri"


def to_http_response(result: OperationResult) -> func.HttpResponse:
    return func.HttpResponse(
        result.message,
        status_code=result.status.value,
        mimetype="text/plain",
    )


class BlobHttpHandler:
    def __init__(
        self,
        upload_blob_use_case: UploadBlobUseCase,
        delete_blob_use_case: DeleteBlobUseCase,
    ):
        self.upload_blob_use_case = upload_blob_use_case
        self.delete_blob_use_case = delete_blob_use_case

    def upload(self, req: func.HttpRequest) -> func.HttpResponse:
        request = UploadRequest(
            file_name=req.headers.get(FILE_NAME_HEADER),
            body=io.BytesIO(req.get_body() or b""),
        )
        return to_http_response(self.upload_blob_use_case.execute(request))

    def delete(self, req: func.HttpRequest) -> func.HttpResponse:
        request = DeleteRequest(blob_uri=req.params.get(BLOB_URI_PARAM))
        return to_http_response(self.delete_blob_use_case.execute(request))


def build_function_app(handler: BlobHttpHandler) -> func.FunctionApp:
    """Registers the UploadToBlob and DeleteBlob HTTP triggers."""
    app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

    @app.function_name(name="UploadToBlob")
    @app.route(route="UploadToBlob", methods=[func.HttpMethod.POST])
    def upload_to_blob(req: func.HttpRequest) -> func.HttpResponse:
        return handler.upload(req)

    @app.function_name(name="DeleteBlob")
    @app.route(route="DeleteBlob", methods=[func.HttpMethod.DELETE])
    def delete_blob(req: func.HttpRequest) -> func.HttpResponse:
        return handler.delete(req)

    return app
