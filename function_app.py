from blobfunc.settings import load_settings
from blobfunc.function_runner import create_blob_http_handler
from blobfunc.infraestructure.http.blob_http_handler import build_function_app

# Un ConfigurationError aquí aborta la carga de la aplicación en el host
app = build_function_app(create_blob_http_handler(load_settings()))
