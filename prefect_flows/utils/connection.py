from prefect_flows.errors import InvalidURI
from prefect_flows.utils.gcs_client import GcsStorageLister
from prefect_flows.utils.minio_client import MinioStorageLister
from prefect_flows.utils.storage_lister import StorageLister

MINIO_SCHEMES = ("s3", "minio")
GCS_SCHEMES = ("gs",)
SUPPORTED_SCHEMES = MINIO_SCHEMES + GCS_SCHEMES


# Retorna un cliente nuevo por invocación según el esquema de la URI
def connection_for(scheme: str, project_id: str | None = None) -> StorageLister:
    if scheme in MINIO_SCHEMES:
        return MinioStorageLister(scheme)
    if scheme in GCS_SCHEMES:
        return GcsStorageLister(scheme, project_id=project_id)
    raise InvalidURI(f"Unsupported storage scheme {scheme!r}, expected one of {SUPPORTED_SCHEMES}")
