from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Blob:
    """
    Representa un objeto del bucket o un directorio virtual (prefijo agrupado).
    Los metadatos (tamaño, fechas, etag...) se copian tal cual los entrega el SDK.
    """
    uri: str
    bucket: str
    name: str
    is_directory: bool = False
    size: int | None = None
    etag: str | None = None
    last_modified: datetime | None = None
    version_id: str | None = None
    content_type: str | None = None


def build_uri(scheme: str, bucket: str, name: str) -> str:
    return f"{scheme}://{bucket}/{name}"


# Convierte un objeto retornado por minio.Minio.list_objects
def from_minio(scheme: str, obj) -> Blob:
    return Blob(
        uri=build_uri(scheme, obj.bucket_name, obj.object_name),
        bucket=obj.bucket_name,
        name=obj.object_name,
        is_directory=bool(obj.is_dir),
        size=obj.size,
        etag=obj.etag,
        last_modified=obj.last_modified,
        version_id=obj.version_id,
        content_type=obj.content_type,
    )


# Convierte un google.cloud.storage.Blob
def from_gcs(scheme: str, blob) -> Blob:
    return Blob(
        uri=build_uri(scheme, blob.bucket.name, blob.name),
        bucket=blob.bucket.name,
        name=blob.name,
        size=blob.size,
        etag=blob.etag,
        last_modified=blob.updated,
        version_id=str(blob.generation) if blob.generation is not None else None,
        content_type=blob.content_type,
    )


# Prefijo agrupado por el delimitador: se expone como directorio
def from_prefix(scheme: str, bucket: str, prefix: str) -> Blob:
    return Blob(
        uri=build_uri(scheme, bucket, prefix),
        bucket=bucket,
        name=prefix,
        is_directory=True,
    )
