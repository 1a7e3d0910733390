from typing import Iterator

from minio import Minio
from config import settings
from prefect_flows.utils.blob import Blob, from_minio
from prefect_flows.utils.storage_lister import ListOptions, StorageLister

# Crea y retorna una instancia del cliente MinIO configurado según las credenciales del sistema
def get_minio_client():
    return Minio(
        settings.MINIO_ENDPOINT,
        access_key=settings.MINIO_ACCESS_KEY,
        secret_key=settings.MINIO_SECRET_KEY,
        secure=settings.MINIO_SECURE
    )


# Implementación del listado para MinIO (y cualquier almacenamiento compatible con S3)
class MinioStorageLister(StorageLister):
    def __init__(self, scheme: str = "s3", client: Minio | None = None):
        super().__init__(scheme)
        self.client = client or get_minio_client()

    def list_blobs(self, bucket: str, options: ListOptions) -> Iterator[Blob]:
        """
        Lista los objetos del bucket. Sin 'recursive' MinIO agrupa por '/' y
        retorna los prefijos comunes como objetos con is_dir=True.
        """
        kwargs = {"recursive": not options.current_directory}
        if options.prefix:
            kwargs["prefix"] = options.prefix
        if options.versions is not None:
            kwargs["include_version"] = options.versions

        for obj in self.client.list_objects(bucket_name=bucket, **kwargs):
            yield from_minio(self.scheme, obj)
