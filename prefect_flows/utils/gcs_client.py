"""Google Cloud Storage lister."""

from typing import Iterator

from google.cloud import storage as gcs
from google.oauth2 import service_account

from config import settings
from prefect_flows.utils.blob import Blob, from_gcs, from_prefix
from prefect_flows.utils.storage_lister import ListOptions, StorageLister


# Crea el cliente de GCS para el proyecto indicado (o el del entorno)
def get_gcs_client(project_id: str | None = None) -> gcs.Client:
    kwargs: dict = {}
    project = project_id or settings.GCS_PROJECT
    if project:
        kwargs["project"] = project
    if settings.GOOGLE_APPLICATION_CREDENTIALS:
        kwargs["credentials"] = service_account.Credentials.from_service_account_file(
            settings.GOOGLE_APPLICATION_CREDENTIALS
        )
    return gcs.Client(**kwargs)


class GcsStorageLister(StorageLister):
    """Listado de blobs de GCS, página a página."""

    def __init__(self, scheme: str = "gs", client: gcs.Client | None = None, project_id: str | None = None):
        super().__init__(scheme)
        self.client = client or get_gcs_client(project_id)

    def list_blobs(self, bucket: str, options: ListOptions) -> Iterator[Blob]:
        kwargs: dict = {}
        if options.prefix:
            kwargs["prefix"] = options.prefix
        if options.versions is not None:
            kwargs["versions"] = options.versions
        if options.current_directory:
            kwargs["delimiter"] = "/"

        iterator = self.client.list_blobs(bucket, **kwargs)
        for page in iterator.pages:
            for blob in page:
                yield from_gcs(self.scheme, blob)
            # Los prefijos agrupados por el delimitador llegan aparte de los objetos
            for prefix in sorted(page.prefixes):
                yield from_prefix(self.scheme, bucket, prefix)
