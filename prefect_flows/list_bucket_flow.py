from prefect import flow, get_run_logger
from config import settings
from prefect_flows.tasks.list_blobs import Filter, ListingType, ListOutput, list_blobs

@flow
def list_bucket(
    from_: str = settings.LIST_FROM,
    project_id: str | None = settings.GCS_PROJECT,
    all_versions: bool | None = None,
    filter: Filter = Filter.BOTH,
    listing_type: ListingType = ListingType.DIRECTORY,
    reg_exp: str | None = None,
    values: dict | None = None,
    ) -> ListOutput:
    """Flujo de listado: obtiene los blobs del bucket y registra cada URI encontrada."""
    logger = get_run_logger()
    logger.info(f"Listing {from_!r}")

    output = list_blobs(
        from_,
        project_id=project_id,
        all_versions=all_versions,
        filter=filter,
        listing_type=listing_type,
        reg_exp=reg_exp,
        values=values,
    )

    for blob in output.blobs:
        logger.info(f"{'[dir] ' if blob.is_directory else ''}{blob.uri}")

    logger.info(f"Listing ended with {len(output.blobs)} blobs")
    return output


if __name__ == "__main__":
    # Permite ejecutar el flujo manualmente desde línea de comandos
    list_bucket()
