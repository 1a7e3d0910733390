import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, Iterable
from urllib.parse import unquote, urlsplit

from prefect import get_run_logger, task
from prefect.cache_policies import NO_CACHE
from prefect.events import emit_event

from prefect_flows.errors import BackendError, InvalidPattern, InvalidURI, ListingError
from prefect_flows.utils.blob import Blob
from prefect_flows.utils.connection import connection_for
from prefect_flows.utils.storage_lister import ListOptions, StorageLister
from prefect_flows.utils.templating import render

log = logging.getLogger(__name__)


class Filter(str, Enum):
    FILES = "FILES"
    DIRECTORY = "DIRECTORY"
    BOTH = "BOTH"


class ListingType(str, Enum):
    RECURSIVE = "RECURSIVE"
    DIRECTORY = "DIRECTORY"


# Acepta tanto el enum como su nombre en texto ("FILES", "files")
def _coerce(enum_cls, value):
    return value if isinstance(value, enum_cls) else enum_cls(str(value).upper())


@dataclass(frozen=True)
class ListConfig:
    """
    Configuración de una invocación del listado. 'from_' y 'project_id'
    admiten placeholders que se renderizan al ejecutar.
    """
    from_: str
    project_id: str | None = None
    all_versions: bool | None = None
    filter: Filter = Filter.BOTH
    listing_type: ListingType = ListingType.DIRECTORY
    reg_exp: str | None = None
    pattern: re.Pattern | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.from_:
            raise ValueError("'from_' must be a non-empty string")

        object.__setattr__(self, "filter", _coerce(Filter, self.filter))
        object.__setattr__(self, "listing_type", _coerce(ListingType, self.listing_type))

        if self.reg_exp is not None:
            try:
                object.__setattr__(self, "pattern", re.compile(self.reg_exp))
            except re.error as e:
                raise InvalidPattern(f"Invalid regular expression {self.reg_exp!r}: {e}") from e


@dataclass(frozen=True)
class ListOutput:
    blobs: list[Blob]


@dataclass(frozen=True)
class Location:
    scheme: str
    bucket: str
    path: str


# Separa la URI en esquema, bucket (authority) y ruta sin el separador inicial
def parse_location(value: str) -> Location:
    try:
        parts = urlsplit(value)
    except ValueError as e:
        raise InvalidURI(f"Invalid location {value!r}: {e}") from e

    if not parts.scheme or not parts.netloc:
        raise InvalidURI(f"Invalid location {value!r}: expected 'scheme://bucket/path'")
    if any(c.isspace() for c in value):
        raise InvalidURI(f"Invalid location {value!r}: whitespace is not allowed")

    return Location(scheme=parts.scheme, bucket=parts.netloc, path=unquote(parts.path).lstrip("/"))


def build_options(location: Location, config: ListConfig) -> ListOptions:
    return ListOptions(
        prefix=location.path or None,
        versions=config.all_versions,
        current_directory=config.listing_type == ListingType.DIRECTORY,
    )


def matches_filter(blob: Blob, mode: Filter) -> bool:
    # BOTH conserva todo, FILES solo objetos y DIRECTORY solo directorios
    return blob.is_directory if mode == Filter.DIRECTORY else (mode != Filter.FILES or not blob.is_directory)


def matches_pattern(blob: Blob, pattern: re.Pattern | None) -> bool:
    return pattern is None or pattern.fullmatch(blob.uri) is not None


def filter_blobs(blobs: Iterable[Blob], config: ListConfig) -> list[Blob]:
    return [
        blob for blob in blobs
        if matches_filter(blob, config.filter) and matches_pattern(blob, config.pattern)
    ]


# Sink de métricas por defecto: un evento de Prefect por métrica
def emit_metric(name: str, value: int, source: str) -> None:
    emit_event(
        event=f"bucket.list.{name}",
        resource={"prefect.resource.id": f"bucket-listing.{source}"},
        payload={"value": value},
    )


def run_listing(
    config: ListConfig,
    values: dict | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
    metric: Callable[[str, int], None] | None = None,
    connection_factory: Callable[[str, str | None], StorageLister] | None = None,
) -> ListOutput:
    """
    Lista el bucket indicado en 'from_' y aplica los filtros de la configuración.
    La URI se valida antes de crear la conexión; los fallos del proveedor
    (incluida la creación del cliente) se relanzan como BackendError, sin
    resultados parciales.
    """
    logger = logger or log
    connection_factory = connection_factory or connection_for

    source = render(config.from_, values)
    location = parse_location(source)
    project_id = render(config.project_id, values)
    options = build_options(location, config)

    try:
        lister = connection_factory(location.scheme, project_id)
        blobs = filter_blobs(lister.list_blobs(location.bucket, options), config)
    except ListingError:
        raise
    except Exception as e:
        raise BackendError(f"Error listing {source!r}: {e}", cause=e) from e

    metric = metric or partial(emit_metric, source=source)
    metric("size", len(blobs))

    logger.debug(f"Found '{len(blobs)}' blobs from '{source}'")

    return ListOutput(blobs=blobs)


# Tarea de Prefect que lista los blobs de un bucket con los filtros indicados
@task(cache_policy=NO_CACHE)
def list_blobs(
    from_: str,
    project_id: str | None = None,
    all_versions: bool | None = None,
    filter: Filter = Filter.BOTH,
    listing_type: ListingType = ListingType.DIRECTORY,
    reg_exp: str | None = None,
    values: dict | None = None,
) -> ListOutput:
    config = ListConfig(
        from_=from_,
        project_id=project_id,
        all_versions=all_versions,
        filter=filter,
        listing_type=listing_type,
        reg_exp=reg_exp,
    )
    return run_listing(config, values=values, logger=get_run_logger())
