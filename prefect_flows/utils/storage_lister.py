from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator

from prefect_flows.utils.blob import Blob


@dataclass(frozen=True)
class ListOptions:
    """Opciones de listado independientes del proveedor."""
    prefix: str | None = None
    # None = no se envía; False es un valor explícito distinto de "no definido"
    versions: bool | None = None
    current_directory: bool = False


# Clase base abstracta para definir una interfaz común de listado de buckets.
class StorageLister(ABC):

    def __init__(self, scheme: str):
        self.scheme = scheme

    @abstractmethod
    def list_blobs(self, bucket: str, options: ListOptions) -> Iterator[Blob]:
        """Debe retornar, de forma perezosa, los blobs del bucket en el orden del proveedor."""
        pass
