# Errores del listado de buckets. Ninguno se recupera localmente:
# todos llegan a Prefect, que marca la ejecución de la tarea como fallida.


class ListingError(Exception):
    """Error base de las tareas de listado."""


class InvalidURI(ListingError):
    """La ubicación 'from' (ya renderizada) no es una URI válida."""


class InvalidPattern(ListingError):
    """La expresión regular 'reg_exp' no compila."""


class BackendError(ListingError):
    """Fallo del SDK de almacenamiento al listar (red, permisos, bucket inexistente)."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
