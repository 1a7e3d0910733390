import json
from typing import Any

from prefect.utilities.templating import apply_values


def render(template: str | None, values: dict[str, Any] | None = None) -> str | None:
    """
    Renderiza los placeholders '{{ nombre }}' (y '{{ $VARIABLE_DE_ENTORNO }}')
    de un texto con los valores del contexto de ejecución.
    Los placeholders sin valor se dejan tal cual; un único placeholder cuyo
    valor es None retorna None.
    """
    if template is None:
        return None

    rendered = apply_values(template, values or {}, remove_notset=False)
    if rendered is None:
        return None
    if isinstance(rendered, str):
        return rendered
    if isinstance(rendered, (dict, list)):
        return json.dumps(rendered)
    if isinstance(rendered, (bool, int, float)):
        return str(rendered)
    # Un único placeholder sin valor en el contexto
    return template
