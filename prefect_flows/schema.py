"""
Documentación declarativa de la tarea 'list_blobs': campos, tipos, valores por
defecto y un ejemplo. Se mantiene separada del código de ejecución.
"""

from prefect_flows.tasks.list_blobs import Filter, ListingType

LIST_BLOBS_SCHEMA = {
    "title": "List files in a bucket",
    "description": "List files on an object storage bucket (MinIO/S3 or GCS).",
    "example": {"from_": "gs://my_bucket/dir/"},
    "properties": {
        "from_": {
            "type": "string",
            "description": "The directory to list",
            "dynamic": True,
            "required": True,
        },
        "project_id": {
            "type": "string",
            "description": "The GCP project id",
            "dynamic": True,
        },
        "all_versions": {
            "type": "boolean",
            "description": "If set to `true`, lists all versions of a blob. The default is `false`.",
            "dynamic": True,
        },
        "filter": {
            "type": "string",
            "enum": [f.value for f in Filter],
            "default": Filter.BOTH.value,
            "description": "The filter files or directory",
        },
        "listing_type": {
            "type": "string",
            "enum": [t.value for t in ListingType],
            "default": ListingType.DIRECTORY.value,
            "description": "The listing type you want (like directory or recursive)",
        },
        "reg_exp": {
            "type": "string",
            "format": "regex",
            "description": "A regexp to filter on full path",
        },
    },
    "output": {
        "blobs": {
            "type": "array",
            "description": "The list of blobs",
        },
    },
}


# Campos que admiten placeholders '{{ ... }}'
def dynamic_properties() -> list[str]:
    return [name for name, prop in LIST_BLOBS_SCHEMA["properties"].items() if prop.get("dynamic")]
