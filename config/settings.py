from dotenv import load_dotenv
import os
# uso solo en local
load_dotenv(override=True)

# Storage Variables (MinIO / S3)
MINIO_ENDPOINT = os.getenv("MINIO_ENDPOINT")
MINIO_ACCESS_KEY = os.getenv("MINIO_ACCESS_KEY")
MINIO_SECRET_KEY = os.getenv("MINIO_SECRET_KEY")
MINIO_SECURE = os.getenv("MINIO_SECURE", "false").lower() in ("1", "true", "yes")
# Storage Variables (Google Cloud Storage)
GCS_PROJECT = os.getenv("GCS_PROJECT")
GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
# Others Variables
LIST_FROM = os.getenv("LIST_FROM", "s3://my-bucket/dir/")
