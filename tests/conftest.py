import logging
from typing import Iterator

import pytest

from prefect_flows.utils.blob import Blob
from prefect_flows.utils.storage_lister import ListOptions, StorageLister


def make_blob(uri: str) -> Blob:
    scheme, rest = uri.split("://", 1)
    bucket, _, name = rest.partition("/")
    return Blob(uri=uri, bucket=bucket, name=name, is_directory=uri.endswith("/"))


class FakeLister(StorageLister):
    """Lister en memoria que registra las llamadas recibidas."""

    def __init__(self, blobs: list[Blob] | None = None, error: Exception | None = None):
        super().__init__("s3")
        self.blobs = blobs or []
        self.error = error
        self.calls: list[tuple[str, ListOptions]] = []

    def list_blobs(self, bucket: str, options: ListOptions) -> Iterator[Blob]:
        self.calls.append((bucket, options))
        for blob in self.blobs:
            yield blob
        if self.error is not None:
            raise self.error


class MetricRecorder:
    def __init__(self):
        self.values: list[tuple[str, int]] = []

    def __call__(self, name: str, value: int) -> None:
        self.values.append((name, value))


@pytest.fixture()
def listing():
    return [
        make_blob("s3://bucket/dir/file1.txt"),
        make_blob("s3://bucket/dir/file2.txt"),
        make_blob("s3://bucket/dir/sub/"),
        make_blob("s3://bucket/dir/other/"),
    ]


@pytest.fixture()
def fake_lister(listing):
    return FakeLister(listing)


@pytest.fixture()
def metric():
    return MetricRecorder()


@pytest.fixture()
def logger():
    return logging.getLogger("tests.list_blobs")
