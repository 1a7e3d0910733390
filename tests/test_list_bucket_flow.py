import logging
from unittest.mock import patch

import prefect_flows.list_bucket_flow as flow_module
from prefect_flows.list_bucket_flow import list_bucket
from prefect_flows.tasks.list_blobs import Filter, ListingType, ListOutput

from conftest import make_blob


def test_flow_runs_listing_task_and_logs_blobs(caplog):
    logger = logging.getLogger("tests.list_bucket_flow")
    output = ListOutput(blobs=[make_blob("gs://bucket/dir/a.csv"), make_blob("gs://bucket/dir/sub/")])

    with patch.object(flow_module, "get_run_logger", return_value=logger), \
            patch.object(flow_module, "list_blobs", return_value=output) as list_blobs, \
            caplog.at_level(logging.INFO, logger=logger.name):
        result = list_bucket.fn(from_="gs://bucket/dir/", project_id="p", filter=Filter.FILES)

    assert result is output
    list_blobs.assert_called_once_with(
        "gs://bucket/dir/",
        project_id="p",
        all_versions=None,
        filter=Filter.FILES,
        listing_type=ListingType.DIRECTORY,
        reg_exp=None,
        values=None,
    )
    assert "gs://bucket/dir/a.csv" in caplog.text
    assert "[dir] gs://bucket/dir/sub/" in caplog.text
    assert "Listing ended with 2 blobs" in caplog.text
