import pytest

from nodestatus.formatting import format_bytes, format_thousands, format_uptime, format_uptime_short, split_uptime


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (0, "0 B"),
        (-5, "0 B"),
        (512, "512.00 B"),
        (1024, "1.00 KB"),
        (1536 * 1024**2, "1.50 GB"),
        (3 * 1024**4, "3.00 TB"),
    ],
)
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


def test_format_thousands():
    assert format_thousands(19876543) == "19,876,543"
    assert format_thousands(0) == "0"


def test_uptime_helpers():
    seconds = 3 * 86400 + 4 * 3600 + 5 * 60 + 6.9

    assert split_uptime(seconds) == (3, 4, 5, 6)
    assert format_uptime(seconds) == "3d 4h 5m 6s"
    assert format_uptime_short(seconds) == "3d 4h"
    assert format_uptime(-10) == "0d 0h 0m 0s"
