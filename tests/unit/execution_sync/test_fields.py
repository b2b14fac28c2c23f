import pytest

from nodestatus.execution_sync import ETA_COMPUTING, parse_block_number, parse_eta, parse_percentage


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("3h15m", "3h 15m"),
        ("1h2m3.5s", "1h 2m"),
        ("45m10s", "0h 45m"),
        ("42s", "0h 0m"),
        ("12h", "12h 0m"),
        (None, ETA_COMPUTING),
        ("", ETA_COMPUTING),
        ("soon", ETA_COMPUTING),
    ],
)
def test_parse_eta(raw, expected):
    assert parse_eta(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42.50%", 42.5),
        ("100.00%", 100.0),
        ("7", 7.0),
        (None, 0.0),
        ("n/a%", 0.0),
        ("nan%", 0.0),
        ("inf%", 0.0),
        ("-inf", 0.0),
        ("-12.5%", 0.0),
        ("104.2%", 100.0),
    ],
)
def test_parse_percentage(raw, expected):
    assert parse_percentage(raw) == expected


def test_parse_block_number_strips_separators():
    assert parse_block_number("19,876,543") == 19876543
    assert parse_block_number(None) == 0


def test_parse_block_number_rejects_garbage():
    with pytest.raises(ValueError):
        parse_block_number("0xabc")


def test_parse_block_number_rejects_negative():
    with pytest.raises(ValueError):
        parse_block_number("-5")
