import re

from nodestatus.log_parsing import LogText, collect_recent_matches, last_match, scan_last_matches

_CHAIN = re.compile(r"chain download", re.IGNORECASE)
_STATE = re.compile(r"state download", re.IGNORECASE)


def test_scan_keeps_last_match_per_category():
    lines = [
        "INFO chain download synced=10%",
        "INFO state download synced=5%",
        "INFO chain download synced=20%",
        "INFO unrelated",
    ]

    latest = scan_last_matches(lines, {"chain": _CHAIN, "state": _STATE})

    assert latest == {"chain": "chain download synced=20%", "state": "state download synced=5%"}


def test_scan_omits_categories_without_matches():
    assert scan_last_matches(["nothing"], {"chain": _CHAIN}) == {}


def test_last_match_returns_tail_from_match_start():
    assert last_match(["prefix CHAIN DOWNLOAD x=1"], _CHAIN) == "CHAIN DOWNLOAD x=1"
    assert last_match([], _CHAIN) is None


def test_collect_recent_matches_keeps_newest_in_order():
    pattern = re.compile(r"ERROR.*$")
    lines = [f"ERROR number {index}" for index in range(8)]

    matches = collect_recent_matches(lines, pattern, 5)

    assert [match.group(0) for match in matches] == [f"ERROR number {index}" for index in range(3, 8)]


def test_collect_recent_matches_zero_limit():
    assert collect_recent_matches(["ERROR"], re.compile("ERROR"), 0) == []


def test_log_text_from_blob_drops_blank_lines():
    text = LogText.from_blob("first\n\n  \nsecond\n")

    assert text.lines == ("first", "second")
    assert len(text) == 2
    assert bool(LogText.from_blob("")) is False
