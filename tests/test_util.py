import pytest

from util import FormatBytes, execute_with_metrics


@pytest.mark.parametrize("n, expected", [
    (512, "512 B"),
    (2048, "2.00 KB"),
    (3 * 1024 * 1024, "3.00 MB"),
    (5 * 1024 ** 3, "5.00 GB"),
])
def test_format_bytes(n, expected):
    assert FormatBytes(n) == expected


def test_execute_with_metrics():
    result, runtime_s, peak, rss = execute_with_metrics(lambda a, b: a + b, 2, 3)
    assert result == 5
    assert runtime_s >= 0
    assert peak >= 0
    assert rss > 0
