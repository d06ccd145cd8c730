import logging

import pytest

from pathcodec.core.sizes import format_file_size


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 Bytes"),
        (1, "1 Bytes"),
        (512, "512 Bytes"),
        (1023, "1023 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1048576, "1 MB"),
        (1024**3, "1 GB"),
        (1024**4, "1 TB"),
        (1300000, "1.24 MB"),
    ],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_format_file_size_rounds_half_up():
    # 1.125 KB is exact in binary
    assert format_file_size(1152) == "1.13 KB"


def test_format_file_size_beyond_tb_stays_in_tb():
    assert format_file_size(1024**5) == "1024 TB"


def test_format_file_size_unsupported_input_does_not_raise(caplog):
    with caplog.at_level(logging.WARNING, logger="pathcodec"):
        assert format_file_size(-5) == "0 Bytes"
        assert format_file_size(float("nan")) == "0 Bytes"
        assert format_file_size(float("inf")) == "0 Bytes"
    assert "unsupported" in caplog.text


def test_format_file_size_huge_int_does_not_overflow():
    assert format_file_size(10**400) == f"{10**400 // 1024**4} TB"
    assert format_file_size(2 * 1024**5) == "2048 TB"
    assert format_file_size(1024**5 - 1) == "1024 TB"


def test_format_file_size_accepts_floats():
    assert format_file_size(1536.0) == "1.5 KB"
    assert format_file_size(0.5) == "0.5 Bytes"
