import pytest

from siegekit import util


def test_parse_time_seconds():
    assert util.parse_time("10S") == (1, 10)


def test_parse_time_minutes_and_hours():
    assert util.parse_time("3m") == (1, 3 * 60)
    assert util.parse_time("2H") == (1, 2 * 3600)


def test_parse_time_without_modifier_is_minutes():
    time, secs = util.parse_time("7")
    assert time == 7
    assert secs == 7 * 60


def test_parse_time_skips_unknown_characters_before_modifier():
    assert util.parse_time("4xs") == util.parse_time("4s")


def test_parse_time_rejects_non_digit_start():
    assert util.parse_time("abc") == (0, 0)
    assert util.parse_time("") == (0, 0)


def test_substring_basic_and_clamped():
    assert util.substring("hello world", 6, 5) == "world"
    assert util.substring("hello", 2, 100) == "llo"


@pytest.mark.parametrize("start,length", [(-1, 2), (0, 0), (10, 1)])
def test_substring_out_of_range(start, length):
    assert util.substring("hello", start, length) is None


@pytest.mark.parametrize("code,expected", [(99, False), (100, True), (200, True), (299, True), (300, False), (404, False)])
def test_okay(code, expected):
    assert util.okay(code) is expected


def test_strmatch():
    assert util.strmatch("GZIP", "gzip") is True
    assert util.strmatch("gzip2", "gzip") is False
    assert util.strmatch("gzi", "gzip") is False


def test_startswith_and_endswith():
    assert util.startswith("!--", "!-- comment") is True
    assert util.startswith("!--", "!-") is False
    assert util.endswith("/", "/path/") is True
    assert util.endswith("+", "abc") is False
    assert util.endswith(None, "abc") is False
    assert util.endswith("/", None) is False


def test_stristr():
    assert util.stristr("Hello World", "WORLD") == "World"
    assert util.stristr("Hello", "xyz") is None
    assert util.stristr("abc", "") == "abc"


def test_strncasestr():
    assert util.strncasestr("Content-Type: text", "type", 20) == "Type: text"
    assert util.strncasestr("abcdef", "DEF", 3) is None
    assert util.strncasestr("", "a", 5) is None
    assert util.strncasestr("abc", "", 5) is None


def test_elapsed_time_is_linear():
    assert util.elapsed_time(0) == 0.0
    assert util.elapsed_time(200) == pytest.approx(2 * util.elapsed_time(100))


def test_posix_rand_r_seed_zero():
    assert util.posix_rand_r(0) == 12345


def test_posix_rand_r_deterministic_and_bounded():
    seed = 42
    values = []
    for _ in range(20):
        seed = util.posix_rand_r(seed)
        values.append(seed)
        assert 0 <= seed <= 2147483647
    again = []
    seed = 42
    for _ in range(20):
        seed = util.posix_rand_r(seed)
        again.append(seed)
    assert values == again


def test_urandom_range():
    for _ in range(10):
        value = util.urandom()
        assert -(2**31) <= value < 2**31


def test_version_banner():
    banner = util.version_banner()
    assert banner.startswith("siege 4.1.7-b6\n")
    assert "NO warranty" in banner