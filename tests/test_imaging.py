import pytest

from toolshelf.imaging import apply_grayscale


def _pixels(buffer):
    return [tuple(buffer[i : i + 4]) for i in range(0, len(buffer), 4)]


SAMPLE = bytes(
    [
        255, 0, 0, 255,
        0, 255, 0, 128,
        0, 0, 255, 0,
        12, 200, 77, 9,
        255, 255, 255, 255,
        0, 0, 0, 255,
    ]
)


def test_length_preserved():
    assert len(apply_grayscale(SAMPLE, 3, 2)) == len(SAMPLE)


def test_channels_equal_and_alpha_kept():
    result = _pixels(apply_grayscale(SAMPLE, 3, 2))
    originals = _pixels(SAMPLE)
    for (r, g, b, a), original in zip(result, originals):
        assert r == g == b
        assert a == original[3]


def test_black_stays_black():
    result = apply_grayscale(bytes([0, 0, 0, 255]), 1, 1)
    assert result == bytes([0, 0, 0, 255])


def test_gray_within_channel_range():
    result = _pixels(apply_grayscale(SAMPLE, 3, 2))
    for (gray, _, _, _), (r, g, b, _) in zip(result, _pixels(SAMPLE)):
        assert min(r, g, b) - 1 <= gray <= max(r, g, b)


def test_green_weighs_more_than_red_and_blue():
    result = _pixels(apply_grayscale(SAMPLE[:12], 3, 1))
    red_gray, green_gray, blue_gray = (pixel[0] for pixel in result)
    assert green_gray > red_gray > blue_gray


def test_brighter_input_is_not_darker():
    darker = apply_grayscale(bytes([100, 100, 100, 255]), 1, 1)
    brighter = apply_grayscale(bytes([200, 200, 200, 255]), 1, 1)
    assert brighter[0] >= darker[0]


def test_extra_bytes_untouched():
    buffer = bytes([10, 20, 30, 40, 1, 2, 3])
    result = apply_grayscale(buffer, 1, 1)
    assert result[4:] == bytes([1, 2, 3])
    assert result[0] == result[1] == result[2]


def test_empty_image():
    assert apply_grayscale(b"", 0, 0) == b""


def test_too_short_buffer_raises():
    with pytest.raises(ValueError):
        apply_grayscale(bytes(7), 1, 2)