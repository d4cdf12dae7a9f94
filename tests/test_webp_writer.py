import pytest
from PIL import Image

from cotigraphy.errors import CoTigraphyError, ContractViolation, ErrorCode
from cotigraphy.webp_writer import FRAME_DELAY_MS, WebPWriter

WIDTH = 8
HEIGHT = 6


def _solid(color) -> bytes:
    return bytes((*color, 255)) * (WIDTH * HEIGHT)


def _writer_with_frames(*colors) -> WebPWriter:
    writer = WebPWriter(WIDTH, HEIGHT)
    for color in colors:
        assert writer.add_frame(_solid(color)) is True
    return writer


@pytest.mark.parametrize("size", [(0, 5), (5, 0)])
def test_zero_size_is_rejected(size):
    with pytest.raises(ContractViolation):
        WebPWriter(*size)


def test_add_frame_counts_frames():
    writer = _writer_with_frames((255, 0, 0), (0, 0, 255))
    assert writer.frame_count == 2


def test_add_frame_rejects_wrong_size():
    writer = WebPWriter(WIDTH, HEIGHT)
    with pytest.raises(ContractViolation):
        writer.add_frame(b"\x00" * (WIDTH * HEIGHT * 4 - 1))
    assert writer.frame_count == 0


def test_save_round_trip(tmp_path):
    writer = _writer_with_frames((255, 0, 0), (0, 0, 255), (0, 255, 0))
    target = tmp_path / "out.webp"
    writer.save(target)

    with Image.open(target) as image:
        assert image.format == "WEBP"
        assert image.size == (WIDTH, HEIGHT)
        assert image.n_frames == 3
        assert image.info.get("duration") == FRAME_DELAY_MS
        r, g, b, *_ = image.convert("RGBA").getpixel((WIDTH // 2, HEIGHT // 2))
        assert r > 200 and g < 60 and b < 60


def test_save_accepts_uppercase_extension(tmp_path):
    writer = _writer_with_frames((10, 20, 30))
    target = tmp_path / "OUT.WEBP"
    writer.save(str(target))
    with Image.open(target) as image:
        assert image.format == "WEBP"


@pytest.mark.parametrize("name", ["out.png", "out", ".webp"])
def test_save_rejects_bad_extension(tmp_path, name):
    writer = _writer_with_frames((1, 2, 3))
    with pytest.raises(CoTigraphyError) as info:
        writer.save(tmp_path / name)
    assert info.value.code == ErrorCode.INVALID_FILE_EXTENSION
    assert not (tmp_path / name).exists()


def test_save_rejects_empty_name():
    writer = _writer_with_frames((1, 2, 3))
    with pytest.raises(ContractViolation):
        writer.save("")


def test_save_without_frames_is_rejected(tmp_path):
    writer = WebPWriter(WIDTH, HEIGHT)
    with pytest.raises(ContractViolation):
        writer.save(tmp_path / "empty.webp")


def test_save_into_missing_directory_fails(tmp_path):
    writer = _writer_with_frames((1, 2, 3))
    with pytest.raises(CoTigraphyError) as info:
        writer.save(tmp_path / "missing" / "out.webp")
    assert info.value.code == ErrorCode.FILE_IO_FAILURE
    assert info.value.is_failure