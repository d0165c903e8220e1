import pytest

from patchgen import defaults
from patchgen.regions import build_region, build_regions, frame_count
from conftest import write_sample


@pytest.mark.parametrize(
    "size, expected",
    [(1000, 456), (2000, 956), (88, 0), (0, -44), (89, 0.5)],
)
def test_frame_count(size, expected):
    assert frame_count(size) == expected


def test_frame_count_is_int_when_whole():
    assert isinstance(frame_count(1000), int)


def test_build_region_shape():
    region = build_region("kick1.wav", 456, 53)
    assert region == {
        "fade.in": 0,
        "fade.out": 0,
        "framecount": 456,
        "hikey": 53,
        "lokey": 53,
        "pan": 0,
        "pitch.keycenter": 60,
        "playmode": "oneshot",
        "reverse": False,
        "sample": "kick1.wav",
        "sample.end": 456,
        "transpose": 0,
        "tune": 0,
    }


@pytest.mark.parametrize("threads", [1, 4])
def test_keys_follow_sample_order(tmp_path, threads):
    samples = []
    for i in range(10):
        name = f"s{i}.wav"
        write_sample(tmp_path / name, 88 + 2 * i)
        samples.append(name)
    samples.reverse()

    regions, next_key = build_regions(tmp_path, samples, 40, threads=threads)

    assert [r["sample"] for r in regions] == samples
    assert [r["lokey"] for r in regions] == list(range(40, 50))
    assert all(r["hikey"] == r["lokey"] for r in regions)
    assert [r["framecount"] for r in regions] == list(range(9, -1, -1))
    assert next_key == 50


def test_keys_above_midi_range_warn(tmp_path, capsys):
    write_sample(tmp_path / "a.wav", 100)
    regions, _ = build_regions(tmp_path, ["a.wav"], 128)
    assert regions[0]["hikey"] == 128
    assert "above 127" in capsys.readouterr().err


def test_frame_count_defaults_come_from_defaults_module():
    size = 1000
    assert frame_count(size) == (size - defaults.HEADER_BYTES) // defaults.FRAME_WIDTH
