from patchgen.scanner import SampleFilter, scan_samples
from conftest import write_sample


def test_audio_filter_is_case_insensitive(tmp_path):
    for name in ["a.wav", "b.WAV", "c.aiff", "d.AIFF", "e.mp3", "f.txt", "wav"]:
        write_sample(tmp_path / name, 10)
    assert sorted(scan_samples(tmp_path, SampleFilter.AUDIO)) == ["a.wav", "b.WAV", "c.aiff", "d.AIFF"]


def test_wav_filter_is_case_sensitive(tmp_path):
    for name in ["a.wav", "b.WAV", "c.aiff"]:
        write_sample(tmp_path / name, 10)
    assert scan_samples(tmp_path, SampleFilter.WAV) == ["a.wav"]


def test_filter_accepts_plain_strings(tmp_path):
    write_sample(tmp_path / "a.aiff", 10)
    assert scan_samples(tmp_path, "audio") == ["a.aiff"]
    assert scan_samples(tmp_path, "wav") == []


def test_subdirectories_are_skipped(tmp_path):
    (tmp_path / "nested.wav").mkdir()
    write_sample(tmp_path / "real.wav", 10)
    assert scan_samples(tmp_path) == ["real.wav"]


def test_empty_directory(tmp_path):
    assert scan_samples(tmp_path) == []
