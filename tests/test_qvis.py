import numpy as np
import pytest

from visflowkit.qvis import QVisFileError, load_qvis, parse_dat_line


def write_dataset(tmp_path, dat_lines, raw_bytes, raw_name="data.raw"):
    (tmp_path / raw_name).write_bytes(raw_bytes)
    dat = tmp_path / "volume.dat"
    dat.write_text("\n".join(dat_lines) + "\n")
    return dat


def header(fmt="UCHAR", resolution="3 3 3", thickness="1 1 1"):
    return [
        "ObjectFileName: data.raw",
        f"Resolution: {resolution}",
        f"SliceThickness: {thickness}",
        f"Format: {fmt}",
        "Endianess: little",
    ]


def test_parse_dat_line_trims_and_lowercases():
    assert parse_dat_line("  ObjectFileName:  Foo.RAW  ") == ("objectfilename", "foo.raw")


def test_parse_dat_line_without_colon():
    assert parse_dat_line("no separator here") == ("", "")


def test_parse_dat_line_splits_at_first_colon():
    assert parse_dat_line("Key: a:b") == ("key", "a:b")


def test_load_byte_volume(tmp_path):
    raw = bytes(range(27))
    volume = load_qvis(write_dataset(tmp_path, header(), raw))
    assert (volume.width, volume.height, volume.depth) == (3, 3, 3)
    assert bytes(volume.data) == raw
    assert volume.normals.shape == (27, 3)


def test_load_normalizes_scale(tmp_path):
    dat = write_dataset(tmp_path, header(resolution="4 2 2", thickness="1 2 3"), bytes(16))
    volume = load_qvis(dat)
    extent = volume.scale * np.array([4, 2, 2]) / volume.max_size
    assert extent.max() == pytest.approx(1.0)
    assert volume.max_size == 4


def test_load_sixteen_bit_volume_is_rescaled(tmp_path):
    values = np.arange(27, dtype="<u2") * 1000 + 500
    volume = load_qvis(write_dataset(tmp_path, header(fmt="USHORT"), values.tobytes()))
    assert volume.data[0] == 0
    assert np.all(np.diff(volume.data.astype(int)) >= 0)
    assert volume.data.max() < 255
    assert len(volume.data) == 27


def test_missing_dat_file(tmp_path):
    with pytest.raises(QVisFileError):
        load_qvis(tmp_path / "absent.dat")


def test_missing_object_filename(tmp_path):
    dat = write_dataset(tmp_path, header()[1:], bytes(27))
    with pytest.raises(QVisFileError, match="object filename not found"):
        load_qvis(dat)


def test_resolution_needs_three_values(tmp_path):
    dat = write_dataset(tmp_path, header(resolution="3 3"), bytes(27))
    with pytest.raises(QVisFileError, match="invalid resolution tag"):
        load_qvis(dat)


def test_resolution_must_be_numeric(tmp_path):
    dat = write_dataset(tmp_path, header(resolution="a b c"), bytes(27))
    with pytest.raises(QVisFileError, match="invalid resolution tag"):
        load_qvis(dat)


def test_slicethickness_must_be_numeric(tmp_path):
    dat = write_dataset(tmp_path, header(thickness="x 1 1"), bytes(27))
    with pytest.raises(QVisFileError, match="invalid slicethickness tag"):
        load_qvis(dat)


def test_big_endian_is_rejected(tmp_path):
    lines = header()[:-1] + ["Endianess: BIG"]
    dat = write_dataset(tmp_path, lines, bytes(27))
    with pytest.raises(QVisFileError, match="little endian"):
        load_qvis(dat)


def test_missing_raw_file(tmp_path):
    dat = tmp_path / "volume.dat"
    dat.write_text("\n".join(header()) + "\n")
    with pytest.raises(QVisFileError):
        load_qvis(dat)