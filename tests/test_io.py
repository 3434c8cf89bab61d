import gzip
from pathlib import Path

import pytest

from conftest import vcf_line, write_vcf_gz
from megadrile.errors import RecordReadError, VcfOpenError
from megadrile.io import VcfStreamSource, open_vcf


def test_header_samples_are_read_on_open(tmp_path: Path) -> None:
    path = write_vcf_gz(tmp_path / "three.vcf.gz", ["A", "B", "C"], [])

    with open_vcf(str(path)) as source:
        assert source.samples == ["A", "B", "C"]
        assert source.n_samples == 3
        assert source.next_record() is None


def test_records_come_back_in_file_order(two_sample_vcf: Path) -> None:
    with VcfStreamSource(str(two_sample_vcf)) as source:
        positions = [(rec.CHROM, rec.POS) for rec in source]
        assert source.records_read == 5

    assert positions == [("chr1", 100), ("chr1", 200), ("chr1", 300), ("chr2", 150), ("chr2", 250)]


def test_end_of_stream_is_sticky(two_sample_vcf: Path) -> None:
    with open_vcf(str(two_sample_vcf)) as source:
        list(source)
        assert source.next_record() is None
        assert source.next_record() is None


def test_multi_member_gzip_is_read_through(tmp_path: Path) -> None:
    path = write_vcf_gz(tmp_path / "multi.vcf.gz", ["S1"], [vcf_line(pos=1, gts=["0/1"])])
    with gzip.open(path, "ab") as fh:
        fh.write((vcf_line(pos=2, gts=["1/1"]) + "\n").encode())

    with open_vcf(str(path)) as source:
        assert [rec.POS for rec in source] == [1, 2]


def test_missing_file_raises_open_error(tmp_path: Path) -> None:
    with pytest.raises(VcfOpenError) as excinfo:
        open_vcf(str(tmp_path / "absent.vcf.gz"))

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_plain_text_file_raises_open_error(tmp_path: Path) -> None:
    path = tmp_path / "plain.vcf.gz"
    path.write_text("##fileformat=VCFv4.2\n#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\n")

    with pytest.raises(VcfOpenError):
        open_vcf(str(path))


def test_malformed_record_raises_read_error_with_index(tmp_path: Path) -> None:
    lines = [vcf_line(pos=p, gts=["0/1"]) for p in (10, 20)]
    lines.append(vcf_line(pos="notanumber", gts=["0/1"]))
    path = write_vcf_gz(tmp_path / "bad.vcf.gz", ["S1"], lines)

    with open_vcf(str(path)) as source:
        assert source.next_record().POS == 10
        assert source.next_record().POS == 20
        with pytest.raises(RecordReadError) as excinfo:
            source.next_record()
        assert source.records_read == 2

    assert excinfo.value.record_index == 3
    assert excinfo.value.__cause__ is not None


def test_next_record_requires_open_source(two_sample_vcf: Path) -> None:
    source = VcfStreamSource(str(two_sample_vcf))

    with pytest.raises(RuntimeError):
        source.next_record()


@pytest.mark.parametrize("gap", ["", "   "])
@pytest.mark.parametrize("n_after", [1, 2])
def test_blank_line_inside_body_is_a_read_error(tmp_path: Path, gap: str, n_after: int) -> None:
    lines = [vcf_line(pos=p, gts=["0/1"]) for p in (10, 20, 30, 40)]
    lines.append(gap)
    lines.extend(vcf_line(pos=p, gts=["0/1"]) for p in (60, 70)[:n_after])
    path = write_vcf_gz(tmp_path / "gap.vcf.gz", ["S1"], lines)

    with open_vcf(str(path)) as source:
        assert [source.next_record().POS for _ in range(4)] == [10, 20, 30, 40]
        with pytest.raises(RecordReadError) as excinfo:
            source.next_record()
        assert source.records_read == 4
        assert source.next_record() is None

    assert excinfo.value.record_index == 5


def test_trailing_blank_lines_end_the_stream_cleanly(tmp_path: Path) -> None:
    lines = [vcf_line(pos=p, gts=["0/1"]) for p in (10, 20)] + ["", "  ", ""]
    path = write_vcf_gz(tmp_path / "trailing.vcf.gz", ["S1"], lines)

    with open_vcf(str(path)) as source:
        assert [rec.POS for rec in source] == [10, 20]
        assert source.records_read == 2
