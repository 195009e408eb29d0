import io
import zipfile

from postercrop.controllers.archive import (
    MULTI_ARCHIVE_NAME,
    archive_entries,
    archive_filename,
    build_archive,
    write_archive,
)
from postercrop.models.enums import OutputKind
from postercrop.models.geometry import Dimensions
from postercrop.models.results import BatchResult, GeneratedFile


def _file(name: str) -> GeneratedFile:
    return GeneratedFile(name, name.encode() * 10, OutputKind.WEBP, "1 x 1 px", "10 B", Dimensions(1, 1))


def _result(base: str) -> BatchResult:
    return BatchResult(base, (_file(f"{base}_A1.pdf"), _file(f"{base}_web.webp")))


def _names(data: bytes):
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return zf.namelist()


def test_single_result_goes_at_root():
    assert _names(build_archive([_result("poster")])) == ["poster_A1.pdf", "poster_web.webp"]


def test_several_results_get_one_folder_each():
    names = _names(build_archive([_result("one"), _result("two")]))
    assert names == ["one/one_A1.pdf", "one/one_web.webp", "two/two_A1.pdf", "two/two_web.webp"]
    assert not [n for n in names if "/" not in n]


def test_duplicate_base_names_do_not_collide():
    paths = [p for p, _ in archive_entries([_result("poster"), _result("poster"), _result("poster")])]
    folders = sorted({p.split("/")[0] for p in paths})
    assert folders == ["poster", "poster_1", "poster_2"]
    assert len(paths) == len(set(paths))


def test_entry_contents_are_preserved():
    result = _result("art")
    with zipfile.ZipFile(io.BytesIO(build_archive([result]))) as zf:
        assert zf.read("art_web.webp") == result.files[1].data
        assert all(i.compress_type == zipfile.ZIP_DEFLATED for i in zf.infolist())


def test_archive_filename():
    assert archive_filename([_result("art")]) == "art_exports.zip"
    assert archive_filename([_result("a"), _result("b")]) == MULTI_ARCHIVE_NAME


def test_write_archive(tmp_path):
    out = write_archive([_result("a"), _result("b")], tmp_path / "nested" / "out.zip")
    assert out.exists()
    assert len(_names(out.read_bytes())) == 4
