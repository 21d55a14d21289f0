import asyncio
import io

import pytest
from fastapi import UploadFile

from lanprint.services.uploads import (
    UploadTooLarge,
    remove_upload,
    safe_filename,
    save_upload,
    schedule_removal,
)


def test_safe_filename():
    assert safe_filename("Report (final) v2+.pdf") == "Report (final) v2+.pdf"
    assert safe_filename("a/b\\c?.pdf") == "a_b_c_.pdf"
    assert safe_filename("") == "upload"


@pytest.mark.asyncio
async def test_save_upload_prefixes_timestamp(tmp_path):
    upload = UploadFile(file=io.BytesIO(b"%PDF-1.4"), filename="../../etc/passwd?.pdf")
    path = await save_upload(upload, tmp_path / "uploads", max_bytes=1024)

    assert path.parent == tmp_path / "uploads"
    stamp, _, name = path.name.partition("__")
    assert stamp.isdigit()
    assert name == "passwd_.pdf"
    assert path.read_bytes() == b"%PDF-1.4"


@pytest.mark.asyncio
async def test_save_upload_rejects_large_files(tmp_path):
    upload = UploadFile(file=io.BytesIO(b"x" * 2048), filename="big.pdf")
    with pytest.raises(UploadTooLarge):
        await save_upload(upload, tmp_path, max_bytes=1024)
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_same_name_same_millisecond_gets_distinct_files(tmp_path, monkeypatch):
    monkeypatch.setattr("lanprint.services.uploads.time.time", lambda: 1700000000.0)

    first = await save_upload(UploadFile(file=io.BytesIO(b"first"), filename="doc.pdf"), tmp_path, 1024)
    second = await save_upload(UploadFile(file=io.BytesIO(b"second"), filename="doc.pdf"), tmp_path, 1024)

    assert first != second
    assert first.name == "1700000000000__doc.pdf"
    assert second.name == "1700000000000-1__doc.pdf"
    assert first.read_bytes() == b"first"
    assert second.read_bytes() == b"second"


def test_remove_upload_tolerates_missing_file(tmp_path):
    remove_upload(tmp_path / "gone.pdf")


@pytest.mark.asyncio
async def test_schedule_removal(tmp_path):
    path = tmp_path / "a.pdf"
    path.write_bytes(b"data")
    schedule_removal(path, 0.01)
    assert path.exists()
    await asyncio.sleep(0.1)
    assert not path.exists()
