"""Tests for saving rendered charts to disk"""

import httpx
import pytest
from qchart import FileWriteError, HttpStatusError, TransportError


@pytest.mark.asyncio
async def test_save_to_file_writes_fetched_bytes(stub_service, client_for, png_bytes, tmp_path):
    service = stub_service(lambda request: httpx.Response(200, content=png_bytes))
    target = tmp_path / "out.png"

    await client_for(service).set_format("png").save_to_file(target)

    assert target.read_bytes() == png_bytes


@pytest.mark.asyncio
async def test_save_to_file_accepts_str_path(stub_service, client_for, png_bytes, tmp_path):
    service = stub_service(lambda request: httpx.Response(200, content=png_bytes))
    target = tmp_path / "chart.png"

    await client_for(service).save_to_file(str(target))

    assert target.read_bytes() == png_bytes


@pytest.mark.asyncio
async def test_save_to_file_overwrites(stub_service, client_for, png_bytes, tmp_path):
    service = stub_service(lambda request: httpx.Response(200, content=png_bytes))
    target = tmp_path / "out.png"
    target.write_bytes(b"previous chart with more bytes than the new one")

    await client_for(service).save_to_file(target)

    assert target.read_bytes() == png_bytes


@pytest.mark.asyncio
async def test_fetch_failure_leaves_no_file(stub_service, client_for, tmp_path):
    service = stub_service(lambda request: httpx.Response(500))
    target = tmp_path / "out.png"

    with pytest.raises(HttpStatusError):
        await client_for(service).save_to_file(target)

    assert not target.exists()
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_transport_failure_keeps_existing_file(stub_service, client_for, tmp_path):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    target = tmp_path / "out.png"
    target.write_bytes(b"old")

    with pytest.raises(TransportError):
        await client_for(stub_service(refuse)).save_to_file(target)

    assert target.read_bytes() == b"old"


@pytest.mark.asyncio
async def test_missing_directory_raises_file_write_error(stub_service, client_for, png_bytes, tmp_path):
    service = stub_service(lambda request: httpx.Response(200, content=png_bytes))
    target = tmp_path / "missing" / "out.png"

    with pytest.raises(FileWriteError) as exc_info:
        await client_for(service).save_to_file(target)

    assert exc_info.value.kind == "io"
    assert exc_info.value.path == str(target)
