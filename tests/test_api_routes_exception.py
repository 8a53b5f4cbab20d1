import pytest
from fastapi import HTTPException

from api.routes.exception import handle_exceptions
from engine.exceptions import UnsupportedFormat


def test_sync_handlers_are_rejected():
    def plain():
        return 1

    with pytest.raises(TypeError):
        handle_exceptions(plain)


@pytest.mark.asyncio
async def test_engine_errors_become_400():
    @handle_exceptions
    async def export():
        raise UnsupportedFormat("xml")

    with pytest.raises(HTTPException) as excinfo:
        await export()
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == "Unsupported export format: xml"


@pytest.mark.asyncio
async def test_unexpected_errors_become_500_and_http_errors_pass_through():
    @handle_exceptions
    async def broken():
        raise RuntimeError("boom")

    @handle_exceptions
    async def missing():
        raise HTTPException(status_code=404, detail="gone")

    with pytest.raises(HTTPException) as excinfo:
        await broken()
    assert excinfo.value.status_code == 500

    with pytest.raises(HTTPException) as excinfo:
        await missing()
    assert excinfo.value.status_code == 404
