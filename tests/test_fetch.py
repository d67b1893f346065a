import httpx
import pytest
import respx

from toolshelf.fetch import get_request, main, perform_get_request

URL = "https://example.com/posts"


@pytest.mark.asyncio
async def test_perform_get_request_returns_body():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(200, text="post list"))
        assert await perform_get_request(URL) == "post list"


@pytest.mark.asyncio
async def test_perform_get_request_ignores_status():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(404, text="missing"))
        assert await perform_get_request(URL) == "missing"


@pytest.mark.asyncio
async def test_perform_get_request_raises_on_connection_failure():
    with respx.mock:
        respx.get(URL).mock(side_effect=httpx.ConnectError("boom"))
        with pytest.raises(httpx.ConnectError):
            await perform_get_request(URL)


@pytest.mark.asyncio
async def test_get_request_returns_body():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(200, text="hello"))
        assert await get_request(URL) == "hello"


@pytest.mark.asyncio
async def test_get_request_describes_error():
    with respx.mock:
        respx.get(URL).mock(side_effect=httpx.ConnectError("boom"))
        result = await get_request(URL)
    assert result.startswith("Error: ")
    assert "boom" in result


def test_main_prints_body(capsys):
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(200, text="[1, 2]"))
        status = main([URL])
    assert status == 0
    assert capsys.readouterr().out == "Fetched data: [1, 2]\n"


def test_main_reports_error(capsys):
    with respx.mock:
        respx.get(URL).mock(side_effect=httpx.ConnectError("boom"))
        status = main([URL])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ""
    assert captured.err == "Error fetching data: boom\n"