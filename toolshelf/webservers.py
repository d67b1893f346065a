"""Small TCP and HTTP servers that answer every request with a fixed reply."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass, field
from email.utils import formatdate
from typing import Optional, Sequence, Union

READ_SIZE = 512
RAW_GREETING = "Hello, Asynchronous TCP!"
HTTP_BODY = "Device control response"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

_STATUS_LINE = b"HTTP/1.1 200 OK\r\n\r\n"
_HEAD_END = b"\r\n\r\n"


class _BadRequest(Exception):
    """The peer sent something that is not an HTTP/1.x request."""


@dataclass
class _Request:
    method: str
    target: str
    version: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def keep_alive(self) -> bool:
        tokens = {
            token.strip().lower()
            for token in self.headers.get("connection", "").split(",")
        }
        if self.version == "HTTP/1.0":
            return "keep-alive" in tokens
        return "close" not in tokens


def build_response(body: Union[str, bytes]) -> bytes:
    """Return a bare HTTP 200 response carrying the body."""
    payload = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    return _STATUS_LINE + payload


async def _close(writer: asyncio.StreamWriter) -> None:
    writer.close()
    try:
        await writer.wait_closed()
    except ConnectionError:
        pass


async def handle_async_tcp_client(
    reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> None:
    """Read one request, print it and answer with a fixed greeting."""
    print("Accepted a new connection", flush=True)
    try:
        data = await reader.read(READ_SIZE)
        request = data.decode("utf-8", errors="replace")
        print(f"Received asynchronous TCP request: {request}", flush=True)
        writer.write(build_response(RAW_GREETING))
        await writer.drain()
        print("Response sent.", flush=True)
    except ConnectionError:
        pass
    finally:
        await _close(writer)


async def _read_chunked(reader: asyncio.StreamReader) -> bytes:
    pieces = []
    while True:
        size_line = await reader.readuntil(b"\r\n")
        try:
            size = int(size_line.split(b";", 1)[0].strip(), 16)
        except ValueError as error:
            raise _BadRequest("bad chunk size") from error
        if size == 0:
            while await reader.readuntil(b"\r\n") != b"\r\n":
                pass
            return b"".join(pieces)
        chunk = await reader.readexactly(size + 2)
        if chunk[-2:] != b"\r\n":
            raise _BadRequest("bad chunk terminator")
        pieces.append(chunk[:-2])


async def _read_request(reader: asyncio.StreamReader) -> Optional[_Request]:
    try:
        head = await reader.readuntil(_HEAD_END)
    except asyncio.IncompleteReadError as error:
        if error.partial.strip():
            raise _BadRequest("truncated request") from error
        return None
    except asyncio.LimitOverrunError as error:
        raise _BadRequest("request head too large") from error

    lines = head[: -len(_HEAD_END)].decode("latin-1").split("\r\n")
    parts = lines[0].split(" ")
    if len(parts) != 3 or not parts[2].startswith("HTTP/1."):
        raise _BadRequest("bad request line")
    request = _Request(method=parts[0], target=parts[1], version=parts[2])
    for line in lines[1:]:
        name, colon, value = line.partition(":")
        if not colon or not name or name != name.strip():
            raise _BadRequest("bad header line")
        request.headers[name.lower()] = value.strip()

    try:
        if "chunked" in request.headers.get("transfer-encoding", "").lower():
            request.body = await _read_chunked(reader)
        elif "content-length" in request.headers:
            try:
                length = int(request.headers["content-length"])
            except ValueError as error:
                raise _BadRequest("bad content length") from error
            if length < 0:
                raise _BadRequest("bad content length")
            request.body = await reader.readexactly(length)
    except (asyncio.IncompleteReadError, asyncio.LimitOverrunError) as error:
        raise _BadRequest("truncated body") from error
    return request


def _http_response(status: str, body: bytes, keep_alive: bool) -> bytes:
    headers = [
        f"HTTP/1.1 {status}",
        f"content-length: {len(body)}",
        f"date: {formatdate(usegmt=True)}",
    ]
    if not keep_alive:
        headers.append("connection: close")
    return ("\r\n".join(headers) + "\r\n\r\n").encode("latin-1") + body


async def handle_http_request(
    reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> None:
    """Answer every HTTP request on a connection with the device-control reply."""
    body = HTTP_BODY.encode("utf-8")
    try:
        while True:
            request = await _read_request(reader)
            if request is None:
                break
            keep_alive = request.keep_alive
            writer.write(_http_response("200 OK", body, keep_alive))
            await writer.drain()
            if not keep_alive:
                break
    except _BadRequest:
        writer.write(_http_response("400 Bad Request", b"", False))
        try:
            await writer.drain()
        except ConnectionError:
            pass
    except ConnectionError:
        pass
    finally:
        await _close(writer)


async def serve_raw(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Run the raw TCP greeting server until cancelled."""
    server = await asyncio.start_server(handle_async_tcp_client, host, port)
    print(f"Server listening on {host}:{port}...", flush=True)
    async with server:
        await server.serve_forever()


async def serve_http(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Run the HTTP device-control server until cancelled."""
    server = await asyncio.start_server(handle_http_request, host, port)
    print(f"Device control server listening on http://{host}:{port}", flush=True)
    async with server:
        await server.serve_forever()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the servers; return the process exit status."""
    parser = argparse.ArgumentParser(description="Answer requests with a fixed reply.")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=("http", "raw"),
        default="http",
        help="serve HTTP properly, or answer raw TCP reads",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    serve = serve_http if args.mode == "http" else serve_raw
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        return 0
    except OSError as error:
        print(f"server error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())