"""A TCP server that accepts sensor readings from remote devices."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

BUFFER_SIZE = 1024
ACKNOWLEDGEMENT = b"Data received and processed."
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


@dataclass(frozen=True, repr=False)
class SensorData:
    """A structured sensor reading."""

    def __repr__(self) -> str:
        return "SensorData"

    @classmethod
    def from_bytes(cls, data: bytes) -> "SensorData":
        """Build a reading from the raw bytes a device sent."""
        return cls()


def process_sensor_data(data: bytes) -> SensorData:
    """Turn raw bytes from a device into a structured reading."""
    return SensorData.from_bytes(data)


def _perform_device_io(sensor_data: SensorData) -> None:
    print(f"Received sensor data: {sensor_data!r}", flush=True)


async def handle_sensor_client(
    reader: asyncio.StreamReader, writer: asyncio.StreamWriter
) -> None:
    """Read one message from a device, act on it and acknowledge it."""
    try:
        data = await reader.read(BUFFER_SIZE)
        sensor_data = process_sensor_data(data)
        _perform_device_io(sensor_data)
        writer.write(ACKNOWLEDGEMENT)
        await writer.drain()
    except ConnectionError:
        pass
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except ConnectionError:
            pass


async def serve_sensors(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Accept device connections until cancelled.

    Raises OSError when the address cannot be bound.
    """
    server = await asyncio.start_server(handle_sensor_client, host, port)
    print(f"Sensor server listening on {host}:{port}", flush=True)
    async with server:
        await server.serve_forever()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sensor server; return the process exit status."""
    parser = argparse.ArgumentParser(description="Receive sensor data over TCP.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve_sensors(args.host, args.port))
    except KeyboardInterrupt:
        return 0
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())