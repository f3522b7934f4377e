import sys
from typing import BinaryIO

# Stands for stdin or stdout in file arguments
std_stream_name = "-"


def xprint(*args, **kwargs) -> None:
    if "flush" not in kwargs:
        kwargs["flush"] = True

    if "file" not in kwargs:
        kwargs["file"] = sys.stderr

    print(*args, **kwargs)


def read_input_bytes(fname: str) -> bytes:
    if fname == std_stream_name:
        return sys.stdin.buffer.read()
    with open(fname, "rb") as reader:
        return reader.read()


def write_output_bytes(data: bytes, fname: str) -> None:
    if fname == std_stream_name:
        writer: BinaryIO = sys.stdout.buffer
        writer.write(data)
        writer.flush()
        return
    with open(fname, "wb") as writer:
        writer.write(data)
