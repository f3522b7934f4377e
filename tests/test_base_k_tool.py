"""
Unit tests for src/base_k_tool.py.
"""
import pytest

from base_k import ConstructionError, InvalidCharacterError, OutputTooSmallError
from base_k_tool import get_args, main


def test_get_args_defaults():
    args = get_args(["encode", "-d", "base58"])
    assert args.digits == "base58"
    assert args.input == "-"
    assert args.output == "-"
    assert args.out_size is None
    assert args.case_insensitive is False


def test_encode_decode_files(tmp_path, capsys):
    data = bytes(range(256)) * 3
    raw = tmp_path / "data.bin"
    text_file = tmp_path / "data.txt"
    back = tmp_path / "back.bin"
    raw.write_bytes(data)

    main(["encode", "-d", "base58", "-i", str(raw), "-o", str(text_file)])
    text = text_file.read_text()
    assert text and "\n" not in text
    assert "Encoded 768 bytes" in capsys.readouterr().err

    args = ["decode", "-d", "base58", "-i", str(text_file), "-o", str(back)]
    main(args + ["-n", str(len(data))])
    assert back.read_bytes() == data

    main(args)
    decoded = back.read_bytes()
    assert decoded[-len(data):] == data
    assert decoded[: len(decoded) - len(data)].strip(b"\x00") == b""


def test_encode_to_stdout(tmp_path, capsys):
    raw = tmp_path / "data.bin"
    raw.write_bytes(b"\xff")
    main(["encode", "-d", "base2", "-i", str(raw)])
    captured = capsys.readouterr()
    assert captured.out == "11111111\n"
    assert "=> 8 base-2 digits" in captured.err


def test_decode_strips_whitespace_and_ignores_case(tmp_path):
    text_file = tmp_path / "data.txt"
    out = tmp_path / "out.bin"
    text_file.write_text("  FF00\n")
    main(
        [
            "decode",
            "-d",
            "base16",
            "--case_insensitive",
            "-i",
            str(text_file),
            "-o",
            str(out),
        ]
    )
    assert out.read_bytes() == b"\xff\x00"


def test_literal_digits(tmp_path):
    raw = tmp_path / "data.bin"
    out = tmp_path / "out.txt"
    raw.write_bytes(b"\x05")
    main(["encode", "-d", "ab", "-i", str(raw), "-o", str(out)])
    assert out.read_text() == "aaaaabab"


def test_bad_digit_set_is_reported(tmp_path, capsys):
    raw = tmp_path / "data.bin"
    raw.write_bytes(b"\x01")
    with pytest.raises(ConstructionError):
        main(["encode", "-d", "aa", "-i", str(raw)])
    assert "Unusable digit set 'aa'" in capsys.readouterr().err


def test_invalid_character_is_reported(tmp_path, capsys):
    text_file = tmp_path / "data.txt"
    text_file.write_text("0102")
    with pytest.raises(InvalidCharacterError):
        main(["decode", "-d", "base2", "-i", str(text_file)])
    assert "Error while decoding 4 digits" in capsys.readouterr().err


def test_out_size_too_small_is_reported(tmp_path, capsys):
    raw = tmp_path / "data.bin"
    raw.write_bytes(b"\x01\x01")
    with pytest.raises(OutputTooSmallError):
        main(["encode", "-d", "base2", "-n", "1", "-i", str(raw)])
    assert "Error while encoding 2 bytes" in capsys.readouterr().err


@pytest.mark.parametrize("out_size", ["-1", "two"])
def test_bad_out_size_is_rejected_by_parser(out_size, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["encode", "-d", "base2", "-n", out_size])
    assert excinfo.value.code == 2
    assert "--out_size" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    main([])
    assert "encode" in capsys.readouterr().out
