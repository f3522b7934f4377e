"""
Change of radix for digit sequences.

A digit sequence is a list of small non-negative ints, most significant digit first. The
conversion rewrites the number held by one sequence in another radix. It is schoolbook
long multiplication: every source digit multiplies the destination by the source radix and
adds itself in.

To cut down on sweeps over the destination, several source digits are folded into one carry
before each sweep. The chunk stays below `carry_limit()` so intermediate values stay in the
range a 53-bit float would also hold exactly.
"""

from typing import Iterable

max_safe_integer = 2**53 - 1


class ConversionError(ValueError):
    pass


class OutputTooSmallError(ConversionError):
    def __init__(self, out_size: int) -> None:
        super().__init__(f"out_size {out_size} too small to hold the converted value")
        self.out_size = out_size


def carry_limit(src_radix: int, dst_radix: int) -> int:
    return max_safe_integer // (src_radix * dst_radix)


def _check_args(src_radix: int, dst_radix: int, out_size: int) -> None:
    if src_radix < 2 or dst_radix < 2:
        raise ValueError(f"Radix must be at least 2. Got {src_radix=}, {dst_radix=}")
    if not isinstance(out_size, int) or isinstance(out_size, bool):
        raise ValueError(f"out_size must be an int. Got {out_size!r}")
    if out_size < 0:
        raise ValueError(f"out_size must be non-negative. Got {out_size}")


def convert_radix(
    src: Iterable[int], src_radix: int, dst_radix: int, out_size: int
) -> list[int]:
    """
    Convert digits in `src_radix` to exactly `out_size` digits in `dst_radix`.

    The result is left padded with zeros. OutputTooSmallError is raised when the value needs
    more than `out_size` digits.
    """
    _check_args(src_radix, dst_radix, out_size)
    src = list(src)
    limit = carry_limit(src_radix, dst_radix)
    dst = [0] * out_size
    # dst[watermark:] holds the digits written so far, everything left of it is zero
    watermark = out_size

    ii = 0
    while ii < len(src):
        carry = 0
        power = 1
        while power < limit and ii < len(src):
            carry = carry * src_radix + src[ii]
            power *= src_radix
            ii += 1

        jj = out_size - 1
        while carry > 0 or jj >= watermark:
            if jj < 0:
                raise OutputTooSmallError(out_size)
            acc = dst[jj] * power + carry
            dst[jj] = acc % dst_radix
            carry = acc // dst_radix
            jj -= 1
        watermark = jj + 1

    return dst


def convert_radix_digitwise(
    src: Iterable[int], src_radix: int, dst_radix: int, out_size: int
) -> list[int]:
    """
    Same as convert_radix, one source digit and one full sweep at a time.
    """
    _check_args(src_radix, dst_radix, out_size)
    dst = [0] * out_size
    for digit in src:
        carry = digit
        for jj in range(out_size - 1, -1, -1):
            acc = dst[jj] * src_radix + carry
            dst[jj] = acc % dst_radix
            carry = acc // dst_radix
        if carry > 0:
            raise OutputTooSmallError(out_size)
    return dst
