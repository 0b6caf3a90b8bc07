#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Zbase32 encoding and decoding functions.

z-base-32 is the human-oriented base-32 encoding by Zooko Wilcox-O'Hearn:
https://philzimmermann.com/docs/human-oriented-base-32-encoding.txt

Its alphabet avoids visually confusable characters and puts the
easier ones in the most frequent positions.
It is unrelated to RFC4648 base32 and to bech32,
even if the three of them regroup 8-bit bytes as 5-bit quintets.

This implementation:

* regroups bits from the most significant one
* never appends padding characters
  (the encoded length is ceil(8 * len(data) / 5))
* zero-pads the last incomplete quintet on the right at encoding time
* discards the trailing bits that cannot form a full byte
  at decoding time (the decoded length is floor(5 * len(string) / 8))
* strictly rejects any character outside the alphabet,
  upper-case letters included
* interface mimics the native python3 base64 interface, i.e.
  it supports encoding bytes-like objects to ASCII strings,
  and decoding ASCII bytes-like objects or ASCII strings to bytes.
"""

from typing import Iterable, List, Tuple

from lnmsg.alias import Octets, String
from lnmsg.exceptions import InvalidEncodingError, LNMsgValueError
from lnmsg.utils import bytes_from_octets

ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
_INVALID = 255


def _reverse_table(alphabet: str) -> Tuple[int, ...]:
    "Return the quintet value indexed by character code."
    table = [_INVALID] * 256
    for i, char in enumerate(alphabet):
        table[ord(char)] = i
    return tuple(table)


_REV_ALPHABET = _reverse_table(ALPHABET)


# not btclib.b32.power_of_2_base_conversion: its pad=False path
# rejects non-zero trailing bits, while decoding here drops them
def convert_bits(
    data: Iterable[int], from_bits: int, to_bits: int, pad: bool = True
) -> List[int]:
    """Convert a power-of-two digit sequence to another power-of-two base.

    Digits are regrouped starting from the most significant bit.
    If pad is True, the last incomplete digit is zero-padded on the right;
    otherwise the trailing bits that do not fill a whole digit are dropped.
    """
    acc = 0
    bits = 0
    ret = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or (value >> from_bits):
            raise LNMsgValueError(f"invalid value: {value}")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)

    if pad and bits:
        ret.append((acc << (to_bits - bits)) & maxv)

    return ret


def encode(data: Octets) -> str:
    "Return the zbase32 encoding of the input octets."

    data = bytes_from_octets(data)
    return "".join(ALPHABET[d] for d in convert_bits(data, 8, 5, True))


def _quintets(string: String) -> List[int]:
    "Return the quintet values of a zbase32 string."

    codes = string if isinstance(string, (bytes, bytearray)) else map(ord, string)

    quintets = []
    for pos, code in enumerate(codes):
        char = chr(code)
        value = _REV_ALPHABET[code] if code < 256 else _INVALID
        if value == _INVALID:
            raise InvalidEncodingError(char, pos)
        quintets.append(value)
    return quintets


def decode(string: String) -> bytes:
    "Return the octets encoded by a zbase32 string."

    return bytes(convert_bits(_quintets(string), 5, 8, False))
