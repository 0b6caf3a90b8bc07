#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `lnmsg.hashes` module."

import hashlib

import pytest

from lnmsg.exceptions import InputTooLargeError
from lnmsg.hashes import (
    MAGIC_PREFIX,
    MAX_MESSAGE_SIZE,
    hash256,
    magic_message,
    message_bytes,
    sha256,
)


def test_hash256() -> None:
    for octets in (b"", b"hello", "deadbeef"):
        data = bytes.fromhex(octets) if isinstance(octets, str) else octets
        exp = hashlib.sha256(hashlib.sha256(data).digest()).digest()
        assert hash256(octets) == exp
        assert sha256(octets) == hashlib.sha256(data).digest()


def test_magic_message() -> None:
    assert MAGIC_PREFIX == b"Lightning Signed Message:"
    assert len(MAGIC_PREFIX) == 25

    msg = b"hello"
    t = b"Lightning Signed Message:hello"
    exp = hashlib.sha256(hashlib.sha256(t).digest()).digest()
    assert magic_message(msg) == exp
    assert magic_message("hello") == exp
    assert len(magic_message(msg)) == 32
    # known answer
    exp_hex = "439434dbc13e56e78b165f27bd05c76953c873c6fa0c8b71966336d502ae5da5"
    assert magic_message(msg).hex() == exp_hex

    # deterministic
    assert magic_message(msg) == magic_message(msg)
    assert magic_message("world") != magic_message(msg)

    # no separator, no trimming
    assert magic_message(" hello") != magic_message(msg)
    assert magic_message("") == hash256(MAGIC_PREFIX)


def test_text_messages_are_utf8() -> None:
    msg = "café"
    assert message_bytes(msg) == msg.encode("utf-8")
    assert magic_message(msg) == magic_message(msg.encode("utf-8"))
    # not a hex-string
    assert message_bytes("deadbeef") == b"deadbeef"


def test_size_limit() -> None:
    assert MAX_MESSAGE_SIZE == 65535

    msg = b"a" * MAX_MESSAGE_SIZE
    assert message_bytes(msg) == msg
    magic_message(msg)

    err_msg = "message too large: "
    with pytest.raises(InputTooLargeError, match=err_msg):
        message_bytes(b"a" * (MAX_MESSAGE_SIZE + 1))

    # the limit is for signing only: any message can be hashed
    long_msg = b"a" * 70000
    assert magic_message(long_msg) == hash256(MAGIC_PREFIX + long_msg)

    # the limit is in bytes, not characters
    msg_str = "é" * 32768
    assert len(msg_str) < MAX_MESSAGE_SIZE
    with pytest.raises(InputTooLargeError, match=err_msg):
        message_bytes(msg_str)
