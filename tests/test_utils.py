#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `lnmsg.utils` module."

import pytest

from lnmsg.exceptions import LNMsgValueError
from lnmsg.utils import bytes_from_octets, bytes_from_string


def test_bytes_from_octets() -> None:
    assert bytes_from_octets("deadbeef") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(" dead beef ") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(b"\x00\x01", 2) == b"\x00\x01"
    assert bytes_from_octets(b"\x00\x01", (2, 3)) == b"\x00\x01"

    err_msg = "invalid size: "
    with pytest.raises(LNMsgValueError, match=err_msg):
        bytes_from_octets(b"\x00\x01", 3)
    with pytest.raises(LNMsgValueError, match=err_msg):
        bytes_from_octets("0001", (1, 3))


def test_bytes_from_string() -> None:
    assert bytes_from_string("hello") == b"hello"
    assert bytes_from_string(b"hello") == b"hello"
    assert bytes_from_string(bytearray(b"hello")) == b"hello"
    assert bytes_from_string("€") == b"\xe2\x82\xac"
