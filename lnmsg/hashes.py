#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

A Lightning signed message commits to

    SHA256(SHA256("Lightning Signed Message:" + msg))

with no separator between the prefix and the message
and no length prefix (unlike Bitcoin message signing).
The same digest is computed by signer and verifier:
any difference here silently breaks interoperability.
"""

from __future__ import annotations

import hashlib

from lnmsg.alias import Octets, String
from lnmsg.exceptions import InputTooLargeError
from lnmsg.utils import bytes_from_octets, bytes_from_string

MAGIC_PREFIX = b"Lightning Signed Message:"
# protocol safety limit, not a cryptographic one
MAX_MESSAGE_SIZE = 65535


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash256(octets: Octets) -> bytes:
    """Return the SHA256(SHA256(*)) of the input octet sequence."""
    return sha256(sha256(octets))


def message_bytes(msg: String) -> bytes:
    """Return the message as bytes, enforcing the size limit."""
    msg = bytes_from_string(msg)
    if len(msg) > MAX_MESSAGE_SIZE:
        err_msg = f"message too large: {len(msg)} bytes"
        err_msg += f" instead of at most {MAX_MESSAGE_SIZE}"
        raise InputTooLargeError(err_msg)
    return msg


def magic_message(msg: String) -> bytes:
    """Return the 32-bytes digest signed for a Lightning message.

    No size limit here: it is enforced at signing time only,
    so that longer messages signed elsewhere can still be verified.
    """
    return hash256(MAGIC_PREFIX + bytes_from_string(msg))
