#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "02cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
# "02 cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
#
# use lnmsg.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for compressed public keys (33 bytes),
# digests (32 bytes), compact signatures (64 bytes),
# signature envelopes (65 bytes), and zbase32 encoder input
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be signed
#    if isinstance(msg, str):
#        msg = msg.encode()
#
# or 'ascii' strings like zbase32 signatures:
# "d75ytzcdx1ydpruhyktrks5s4xt5rf3rtj7wd7d9..."
#
# Messages are never stripped: leading/trailing blanks are signed too.
# zbase32 strings are not stripped either, as blanks are not in the alphabet.
String = Union[bytes, str]
