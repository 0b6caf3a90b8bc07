#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Lightning signed message (signmessage/checkmessage).

A node proves control of its identity key by signing
an arbitrary short text message:

    zbase32(31 + rec_id || r || s)

where (r, s) is a recoverable ECDSA signature of

    SHA256(SHA256("Lightning Signed Message:" + msg))

One should never sign a vague statement that could be reused
out of the context it was intended for.

To verify the signature the verifier needs only the message,
the zbase32 string and the claimed public key:
(EC)DSA allows public key recovery, so the public key
identified by rec_id is recovered from the signature
and compared to the claimed one.

The signature is produced by a SigningAuthority,
i.e. the key never enters this module.

Error policy:

- structurally invalid input (oversized message, bad zbase32 alphabet,
  wrong decoded length, bad recovery flag, unparsable signature,
  bad public key encoding) raises a ValueError
- a failing signing authority raises SignerUnavailableError
- a valid signature that does not match the claimed public key
  (or that does not allow public key recovery at all)
  is not an error: verify returns False
"""

from __future__ import annotations

import hashlib
from typing import Dict, Optional, Union

from btclib.alias import Point
from btclib.ec import bytes_from_point, point_from_octets
from btclib.ecc import dsa
from btclib.exceptions import BTClibRuntimeError, BTClibValueError

from lnmsg.alias import Octets, String
from lnmsg.envelope import Sig
from lnmsg.exceptions import (
    InvalidPublicKeyError,
    LNMsgTypeError,
    VerificationMismatchError,
)
from lnmsg.hashes import magic_message, message_bytes
from lnmsg.signer import SigningAuthority, SigningAuthorityClient
from lnmsg.utils import bytes_from_octets

Signer = Union[SigningAuthority, SigningAuthorityClient]

_PUB_KEY_SIZE = 33


def _signing_client(signer: Signer) -> SigningAuthorityClient:
    if isinstance(signer, SigningAuthorityClient):
        return signer
    if isinstance(signer, SigningAuthority):
        return SigningAuthorityClient(signer)
    raise LNMsgTypeError(f"not a signing authority: {type(signer).__name__}")


def point_from_pub_key(pub_key: Octets) -> Point:
    "Return the point of a 33-bytes compressed public key."

    try:
        pub_key = bytes_from_octets(pub_key, _PUB_KEY_SIZE)
        if pub_key[0] not in (0x02, 0x03):
            raise InvalidPublicKeyError(f"not a compressed public key: {pub_key!r}")
        return point_from_octets(pub_key)
    except InvalidPublicKeyError:
        raise
    except ValueError as e:
        raise InvalidPublicKeyError(f"invalid public key: {e}") from e


def sign(msg: String, signer: Signer) -> Sig:
    """Return the recoverable signature of msg.

    The message size is checked before contacting the signing authority.
    """

    msg = message_bytes(msg)
    return _signing_client(signer).sign_message(msg)


def recover_pub_key(msg: String, sig: Union[Sig, String]) -> Optional[bytes]:
    """Return the compressed public key recovered from the signature.

    None is returned if public key recovery fails,
    i.e. the signature is parsable but mathematically invalid.
    """

    if isinstance(sig, Sig):
        sig.assert_valid()
    else:
        sig = Sig.zbase32decode(sig)

    msg_hash = magic_message(msg)
    # lower_s is not enforced: libsecp256k1 recovers high-s signatures too
    try:
        Q = dsa.recover_pub_key_(
            sig.rec_id, msg_hash, sig.dsa_sig, False, hashlib.sha256
        )
        return bytes_from_point(Q)
    except (BTClibValueError, BTClibRuntimeError):
        return None


def assert_as_valid(msg: String, sig: Union[Sig, String], pub_key: Octets) -> None:
    # It raises Errors, while verify returns False
    # if the signature does not match the public key

    Q = point_from_pub_key(pub_key)
    recovered_pub_key = recover_pub_key(msg, sig)
    if recovered_pub_key is None:
        raise VerificationMismatchError("public key recovery failed")
    if recovered_pub_key != bytes_from_point(Q):
        err_msg = f"public key mismatch: {recovered_pub_key.hex()}"
        raise VerificationMismatchError(err_msg)


def verify(msg: String, sig: Union[Sig, String], pub_key: Octets) -> bool:
    """Verify the signature of msg against the claimed public key.

    Only cryptographic failures yield False:
    structurally invalid input raises.
    """

    try:
        assert_as_valid(msg, sig, pub_key)
    except VerificationMismatchError:
        return False
    return True


def signmessage(msg: String, signer: Signer) -> Dict[str, str]:
    "Return the signmessage result: signature, recid, and zbase."

    sig = sign(msg, signer)
    return {
        "signature": sig.compact.hex(),
        "recid": sig.rec_id.to_bytes(1, byteorder="big", signed=False).hex(),
        "zbase": sig.zbase32encode(),
    }


def checkmessage(msg: String, zbase: String, pub_key: Octets) -> Dict[str, bool]:
    "Return the checkmessage result: verified."

    return {"verified": verify(msg, zbase, pub_key)}
