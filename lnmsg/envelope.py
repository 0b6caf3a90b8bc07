#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Lightning signed message envelope.

The recoverable ECDSA signature is serialized in a
compact 65-bytes (fixed size) format:

    [1-byte header][32-bytes r][32-bytes s]

where the header is

    31 + rec_id

and rec_id (in the [0, 3] range) identifies which one of the
public keys recovered from (digest, r, s) is the signer's one.
The 31 offset is inherited from the compressed-key recovery flags
of Bitcoin message signing (27 + 4): it is a wire compatibility
requirement, so valid headers are in the [31, 34] range.

The envelope is then zbase32-encoded (104 characters)
to be copy-pasted by humans.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import Tuple, Type

from btclib.ec import secp256k1
from btclib.ecc import dsa

from lnmsg import zbase32
from lnmsg.alias import Octets, String
from lnmsg.exceptions import (
    InvalidRecoveryIdError,
    SignatureUnparsableError,
    WrongEnvelopeLengthError,
)
from lnmsg.utils import bytes_from_octets

REC_ID_OFFSET = 31
ENVELOPE_SIZE = 65
COMPACT_SIZE = 64


def _check_rec_id(rec_id: int) -> None:
    if not 0 <= rec_id < 4:
        raise InvalidRecoveryIdError(f"invalid recovery id: {rec_id}")


@dataclass(frozen=True)
class Sig:
    # recovery id, in [0, 3]
    rec_id: int
    dsa_sig: dsa.Sig
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        """Ensure the signature is structurally valid.

        Only overflowing scalars are rejected here: zero r or s,
        or an r that is not a valid x-coordinate,
        are left to fail at public key recovery time.
        """
        _check_rec_id(self.rec_id)
        ec = self.dsa_sig.ec
        if ec != secp256k1:
            raise SignatureUnparsableError(f"invalid curve: {ec.name}")
        if not 0 <= self.dsa_sig.r < ec.n:
            raise SignatureUnparsableError("scalar r not in 0..n-1")
        if not 0 <= self.dsa_sig.s < ec.n:
            raise SignatureUnparsableError("scalar s not in 0..n-1")

    @property
    def rf(self) -> int:
        "Header byte of the serialized envelope."
        return REC_ID_OFFSET + self.rec_id

    @property
    def compact(self) -> bytes:
        "Return the [32-bytes r][32-bytes s] compact signature."
        n_size = self.dsa_sig.ec.n_size
        return b"".join(
            [
                self.dsa_sig.r.to_bytes(n_size, byteorder="big", signed=False),
                self.dsa_sig.s.to_bytes(n_size, byteorder="big", signed=False),
            ]
        )

    def serialize(self, check_validity: bool = True) -> bytes:

        if check_validity:
            self.assert_valid()

        # [1-byte header][32-bytes r][32-bytes s]
        return self.rf.to_bytes(1, byteorder="big", signed=False) + self.compact

    def zbase32encode(self, check_validity: bool = True) -> str:
        """Return the envelope as zbase32-encoding.

        First off, the signature is serialized in the
        [1-byte header][32-bytes r][32-bytes s] format,
        then it is zbase32-encoded.
        """
        return zbase32.encode(self.serialize(check_validity))

    @classmethod
    def from_compact(
        cls: Type["Sig"], compact: Octets, rec_id: int, check_validity: bool = True
    ) -> "Sig":
        "Return a Sig from a 64-bytes compact signature and its recovery id."

        compact = bytes_from_octets(compact, COMPACT_SIZE)
        ec = secp256k1
        n_size = ec.n_size
        r = int.from_bytes(compact[:n_size], "big", signed=False)
        s = int.from_bytes(compact[n_size : 2 * n_size], "big", signed=False)
        dsa_sig = dsa.Sig(r, s, ec, check_validity=False)
        return cls(rec_id, dsa_sig, check_validity)

    @classmethod
    def parse(cls: Type["Sig"], data: Octets, check_validity: bool = True) -> "Sig":

        sig_bin = bytes_from_octets(data)
        if len(sig_bin) != ENVELOPE_SIZE:
            raise WrongEnvelopeLengthError(len(sig_bin), ENVELOPE_SIZE)

        rf = sig_bin[0]
        rec_id = rf - REC_ID_OFFSET
        if check_validity and not 0 <= rec_id < 4:
            raise InvalidRecoveryIdError(f"invalid recovery flag: {rf}")

        return cls.from_compact(sig_bin[1:], rec_id, check_validity)

    @classmethod
    def zbase32decode(
        cls: Type["Sig"], data: String, check_validity: bool = True
    ) -> "Sig":
        "Return the signature from its zbase32-encoded envelope."

        return cls.parse(zbase32.decode(data), check_validity)


def build_envelope(compact: Octets, rec_id: int) -> bytes:
    "Return the 65-bytes envelope of a compact signature."
    return Sig.from_compact(compact, rec_id).serialize()


def parse_envelope(data: Octets) -> Tuple[bytes, int]:
    "Return the (compact signature, recovery id) tuple of a 65-bytes envelope."
    sig = Sig.parse(data)
    return sig.compact, sig.rec_id
