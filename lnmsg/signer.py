#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Signing authority contract.

The private key is held by a signing authority
(e.g. a hardware or software custody process)
living behind a separate trust boundary:
lnmsg never signs by itself, it only sends a request
and interprets the reply.

The request is the raw message: the authority is trusted
to apply the very same

    SHA256(SHA256("Lightning Signed Message:" + msg))

construction (see lnmsg.hashes.magic_message) exactly once.

The reply is a recoverable signature laid out as

    [32-bytes r][32-bytes s][1-byte rec_id]

i.e. the libsecp256k1 wire layout of a recoverable signature
(note that rec_id comes last and is not offset by 31 here).

An authority that fails, hangs beyond the configured timeout,
or replies with something that is not a recoverable signature
is a fatal failure for the current signing operation:
it is reported as SignerUnavailableError and never retried.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from btclib.ec import bytes_from_point
from btclib.ecc import dsa
from btclib.to_prv_key import PrvKey

from lnmsg import envelope
from lnmsg.exceptions import (
    LNMsgValueError,
    SignerTimeoutError,
    SignerUnavailableError,
)
from lnmsg.hashes import magic_message

logger = logging.getLogger(__name__)

REPLY_SIZE = envelope.COMPACT_SIZE + 1
_WORKER_NAME = "signing-authority"


class SigningAuthority(ABC):
    """Holder of the private key, one method: sign a message.

    Implementations receive the raw message bytes
    and must return the recoverable signature reply bytes.
    """

    @abstractmethod
    def sign_message(self, msg: bytes) -> bytes:
        ...


class PrivateKeySigningAuthority(SigningAuthority):
    """In-process signing authority holding a private key.

    It is meant for tests (with a known key)
    and for embedders providing their own key custody.
    """

    def __init__(self, prv_key: PrvKey) -> None:
        self._q, Q = dsa.gen_keys(prv_key)
        self._Q = Q
        self.pub_key = bytes_from_point(Q)

    def sign_message(self, msg: bytes) -> bytes:
        msg_hash = magic_message(msg)
        dsa_sig = dsa.sign_(msg_hash, self._q)

        # now calculate the rec_id
        pub_keys = dsa.recover_pub_keys_(msg_hash, dsa_sig)
        rec_id = pub_keys.index(self._Q)

        sig = envelope.Sig(rec_id, dsa_sig)
        return sig.compact + rec_id.to_bytes(1, byteorder="big", signed=False)


def parse_reply(reply: bytes) -> envelope.Sig:
    "Interpret the signing authority reply, raising if malformed."

    if not isinstance(reply, (bytes, bytearray)):
        err_msg = f"signing authority gave bad reply type: {type(reply).__name__}"
        raise SignerUnavailableError(err_msg)
    if len(reply) != REPLY_SIZE:
        err_msg = f"signing authority gave bad reply: {bytes(reply).hex()}"
        raise SignerUnavailableError(err_msg)
    try:
        return envelope.Sig.from_compact(reply[:-1], reply[-1])
    except LNMsgValueError as e:
        err_msg = f"signing authority gave bad reply: {bytes(reply).hex()}"
        raise SignerUnavailableError(err_msg) from e


class SigningAuthorityClient:
    """Synchronous client of a signing authority.

    With timeout=None the exchange blocks until the authority replies:
    a hung authority hangs the caller.
    A timeout in seconds runs the exchange on a daemon worker thread
    and gives up with SignerTimeoutError when it expires;
    the abandoned exchange is not cancelled, but it does not keep
    the interpreter alive at exit.
    """

    def __init__(
        self, authority: SigningAuthority, timeout: Optional[float] = None
    ) -> None:
        if timeout is not None and timeout <= 0:
            raise LNMsgValueError(f"invalid timeout: {timeout}")
        self.authority = authority
        self.timeout = timeout

    def _exchange(self, msg: bytes) -> bytes:
        if self.timeout is None:
            return self.authority.sign_message(msg)

        outcome: Dict[str, Any] = {}

        def exchange() -> None:
            try:
                outcome["reply"] = self.authority.sign_message(msg)
            except Exception as e:  # pylint: disable=broad-except
                outcome["error"] = e

        # daemon: a hung authority must not block interpreter exit
        worker = threading.Thread(target=exchange, name=_WORKER_NAME, daemon=True)
        worker.start()
        worker.join(self.timeout)
        if worker.is_alive():
            logger.warning("signing authority timed out after %ss", self.timeout)
            err_msg = f"signing authority timed out after {self.timeout}s"
            raise SignerTimeoutError(err_msg)
        if "error" in outcome:
            raise outcome["error"]
        return outcome["reply"]

    def sign_message(self, msg: bytes) -> envelope.Sig:
        "Ask the signing authority for a recoverable signature of msg."

        logger.debug("sending %d bytes message to signing authority", len(msg))
        try:
            reply = self._exchange(msg)
        except SignerUnavailableError:
            raise
        except Exception as e:  # pylint: disable=broad-except
            logger.error("could not reach signing authority: %s", e)
            err_msg = f"could not reach signing authority: {e}"
            raise SignerUnavailableError(err_msg) from e

        try:
            return parse_reply(reply)
        except SignerUnavailableError as e:
            logger.error("%s", e)
            raise
