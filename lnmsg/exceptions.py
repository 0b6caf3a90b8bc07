#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

They are meant to discriminate between Exceptions being raised
by lnmsg from those raised by other codebase
(e.g. the btclib elliptic curve primitives).

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the lnmsg versions are derived.

Structural problems with the input (bad zbase32 alphabet,
wrong decoded length, bad recovery id, unparsable signature,
bad public key, oversized message) are ValueErrors;
a failing signing authority is a RuntimeError.
A signature that does not match the claimed public key
is not an error: verify returns False.
"""


class LNMsgValueError(ValueError):
    pass


class LNMsgTypeError(TypeError):
    pass


class LNMsgRuntimeError(RuntimeError):
    pass


class InputTooLargeError(LNMsgValueError):
    pass


class InvalidEncodingError(LNMsgValueError):
    """A character outside the zbase32 alphabet."""

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"invalid zbase32 character {char!r} at position {position}")


class WrongEnvelopeLengthError(LNMsgValueError):
    def __init__(self, length: int, required: int) -> None:
        self.length = length
        self.required = required
        self.too_short = length < required
        err_msg = f"zbase is too {'short' if self.too_short else 'long'}: "
        err_msg += f"{length} bytes instead of {required}"
        super().__init__(err_msg)


class InvalidRecoveryIdError(LNMsgValueError):
    pass


class SignatureUnparsableError(LNMsgValueError):
    pass


class InvalidPublicKeyError(LNMsgValueError):
    pass


class VerificationMismatchError(LNMsgRuntimeError):
    pass


class SignerUnavailableError(LNMsgRuntimeError):
    pass


class SignerTimeoutError(SignerUnavailableError):
    pass
