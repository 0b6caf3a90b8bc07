#!/usr/bin/env python3

# Copyright (C) The lnmsg developers
#
# This file is part of lnmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lnmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the lnmsg package."

name = "lnmsg"
__version__ = "2026.10.19"
__author__ = "The lnmsg developers"
__author_email__ = "devs@lnmsg.org"
__copyright__ = "Copyright (C) 2026 The lnmsg developers"
__license__ = "MIT License"
