#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the slip13 package."

name = "slip13"
__version__ = "2026.10.19"
__author__ = "The slip13 developers"
__author_email__ = "devs@slip13.org"
__copyright__ = "Copyright (C) 2020-2026 The slip13 developers"
__license__ = "MIT License"
