# SPDX-FileCopyrightText: 2025-present dbg contributors
#
# SPDX-License-Identifier: MIT

__version__ = "0.1.0"
