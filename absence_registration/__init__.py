# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence registration with a Danish holiday balance and transfer engine."""

__version__ = "0.1.0"
