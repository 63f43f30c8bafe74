"""Shared helpers for Debate Pairing."""

# Debate Pairing
# Copyright (C) 2025  Debate Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os

from debatepairing.constants import LOG_LEVEL_ENV_VAR

_PACKAGE_LOGGER = "debatepairing"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_package_logger() -> logging.Logger:
    root = logging.getLogger(_PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package logger.

    The package logger gets a single stream handler the first time any module
    asks for a logger; its level comes from ``DEBATEPAIRING_LOG_LEVEL``.
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Change the package log level at runtime (used by the CLI)."""
    _configure_package_logger().setLevel(level.upper())
