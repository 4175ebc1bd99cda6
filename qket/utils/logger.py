#    SimQN: a discrete-event simulator for the quantum networks
#    Copyright (C) 2021-2022 Lutong Chen, Jian Li, Kaiping Xue
#    University of Science and Technology of China, USTC.
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.

import os
import sys
from logging import Logger, LoggerAdapter, StreamHandler, getLogger
from typing import Literal, cast, override


class CustomAdapter(LoggerAdapter):
    def __init__(self, logger: Logger):
        super().__init__(logger)
        self._label: str | None = None

    @override
    def process(self, msg, kwargs):
        if self._label:
            msg = f"[{self._label}] {msg}"
        return msg, kwargs

    def install(self, label: str | None):
        """
        Prepend a context label to log entries, or remove it with ``None``.
        """
        self._label = label

    def set_default_level(self, dflt_level: Literal["CRITICAL", "FATAL", "ERROR", "WARN", "INFO", "DEBUG"]):
        """
        Configure logging level.

        If `QKET_LOGLVL` environment variable contains a valid log level, it is used.
        Otherwise, `dflt_level` is used as the logging level.
        """
        try:
            env_level = os.getenv("QKET_LOGLVL", dflt_level)
            self.setLevel(env_level)
        except ValueError:  # QKET_LOGLVL is not a valid level
            self.setLevel(dflt_level)


log = CustomAdapter(getLogger("qket"))
"""
The default ``logger`` used by QKet.
"""

log.set_default_level("INFO")
cast(Logger, log.logger).addHandler(StreamHandler(sys.stdout))
