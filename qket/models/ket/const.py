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

from qket.models.core import COMPLEX_ONE, COMPLEX_ZERO
from qket.models.ket.ket import Ket

KET_ZERO = Ket(COMPLEX_ONE, COMPLEX_ZERO)
"""Ket ``[1, 0]``, analogous to the classical bit 0. Has the symbol ``|0>``."""
KET_ONE = Ket(COMPLEX_ZERO, COMPLEX_ONE)
"""Ket ``[0, 1]``, analogous to the classical bit 1. Has the symbol ``|1>``."""
