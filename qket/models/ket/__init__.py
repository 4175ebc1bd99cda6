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

from qket.models.ket.const import KET_ONE, KET_ZERO
from qket.models.ket.ket import Ket, ValidQuantumState, add, check_ket, equals, is_valid, scale

__all__ = [
    "KET_ONE",
    "KET_ZERO",
    "Ket",
    "ValidQuantumState",
    "add",
    "check_ket",
    "equals",
    "is_valid",
    "scale",
]
