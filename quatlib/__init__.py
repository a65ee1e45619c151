# -*- coding: utf-8 -*-
"""
author: John Bass
email: john.bobzwik@gmail.com
license: MIT
Please feel free to use and modify this, but keep the above information. Thanks!
"""

from quatlib.config import DEFAULT_TOLERANCE
from quatlib.quaternion import Quaternion, DegenerateQuaternionError
from quatlib.quaternionFunctions import (
    quatConjugate, quatInverse, quatMultiply, quatNorm, quatSquareNorm, vectNormalize
)

__version__ = "0.1.0"
