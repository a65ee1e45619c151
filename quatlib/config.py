# -*- coding: utf-8 -*-
"""
author: John Bass
email: john.bobzwik@gmail.com
license: MIT
Please feel free to use and modify this, but keep the above information. Thanks!
"""

# Tolerance for approximate comparisons made by callers (never used by ==)
DEFAULT_TOLERANCE = 1e-8

# Raise DegenerateQuaternionError instead of returning inf/nan when dividing by a zero quaternion
strictDegenerate = False
