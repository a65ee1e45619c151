# -*- coding: utf-8 -*-
"""
author: John Bass
email: john.bobzwik@gmail.com
license: MIT
Please feel free to use and modify this, but keep the above information. Thanks!
"""

import numpy as np

from quatlib.quaternion import checkDegenerate

# Quaternions as arrays: [qr, qi, qj, qk]

def quatSquareNorm(q):
    qr, qi, qj, qk = q
    return qr*qr + qi*qi + qj*qj + qk*qk

def quatNorm(q):
    return np.sqrt(quatSquareNorm(q))

# Normalize quaternion, or any vector
def vectNormalize(q):
    q = np.asarray(q, dtype=np.float64)
    checkDegenerate(q, "normalization")
    with np.errstate(divide='ignore', invalid='ignore'):
        return q / quatNorm(q)

# Quaternion multiplication, q on the left
def quatMultiply(q, p):
    qr, qi, qj, qk = q
    Q = np.array([
        [qr, -qi, -qj, -qk],
        [qi,  qr, -qk,  qj],
        [qj,  qk,  qr, -qi],
        [qk, -qj,  qi,  qr]
    ], dtype=np.float64)
    return Q @ np.asarray(p, dtype=np.float64)

def quatConjugate(q):
    return np.array([q[0], -q[1], -q[2], -q[3]], dtype=np.float64)

# Inverse quaternion
def quatInverse(q):
    square_norm = quatSquareNorm(q)
    checkDegenerate(q, "inverse")
    with np.errstate(divide='ignore', invalid='ignore'):
        return quatConjugate(q) * (np.float64(1.0) / np.float64(square_norm))
