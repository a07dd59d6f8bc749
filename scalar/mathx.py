#!/usr/bin/env python

"This file extends the math functions to scalar quantities with units."

import numpy as npy

from scalar.scalar import convert, one, _num, _unit_of


def sqrt(x): return x**0.5 # sqrt for scalar, float and array

def exp(x):
    "exp of a dimensionless scalar, float or array"

    return npy.exp(convert(_num(x), _unit_of(x), one))

def hypot(x, y):
    "length of the hypotenuse for two quantities of the same dimension"

    return sqrt(x*x + y*y)
