#!/usr/bin/env python

"""
Copyright (c) 2006, Russell A. Paielli <http://RussP.us>
All rights reserved.

See license file for terms of license.

This file implements physical dimensions as immutable vectors of rational
exponents over a set of named base dimensions. Base dimensions are declared
once with base_dimension(); the physical ones are declared here, and an
application may declare its own (see kind() in scalar.py).
"""

from fractions import Fraction

_base_dimensions = {} # symbol -> name of every declared base dimension
_unit_types = {} # Dimension -> name of the physical type (area, speed, ...)


class DimensionRedefined(Exception): pass # symbol already declared with another name


def _rational(exp):
    "convert an exponent to an exact Fraction (floats must be simple fractions)"

    if isinstance(exp, Fraction): return exp
    if isinstance(exp, float):
        frac = Fraction(exp).limit_denominator(100)
        if abs(float(frac) - exp) > 1e-12:
            raise ValueError("exponent " + repr(exp) + " is not a simple fraction")
        return frac
    return Fraction(exp)


class Dimension(object):
    "immutable exponent vector over base dimension symbols"

    __slots__ = ("_exps",)

    def __init__(self, exps=None):

        exps = exps or {}
        clean = {}
        for sym, exp in exps.items():
            exp = _rational(exp)
            if exp: clean[sym] = exp # zero exponents are dropped

        object.__setattr__(self, "_exps", tuple(sorted(clean.items())))

    def __setattr__(self, key, value):
        raise AttributeError("Dimension is immutable")

    def exponents(self):
        "dictionary of base symbol -> Fraction exponent"
        return dict(self._exps)

    def is_dimensionless(self):
        return not self._exps

    def __mul__(self, other):

        exps = self.exponents()
        for sym, exp in other._exps:
            exps[sym] = exps.get(sym, 0) + exp

        return Dimension(exps)

    def __truediv__(self, other):

        exps = self.exponents()
        for sym, exp in other._exps:
            exps[sym] = exps.get(sym, 0) - exp

        return Dimension(exps)

    def __pow__(self, exp):

        exp = _rational(exp)
        return Dimension(dict((sym, e * exp) for sym, e in self._exps))

    def __eq__(self, other):

        if not isinstance(other, Dimension): return NotImplemented
        return self._exps == other._exps

    def __ne__(self, other):

        result = self.__eq__(other)
        if result is NotImplemented: return result
        return not result

    def __hash__(self):
        return hash(self._exps)

    def __str__(self):

        if not self._exps: return "1"

        parts = []
        for sym, exp in self._exps:
            if exp == 1: parts.append(sym)
            elif exp.denominator == 1: parts.append(sym + "^" + str(exp.numerator))
            else: parts.append(sym + "^(" + str(exp) + ")")

        return " ".join(parts)

    def __repr__(self):
        return "Dimension(" + str(self) + ")"


DIMLESS = Dimension() # dimensionless


def base_dimension(symbol, name):
    "declare a new independent base dimension"

    if symbol in _base_dimensions and _base_dimensions[symbol] != name:
        raise DimensionRedefined("base dimension '" + symbol + "' is already declared as '" +
                                 _base_dimensions[symbol] + "', not '" + name + "'")

    _base_dimensions[symbol] = name
    dim = Dimension({symbol: 1})
    _unit_types.setdefault(dim, name)

    return dim


def unit_type(dim, utype=""):
    "set or get the physical type of a dimension (time, length, etc.)"

    dim = getattr(dim, "dim", dim) # accept units and quantities too

    if utype: _unit_types[dim] = utype; return

    if dim.is_dimensionless(): return _unit_types.get(dim, "dimensionless")
    return _unit_types.get(dim, "unknown")

# SI base dimensions:

L  = base_dimension("L", "length")
M  = base_dimension("M", "mass")
T  = base_dimension("T", "time")
I  = base_dimension("I", "electric current")
Th = base_dimension("Th", "temperature")
N  = base_dimension("N", "amount of substance")
J  = base_dimension("J", "luminous intensity")
