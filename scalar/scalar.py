#!/usr/bin/env python

"""
Copyright (c) 2006, Russell A. Paielli <http://RussP.us>
All rights reserved.

See license file for terms of license.

This script implements scalar physical quantities with units. A quantity
is a number (or numpy array) paired with a unit; every unit inhabits a
dimension (see dimension.py) and carries a ratio to the coherent unit of
that dimension, so quantities of the same dimension convert transparently
while quantities of different dimension can never be added, subtracted,
compared or converted.
"""

import math
import numbers

import numpy as npy

from scalar.dimension import Dimension, DIMLESS, base_dimension, unit_type, _rational


class DimensionMismatch(Exception): pass # operands do not share a dimension
class BadUnitName(Exception): pass # unit symbol would print ambiguously
class UnitRedefined(Exception): pass # unit symbol declared twice

named_units = {} # symbol -> _unit of every declared unit

_BAD_CHARS = set("*/() \t\n") # characters reserved for printing compound units


def _divide(a, b):
    "true division with IEEE semantics (x/0 gives inf or nan, never an exception)"

    with npy.errstate(divide="ignore", invalid="ignore"):
        return npy.true_divide(a, b)


def _power(num, exp):
    "raise a magnitude to a power with IEEE semantics"

    if exp == 1: return num
    if isinstance(exp, numbers.Rational) and exp.denominator == 1 and exp > 0:
        return num ** int(exp)

    with npy.errstate(divide="ignore", invalid="ignore"):
        return npy.power(npy.asarray(num, dtype=float) if isinstance(num, npy.ndarray)
                         else npy.float64(num), float(exp))


def _istr(x):
    "modified str function, prints integer floats as ints"

    flt = float(x)
    if math.isfinite(flt) and flt == int(flt): return str(int(flt))
    return str(x)


def _exp_str(exp):

    if exp.denominator == 1: return str(exp.numerator)
    return "(" + str(exp) + ")"


class _named(object):
    "definition of a named unit: symbol, dimension, ratio, offset and origin"

    def __init__(self, symbol, dim, ratio, offset=0, origin=None, delta=None):

        self.symbol = symbol
        self.dim = dim
        self.ratio = float(ratio)
        self.offset = offset
        self.origin = dict(origin) if origin else {}
        self.delta = delta # unit of the difference of two points (affine units)

    def __repr__(self): return "<unit " + self.symbol + ">"


class _unit(object):
    "a named unit or a canonical product of named units raised to rational powers"

    __array_ufunc__ = None # make numpy arrays defer to __rmul__ and friends

    def __init__(self, factors=None):

        clean = {}
        for named, exp in (factors or {}).items():
            exp = _rational(exp)
            if exp: clean[named] = exp

        dim = DIMLESS
        ratio = 1.0
        origin = {}

        for named, exp in clean.items():
            dim = dim * named.dim ** exp
            ratio *= named.ratio ** exp
            for root, e in named.origin.items():
                origin[root] = origin.get(root, 0) + e * exp

        #
        # An offset only applies to an affine unit used on its own. Inside a
        # compound expression it behaves like its difference unit.
        #
        items = list(clean.items())
        point = items[0][0] if len(items) == 1 and items[0][1] == 1 else None

        object.__setattr__(self, "_factors", clean)
        object.__setattr__(self, "dim", dim)
        object.__setattr__(self, "ratio", ratio)
        object.__setattr__(self, "origin", dict((root, e) for root, e in origin.items() if e))
        object.__setattr__(self, "offset", point.offset if point else 0)
        object.__setattr__(self, "delta", point.delta if point else None)

    def __setattr__(self, key, value):
        raise AttributeError("units are immutable")

    @property
    def symbol(self):
        "construct unit string for output"

        num = [(n, e) for n, e in self._factors.items() if e > 0] # numerator first
        den = [(n, -e) for n, e in self._factors.items() if e < 0]

        def term(named, exp):
            return named.symbol if exp == 1 else named.symbol + "**" + _exp_str(exp)

        out = "*".join(term(n, e) for n, e in num)
        if not den: return out

        if not num: out = "1"
        if len(den) == 1: return out + "/" + term(*den[0])
        return out + "/(" + "*".join(term(n, e) for n, e in den) + ")"

    def convertible(self, other):
        "true if quantities in self can be expressed in other"

        return self.dim == other.dim and self.origin == other.origin

    def is_dimensionless(self):
        return self.dim.is_dimensionless()

    def _combine(self, other, sign):

        factors = dict(self._factors)
        for named, exp in other._factors.items():
            factors[named] = factors.get(named, 0) + sign * exp

        return _unit(factors)

    def __mul__(self, other):

        if isinstance(other, _unit): return self._combine(other, 1)
        if isinstance(other, _scalar): return _scalar(other.num, self._combine(other.unit, 1))
        if _is_numeric(other): return _scalar(other, self)

        return NotImplemented

    def __rmul__(self, other):

        if _is_numeric(other): return _scalar(other, self)
        return NotImplemented

    def __truediv__(self, other):

        if isinstance(other, _unit): return self._combine(other, -1)
        if isinstance(other, _scalar): return _scalar(_divide(1, other.num), self._combine(other.unit, -1))
        if _is_numeric(other): return _scalar(_divide(1, other), self)

        return NotImplemented

    def __rtruediv__(self, other):

        if _is_numeric(other): return _scalar(other, self ** -1)
        return NotImplemented

    def __pow__(self, exp):

        exp = _rational(exp)
        return _unit(dict((named, e * exp) for named, e in self._factors.items()))

    def __eq__(self, other):

        if not isinstance(other, _unit): return NotImplemented
        return self._factors == other._factors

    def __ne__(self, other):

        result = self.__eq__(other)
        if result is NotImplemented: return result
        return not result

    def __hash__(self):
        return hash(frozenset((id(n), e) for n, e in self._factors.items()))

    def __str__(self): return self.symbol

    def __repr__(self): return "unit(" + (self.symbol or "1") + ")"


one = _unit() # the dimensionless unit


class _scalar(object):
    "scalar physical quantities with units"

    __array_ufunc__ = None # keep numpy from broadcasting over a scalar

    DimensionMismatch = DimensionMismatch
    InconsistentUnits = DimensionMismatch
    BadUnitName = BadUnitName

    def __init__(self, num=1, unit=one): # constructor

        object.__setattr__(self, "num", num) # number: float, int or numpy array
        object.__setattr__(self, "unit", unit)

    def __setattr__(self, key, value):
        raise AttributeError("quantities are immutable")

    @property
    def dim(self): return self.unit.dim

    def __bool__(self): # for "truth-value" testing
        return bool(self.num)

    def __float__(self): # conversion to float (only for dimensionless quantities)
        return float(convert(self.num, self.unit, one))

    def __int__(self): # conversion to int, truncating (only for dimensionless quantities)
        return int(convert(self.num, self.unit, one))

    def __str__(self): # conversion to string for "print" output
        return AsUnit(self)

    def __repr__(self): # string "representation"

        if not self.unit.symbol: return repr(self.num)
        return repr(self.num) + " * " + self.unit.symbol

    def __format__(self, spec): # format(q, ".3f") formats the number

        if not spec: return str(self)

        out = format(self.num, spec)
        return out + " " + self.unit.symbol if self.unit.symbol else out

    def asUnit(self, unit):
        "the same quantity expressed in unit"

        if unit == self.unit: return self
        return _scalar(convert(self.num, self.unit, unit), unit)

    def asNumber(self, unit=None):
        "the number of this quantity in unit (default: its own unit)"

        if unit is None: return self.num
        return convert(self.num, self.unit, unit)

    def checkunits(self, other):
        "assert consistent units for operations"

        if not self.unit.convertible(_unit_of(other)):
            raise DimensionMismatch(_mismatch(self.unit, _unit_of(other)))

    # -- Methods to put any indexable type as scalar's num -----------

    def __getitem__(self, index):
        ''' returns a _scalar having the same unit as self,
            with a value being self's value sliced to index
        '''
        if hasattr(self.num, '__len__'):
            return _scalar(self.num[index], self.unit)
        elif index == 0 or index == -1:
            return _scalar(self.num, self.unit)
        else:
            raise IndexError

    def __len__(self):
        ''' returns the length of self's value
        '''
        if hasattr(self.num, '__len__'):
            return len(self.num)
        raise TypeError("scalar with a single value has no len()")

    def __neg__(self): # unary -
        return _scalar(-self.num, self.unit)

    def __pos__(self): # unary +
        return self

    def __abs__(self): # absolute value
        return _scalar(abs(self.num), self.unit)

    def __add__(self, other): # +

        if _is_plain_zero(other): return self
        if not _is_operand(other): return NotImplemented

        # a point (degC) plus a difference stays a point
        if _unit_of(other).offset:
            if self.unit.offset:
                raise DimensionMismatch("cannot add two points in " + _describe(self.unit))
            return _as_scalar(other) + self

        return _scalar(self.num + _diff_in(other, self.unit), self.unit)

    def __radd__(self, other):

        if _is_plain_zero(other): return self
        if not _is_operand(other): return NotImplemented

        return _as_scalar(other) + self

    def __sub__(self, other): # -

        if _is_plain_zero(other): return self
        if not _is_operand(other): return NotImplemented

        # the difference of two points is expressed in the difference unit
        if _unit_of(other).offset:
            if not self.unit.offset:
                raise DimensionMismatch("cannot subtract a point in " + _describe(_unit_of(other)) +
                                        " from " + _describe(self.unit))
            if self.unit.delta is None:
                raise DimensionMismatch(_describe(self.unit) + " has no difference unit")

            num = self.num - _num_in(other, self.unit)
            return _scalar(num * (self.unit.ratio / self.unit.delta.ratio), self.unit.delta)

        return _scalar(self.num - _diff_in(other, self.unit), self.unit)

    def __rsub__(self, other):

        if _is_plain_zero(other): return -self
        if not _is_operand(other): return NotImplemented

        return _as_scalar(other) - self

    def __mul__(self, other): # *

        if isinstance(other, _scalar): return _scalar(self.num * other.num, self.unit * other.unit)
        if isinstance(other, _unit): return _scalar(self.num, self.unit * other)
        if _is_numeric(other): return _scalar(self.num * other, self.unit)

        return NotImplemented

    def __rmul__(self, other):

        if _is_numeric(other): return _scalar(other * self.num, self.unit)
        return NotImplemented

    def __truediv__(self, other): # /

        if isinstance(other, _scalar): return _scalar(_divide(self.num, other.num), self.unit / other.unit)
        if isinstance(other, _unit): return _scalar(self.num, self.unit / other)
        if _is_numeric(other): return _scalar(_divide(self.num, other), self.unit)

        return NotImplemented

    def __rtruediv__(self, other):

        if _is_numeric(other): return _scalar(_divide(other, self.num), self.unit ** -1)
        return NotImplemented

    def __pow__(self, exp): # **

        if not _is_numeric(exp): return NotImplemented

        # a pure number may be raised to any real power
        if self.unit.convertible(one):
            return _scalar(_power(convert(self.num, self.unit, one), exp), one)

        exp = _rational(exp)
        return _scalar(_power(self.num, exp), self.unit ** exp)

    def _compare(self, other):
        "number of other in self's unit, or None if other cannot be compared"

        if _is_plain_zero(other): return 0
        if not _is_operand(other): return None
        return _num_in(other, self.unit)

    def __eq__(self, other):

        num = self._compare(other)
        if num is None: return NotImplemented
        return self.num == num

    def __ne__(self, other):

        num = self._compare(other)
        if num is None: return NotImplemented
        return self.num != num

    def __lt__(self, other):

        num = self._compare(other)
        if num is None: return NotImplemented
        return self.num < num

    def __le__(self, other):

        num = self._compare(other)
        if num is None: return NotImplemented
        return self.num <= num

    def __gt__(self, other):

        num = self._compare(other)
        if num is None: return NotImplemented
        return self.num > num

    def __ge__(self, other):

        num = self._compare(other)
        if num is None: return NotImplemented
        return self.num >= num

    __hash__ = None

"""The following functions would normally be member functions, but they
must work on built-in numbers and numpy arrays also (which are treated
as dimensionless quantities)."""

def _is_numeric(x):
    return isinstance(x, (numbers.Number, npy.ndarray)) and not isinstance(x, bool)

def _is_operand(x):
    return isinstance(x, (_scalar, _unit)) or _is_numeric(x)

def _is_plain_zero(x):
    "a bare numeric zero is the additive identity for quantities of any unit"

    return isinstance(x, numbers.Number) and not isinstance(x, bool) and x == 0

def _num(x):

    if isinstance(x, _scalar): return x.num
    if isinstance(x, _unit): return 1
    return x

def _unit_of(x):

    if isinstance(x, _scalar): return x.unit
    if isinstance(x, _unit): return x
    return one

def _as_scalar(x):

    if isinstance(x, _scalar): return x
    return _scalar(_num(x), _unit_of(x))

def _num_in(x, unit):
    "number of x expressed in unit"

    return convert(_num(x), _unit_of(x), unit)

def _diff_in(x, unit):
    "number of x expressed in unit, as a difference (offsets do not apply)"

    from_unit = _unit_of(x)
    if from_unit == unit: return _num(x)

    if not from_unit.convertible(unit):
        raise DimensionMismatch(_mismatch(from_unit, unit))

    return _num(x) * (from_unit.ratio / unit.ratio)

def _describe(unit):
    return "'" + (unit.symbol or "1") + "' (" + unit_type(unit.dim) + ")"

def _mismatch(from_unit, to_unit):

    message = "cannot convert " + _describe(from_unit) + " to " + _describe(to_unit)
    if from_unit.dim == to_unit.dim:
        message += ": no conversion is defined between these units"
    return message

def convert(num, from_unit, to_unit):
    "convert a number from one unit to another unit of the same dimension"

    if from_unit == to_unit: return num

    if not from_unit.convertible(to_unit):
        raise DimensionMismatch(_mismatch(from_unit, to_unit))

    if from_unit.offset or to_unit.offset:
        return _divide(num * from_unit.ratio + from_unit.offset - to_unit.offset, to_unit.ratio)

    return num * (from_unit.ratio / to_unit.ratio)

def floor(x, unit=one):
    "convert x to unit and truncate toward zero (e.g. a count of items that fit)"

    num = _num_in(x, unit)

    if isinstance(num, npy.ndarray): num = npy.trunc(num)
    elif math.isfinite(num): num = int(num) # int() truncates toward zero
    return _scalar(num, unit)

def AsUnit(arg, unit=None, fmt=""):
    "format as '<number> <unit>' in the output unit with the numeric format fmt"

    if isinstance(arg, (list, tuple)): # for list types
        return "[" + ", ".join(AsUnit(x, unit, fmt) for x in arg) + "]"

    if unit is not None: arg = _as_scalar(arg).asUnit(unit)

    num = _num(arg)

    def fmtnum(x): return fmt % x if fmt else _istr(x)

    if isinstance(num, npy.ndarray): out = "[" + ", ".join(fmtnum(x) for x in num) + "]"
    else: out = fmtnum(num)

    symbol = _unit_of(arg).symbol
    return out + " " + symbol if symbol else out

def _declare(symbol, dim, ratio, offset=0, origin=None, isolated=False, delta=None):

    if not symbol or _BAD_CHARS & set(symbol):
        raise BadUnitName("unit symbols cannot be empty or contain '*', '/', "
                          "parentheses or whitespace: '" + symbol + "'")

    if symbol in named_units:
        raise UnitRedefined("unit '" + symbol + "' is already declared")

    if delta is not None and (delta.offset or delta.dim != dim):
        raise DimensionMismatch(_describe(delta) + " cannot measure differences of '" + symbol + "'")

    named = _named(symbol, dim, ratio, offset, origin, delta)
    if isolated: named.origin = {named: 1} # only convertible to itself

    named_units[symbol] = _unit({named: 1})
    return named_units[symbol]

def unit(name, equiv=DIMLESS, ratio=1, offset=0, delta=None):
    """
    create a named physical unit

        unit("m", L)                 - coherent unit of the dimension L
        unit("km", 1000 * M)         - scaled from an existing unit
        unit("degC", K, offset=273.15, delta=ddegC) - affine (point) unit
                                       whose differences are in ddegC
    """

    if isinstance(equiv, Dimension):
        return _declare(name, equiv, ratio, offset, delta=delta)

    equiv = _as_scalar(equiv)
    return _declare(name, equiv.dim, ratio * equiv.num * equiv.unit.ratio, offset, equiv.unit.origin,
                    delta=delta)

class _kind(object):
    """
    An application-declared base dimension (such as currency) and the
    units of that kind. Units minted without an equivalent are only
    convertible to themselves, so EUR and USD share a dimension but an
    amount in one can never silently become an amount in the other.
    """

    def __init__(self, symbol, name):

        self.name = name
        self.dim = base_dimension(symbol, name)

    def unit(self, symbol, equiv=None):
        "create a unit of this kind, optionally as a fixed multiple of another one"

        if equiv is None: return _declare(symbol, self.dim, 1, isolated=True)

        equiv = _as_scalar(equiv)
        if equiv.dim != self.dim:
            raise DimensionMismatch(_describe(equiv.unit) + " is not a unit of " + self.name)

        return _declare(symbol, self.dim, equiv.num * equiv.unit.ratio, origin=equiv.unit.origin)

def kind(symbol, name):
    "declare a new base dimension outside the physical system"
    return _kind(symbol, name)

def kind_unit(symbol, of_kind):
    "create a unit of a kind"
    return of_kind.unit(symbol)

def declare_kind(symbol, name):
    "declare a kind, returning it together with its unit factory"

    new_kind = _kind(symbol, name)
    return new_kind, new_kind.unit
