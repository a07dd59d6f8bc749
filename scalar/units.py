#!/usr/bin/env python

"""
Copyright (c) 2006, Russell A. Paielli <http://RussP.us>
All rights reserved.

See license file for terms of license.

This file implements the SI (System Internationale) metric system of
units and the commonly used non-metric units needed by the estimates.
Physical constants are the CODATA values from scipy.constants.

The units defined in this file are based on the information from the
following websites:

http://physics.nist.gov/cuu/Units/units.html
http://www.bipm.org/en/si/
"""

from scipy import constants as spc

from scalar import dimension as dim
from scalar.dimension import unit_type
from scalar.scalar import unit, one, floor, convert, AsUnit, DimensionMismatch

# SI base units:

SEC = second     = unit("s", dim.T)   # time
M = mtr = meter  = unit("m", dim.L)   # length
KG = kilogram    = unit("kg", dim.M)  # mass
A = amp = ampere = unit("A", dim.I)   # electric current
K = kel = kelvin = unit("K", dim.Th)  # temperature
mol = mole       = unit("mol", dim.N) # amount of substance
cd = candela     = unit("cd", dim.J)  # luminous intensity

# Dimensionless:

percent = PCT = unit("%", one / 100) # percent (efficiencies, drag factors)

# Common scaled variations of base units:

ms = millisecond = unit("ms", SEC/1000) # time
MM = millimeter  = unit("mm", M/1000)   # length
cm = centimeter  = unit("cm", M/100)    # length
km = kilometer   = unit("km", 1000*M)   # length
g  = GRAM        = unit("g" , KG/1000)  # mass
mg = milligram   = unit("mg", g/1000)   # mass
mA = milliampere = unit("mA", A/1000)   # electric current

# Derived units with special names and symbols:

HZ  = hertz = unit("Hz", 1./SEC) # frequency
N   = newton = unit("N", KG*M/SEC**2) # force
Pa  = pascal = unit("Pa", N/M**2) # pressure
J   = joule = unit("J", N*M) # energy, work, or quantity of heat
W   = WATT = unit("W", J/SEC) # power
C   = coulomb = unit("C", A*SEC) # electric charge
V   = volt = unit("V", W/A) # electric potential
OHM = unit("ohm", V/A) # electric resistance

# Common scaled variations of derived units:

kN  = kilonewton = unit("kN", 1000 * N) # force
hPa = hectopascal = unit("hPa", 100 * Pa) # pressure
kPa = kilopascal = unit("kPa", 1000 * Pa) # pressure
MPa = megapascal = unit("MPa", 1000000 * Pa) # pressure
kJ  = kilojoule = unit("kJ", 1000 * J) # energy
MJ  = megajoule = unit("MJ", 1000 * kJ) # energy
mW  = milliwatt = unit("mW", W/1000) # power
kW  = kilowatt = unit("kW", 1000 * W) # power
MW  = megawatt = unit("MW", 1000 * kW) # power

# other common units (including non-metric):

MIN = minute = unit("min", 60 * SEC) # time
HR  = hour = unit("h", 60 * MIN) # time
DAY = day = unit("d", 24 * HR) # time

IN  = inch = unit("in", spc.inch * M) # length
FT  = feet = unit("ft", spc.foot * M) # length
mi  = mile = unit("mi", spc.mile * M) # US/UK statute mile: length

L = liter = litre = unit("l", spc.liter * M**3) # volume (usually of liquid)
mL = milliliter = unit("ml", L/1000) # volume

LBM = pound = unit("lb", spc.pound * KG) # pound mass
OZM = ounce = unit("oz", spc.ounce * KG) # ounce mass

BAR = unit("bar", spc.bar * Pa) # bar: pressure
ATM = atm = unit("atm", spc.atm * Pa) # standard atmosphere: pressure
PSI = unit("psi", spc.psi * Pa) # pounds per square inch: pressure

Wh  = unit("Wh", W * HR) # Watt-hour: energy
kWh = unit("kWh", 1000 * Wh) # kilowatt-hour: energy

ddegC = unit("delta_degC", K) # (delta) degrees Celsius: temperature difference
degC = unit("degC", K, offset=spc.zero_Celsius, delta=ddegC) # degrees Celsius: temperature (point)

# Physical constants:

gacc = unit("gacc", spc.g * M/SEC**2) # standard gravitational acceleration
kB   = spc.k * J/K                    # Boltzmann constant
NA   = spc.N_A / mol                  # Avogadro constant
Rgas = kB * NA                        # universal (molar) gas constant


unit_type(M**2, "area")
unit_type(M**3, "volume")
unit_type(M/SEC, "speed")
unit_type(M/SEC**2, "acceleration")
unit_type(KG/M**3, "mass density")
unit_type(K/SEC, "heating rate")

unit_type(HZ, "frequency")
unit_type(N, "force")
unit_type(Pa, "pressure")
unit_type(J, "energy")
unit_type(W, "power")
unit_type(C, "electric charge")
unit_type(V, "electric potential")
unit_type(OHM, "electric resistance")

unit_type(W/M**2, "irradiance")
unit_type(W/KG, "specific power")
unit_type(J/K, "heat capacity or entropy")
unit_type(J/(KG*K), "specific heat capacity")
unit_type(J/KG, "specific energy")
unit_type(J/mol, "molar energy")
unit_type(J/(mol*K), "molar entropy")
unit_type(KG/mol, "molar mass")
unit_type(KG/M**2, "area density")
unit_type(M**3/SEC, "volume flow rate")
