"""
A collection of standard atmosphere functions

Temperature falls linearly with altitude in the troposphere. Pressure is
available from two barometric models:

    PressureAt      - exponential (isothermal) barometric formula
    PressureLapseAt - power-law barometric formula with a temperature lapse rate

Both agree at sea level and both fall monotonically with altitude.
"""

import numpy as npy
import matplotlib.pyplot as pyl

from scalar.units import M, K, Pa, KG, mol, km, gacc, Rgas, ATM
from scalar.scalar import one
from scalar.mathx import exp
from Estimator.ESReportBase import ESReportBase

#
# Standard Atmosphere Functions
#

# Sea level conditions
Tsl   = 288.15 * K           # Temperature
Psl   = 101325 * Pa          # Pressure
Lapse = 0.0065 * K/M         # Temperature lapse rate
Mair  = 0.0289644 * KG/mol   # Molar mass of dry air
g     = 1 * gacc             # Standard gravity

# Temperature
def TemperatureAt(h):
    """
    Computes temperature

    Inputs:
        h - Altitude
    """
    return Tsl - Lapse*h

# Pressure
def PressureAt(h):
    """
    Computes pressure with the exponential barometric formula

    Inputs:
        h - Altitude
    """
    return Psl * exp(-(g*h*Mair)/(Tsl*Rgas))

def PressureLapseAt(h):
    """
    Computes pressure with the power-law barometric formula

    Inputs:
        h - Altitude
    """
    return Psl * (1 - Lapse*h/Tsl) ** float(g*Mair/(Rgas*Lapse))

# Density
def DensityAt(h, Pressure = PressureAt):
    """
    Computes air density at altitude from the ideal gas law

    Inputs:
        h        - Altitude
        Pressure - The pressure model
    """
    return Pressure(h)*Mair/(Rgas*TemperatureAt(h))

#===============================================================================
def Report(Alts = (0*M, 500*M, 1000*M, 1500*M)):
    """
    Formats temperature, pressure and density at a list of altitudes

    Inputs:
        Alts - Altitudes
    """
    rows = []
    for h in Alts:
        rows += [('Altitude'         , h                 , M      , '%1.0f'),
                 ('Temperature'      , TemperatureAt(h)  , K      , '%1.2f'),
                 ('Pressure'         , PressureAt(h)     , Pa     , '%1.0f'),
                 ('Pressure (lapse)' , PressureLapseAt(h), Pa     , '%1.0f'),
                 ('Density'          , DensityAt(h)      , KG/M**3, '%1.4f'),
                 None]

    return ESReportBase().FormatReport('Standard Atmosphere', rows[:-1])

#===============================================================================
def PlotProfile(hmax = 11*km, n = 111, fig = 1):
    """
    Plots temperature, pressure and density ratios up to an altitude

    Inputs:
        hmax - Top altitude of the plot
        n    - Number of altitudes plotted
        fig  - Figure number
    """
    h = npy.linspace(0, hmax.asNumber(M), n) * M
    x = h.asNumber(km)

    rhosl = DensityAt(0*M)

    figure = pyl.figure(fig)
    pyl.plot(x, (TemperatureAt(h)/Tsl).asNumber(one),
             x, (PressureAt(h)/Psl).asNumber(one),
             x, (PressureLapseAt(h)/Psl).asNumber(one),
             x, (DensityAt(h)/rhosl).asNumber(one))
    pyl.xlabel("Altitude (km)")
    pyl.legend(["T", "P", "P (lapse)", "rho"])

    return figure

if __name__ == '__main__':

    print(Report())

    Alt = 0 * M
    print('Sea level pressure:', PressureAt(Alt).asUnit(ATM))

    PlotProfile()
    pyl.show()
