"""
Classes for estimating the power a quad-copter needs for a flight

The power is the sum of the power to hold the copter up against gravity at
altitude and the power to push it through the air at cruise speed.
"""

from Estimator.ESBase import ESBase, Mass, Area, Unitless, Velocity, Length
from Estimator.ESReportBase import ESReportBase
from Estimator.Atmosphere import DensityAt
from scalar.units import M, KG, SEC, cm, km, HR, W, kW, kWh, N, percent, gacc
from scalar.scalar import AsUnit
from scalar.mathx import sqrt

################################################################################
class Flight(ESBase):
    """
    A flight of a given distance at an altitude and cruise speed

    Attributes:
        Distance - Distance flown
        Alt      - Altitude
        Speed    - Cruise speed
    """
#===============================================================================
    def __init__(self):
        super(Flight, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Distance'] = 3000 * km       ; UnitList['Distance'] = Length
        self.__dict__['Alt']      = 1000 * M        ; UnitList['Alt']      = Length
        self.__dict__['Speed']    = 100 * km/HR     ; UnitList['Speed']    = Velocity

        self.NoneList['Time'] = None

#===============================================================================
    def _CalcTime(self):
        return self.Distance / self.Speed

#===============================================================================
    def WithDistance(self, Distance):
        """
        A copy of the flight over a different distance
        """
        Copy = self.copy()
        Copy.Distance = Distance
        return Copy

#===============================================================================
    def WithAltitude(self, Alt):
        """
        A copy of the flight at a different altitude
        """
        Copy = self.copy()
        Copy.Alt = Alt
        return Copy

#===============================================================================
    def WithSpeed(self, Speed):
        """
        A copy of the flight at a different speed
        """
        Copy = self.copy()
        Copy.Speed = Speed
        return Copy


################################################################################
class QuadCopter(ESBase, ESReportBase):
    """
    A quad-copter

    Attributes:
        Weight      - Take-off mass
        FrontalArea - Frontal area facing the flight direction
        ThrustEff   - Thrust needed as a fraction of the weight
        AeroEff     - Aerodynamic (propulsive) efficiency
        CD          - Drag coefficient of the frontal area
        ClimbSpeed  - Vertical speed used for the hover power
    """
#===============================================================================
    def __init__(self):
        super(QuadCopter, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Weight']      = 10 * KG            ; UnitList['Weight']      = Mass
        self.__dict__['FrontalArea'] = 30*cm * 30*cm      ; UnitList['FrontalArea'] = Area
        self.__dict__['ThrustEff']   = 130 * percent      ; UnitList['ThrustEff']   = Unitless
        self.__dict__['AeroEff']     = 70 * percent       ; UnitList['AeroEff']     = Unitless
        self.__dict__['CD']          = 60 * percent       ; UnitList['CD']          = Unitless
        self.__dict__['ClimbSpeed']  = 10 * M/SEC         ; UnitList['ClimbSpeed']  = Velocity

        self.NoneList['Thrust'] = None

#===============================================================================
    def _CalcThrust(self):
        """
        Thrust needed to carry the weight
        """
        return self.Weight * gacc * self.ThrustEff

#===============================================================================
    def PowerVertical(self, flight):
        """
        Power to hold the copter up, scaled by the thinning of the air

        Inputs:
            flight - The flight
        """
        rho0 = DensityAt(0*M)
        rho  = DensityAt(flight.Alt)

        return self.Thrust * self.ClimbSpeed / self.AeroEff * sqrt(rho0/rho)

#===============================================================================
    def PowerHorizontal(self, flight):
        """
        Power to overcome drag at cruise speed

        Inputs:
            flight - The flight
        """
        rho = DensityAt(flight.Alt)

        return 0.5 * self.CD * self.FrontalArea * rho * flight.Speed**3

#===============================================================================
    def Power(self, flight):
        """
        Total power for the flight

        Inputs:
            flight - The flight
        """
        return self.PowerVertical(flight) + self.PowerHorizontal(flight)

#===============================================================================
    def PowerRatio(self, flight):
        """
        Power needed per unit of mass
        """
        return self.Power(flight) / self.Weight

#===============================================================================
    def Energy(self, flight):
        """
        Energy consumed over the whole flight
        """
        return self.Power(flight) * flight.Time

#===============================================================================
    def Report(self, flight):
        """
        Formats the power consumption estimate for a flight

        Inputs:
            flight - The flight
        """
        rows = [('Weight'           , self.Weight                  , KG     , '%1.4g'),
                ('Thrust'           , self.Thrust                  , N      , '%1.2f'),
                ('Altitude'         , flight.Alt                   , M      , '%1.0f'),
                ('Air density'      , DensityAt(flight.Alt)        , KG/M**3, '%1.4f'),
                ('Speed'            , flight.Speed                 , km/HR  , '%1.4g'),
                ('Vertical power'   , self.PowerVertical(flight)   , W      , '%1.1f'),
                ('Horizontal power' , self.PowerHorizontal(flight) , W      , '%1.1f'),
                ('Total power'      , self.Power(flight)           , kW     , '%1.3f'),
                ('Power ratio'      , self.PowerRatio(flight)      , W/KG   , '%1.1f'),
                ('Distance'         , flight.Distance              , km     , '%1.4g'),
                ('Flight time'      , flight.Time                  , HR     , '%1.2f'),
                ('Energy'           , self.Energy(flight)          , kWh    , '%1.1f')]

        return self.FormatReport('Quad-copter at ' + AsUnit(flight.Alt, M, '%1.0f'), rows)

#===============================================================================
def EstimatePowerConsumption(copter, flight, Alts = None):
    """
    Formats the power estimates of a copter for a flight at several altitudes

    Inputs:
        copter - The quad-copter
        flight - The flight
        Alts   - Altitudes (default: the altitude of the flight)
    """
    if Alts is None:
        Alts = [flight.Alt]

    return '\n'.join([copter.Report(flight.WithAltitude(Alt)) for Alt in Alts])
