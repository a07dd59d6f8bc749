"""
A class for the waste heat of grow lights and the cooling it calls for
"""

from Estimator.ESBase import ESBase, Power, Unitless
from Estimator.ESReportBase import ESReportBase
from scalar.units import M, KG, K, J, W, HR, percent

# Air at sea level
cpAir  = 1005 * J/(KG*K)   # Specific heat at constant pressure
rhoAir = 1.225 * KG/M**3   # Density

################################################################################
class GrowLight(ESBase, ESReportBase):
    """
    A grow light

    Attributes:
        Power      - Electrical power
        Efficiency - Fraction of the power leaving as light
        Waste      - Power lost as heat
    """
#===============================================================================
    def __init__(self):
        super(GrowLight, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Power']      = 25 * W          ; UnitList['Power']      = Power
        self.__dict__['Efficiency'] = 90 * percent    ; UnitList['Efficiency'] = Unitless

        self.NoneList['Waste'] = None

#===============================================================================
    def _CalcWaste(self):
        return self.Power * (1 - self.Efficiency)

#===============================================================================
    def HeatRate(self, Volume):
        """
        Rate at which the waste heat warms a volume of air

        Inputs:
            Volume - The air volume
        """
        return self.Waste / (Volume * rhoAir * cpAir)

#===============================================================================
    def Report(self, Volume):
        """
        Formats the heating of a volume of air by the light

        Inputs:
            Volume - The air volume
        """
        rows = [('Power'      , self.Power          , W       , '%1.4g'),
                ('Efficiency' , self.Efficiency     , percent , '%1.4g'),
                ('Waste'      , self.Waste          , W       , '%1.3g'),
                ('Air volume' , Volume              , M**3    , '%1.4g'),
                ('Heat rate'  , self.HeatRate(Volume), K/HR    , '%1.4g')]

        return self.FormatReport('Grow light', rows)

#===============================================================================
def AirConditionPower(Volume, dT, t):
    """
    Cooling power to take a volume of air down by a temperature difference

    Inputs:
        Volume - The air volume
        dT     - Temperature difference
        t      - Time to remove the heat in
    """
    return cpAir * rhoAir * Volume * dT / t
