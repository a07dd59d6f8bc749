"""
Classes for estimating the yield of a solar panel at a location
"""

from Estimator.ESBase import ESBase, Length, Unitless, Irradiance, Time
from Estimator.ESReportBase import ESReportBase
from scalar.units import M, cm, W, kW, kWh, HR, percent

# Standard test condition irradiance used to rate panels (kWp)
StandardIrradiance = 1 * kW/M**2

################################################################################
class SolarPanelLocation(ESBase):
    """
    Where a panel is installed

    Attributes:
        Irradiance - Solar irradiance on the panel
        Daylight   - Hours of usable sun per day
    """
#===============================================================================
    def __init__(self):
        super(SolarPanelLocation, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Irradiance'] = 1000 * W/M**2   ; UnitList['Irradiance'] = Irradiance
        self.__dict__['Daylight']   = 12 * HR         ; UnitList['Daylight']   = Time


################################################################################
class SolarPanel(ESBase, ESReportBase):
    """
    A solar panel

    Attributes:
        Width      - Panel width
        Height     - Panel height
        Efficiency - Conversion efficiency
        Area       - Panel area (calculated from Width and Height if None)
        PeakPower  - Rated power at standard irradiance (kWp)
    """
#===============================================================================
    def __init__(self):
        super(SolarPanel, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Width']      = 500 * cm        ; UnitList['Width']      = Length
        self.__dict__['Height']     = 100 * cm        ; UnitList['Height']     = Length
        self.__dict__['Efficiency'] = 18 * percent    ; UnitList['Efficiency'] = Unitless

        self.NoneList['Area']      = None
        self.NoneList['PeakPower'] = None

#===============================================================================
    def _CalcArea(self):
        return self.Width * self.Height

#===============================================================================
    def _CalcPeakPower(self):
        return self.Area * StandardIrradiance * self.Efficiency

#===============================================================================
    def PowerOutput(self, location):
        """
        Electrical power at the irradiance of a location

        Inputs:
            location - The panel location
        """
        return self.Area * location.Irradiance * self.Efficiency

#===============================================================================
    def EnergyOutput(self, location):
        """
        Electrical energy produced during a day of sun

        Inputs:
            location - The panel location
        """
        return self.PowerOutput(location) * location.Daylight

#===============================================================================
    def Report(self, location):
        """
        Formats the panel yield at a location

        Inputs:
            location - The panel location
        """
        rows = [('Area'        , self.Area                    , M**2    , '%1.4g'),
                ('Efficiency'  , self.Efficiency              , percent , '%1.4g'),
                ('Peak power'  , self.PeakPower               , kW      , '%1.3f'),
                None,
                ('Irradiance'  , location.Irradiance          , W/M**2  , '%1.4g'),
                ('Daylight'    , location.Daylight            , HR      , '%1.4g'),
                ('Output'      , self.PowerOutput(location)   , W       , '%1.1f'),
                ('Energy'      , self.EnergyOutput(location)  , kWh     , '%1.2f')]

        return self.FormatReport('Solar panel', rows)
