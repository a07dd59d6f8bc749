"""
Classes for laying out a grow farm in a shipping container

The container is filled with rows of racks. Each rack carries shelves of
trays, and each shelf is lit by grow lights. All counts are whole numbers:
a rack or tray that does not fit completely is not counted.
"""

from Estimator.ESBase import ESBase, Length, Unitless, Time, DutyCycle, PricePerEnergy
from Estimator.ESReportBase import ESReportBase
from Estimator.GrowLight import GrowLight, AirConditionPower
from scalar.units import M, cm, K, W, kWh, HR, DAY, percent
from scalar.scalar import floor
from scalar.finance import EUR

################################################################################
class IntermodalContainer(ESBase):
    """
    A shipping container (40 ft high cube inside dimensions by default)

    Attributes:
        Length, Width, Height - Inside dimensions
        Area                  - Floor area
        Volume                - Inside volume
    """
#===============================================================================
    def __init__(self):
        super(IntermodalContainer, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Length'] = 12.032 * M   ; UnitList['Length'] = Length
        self.__dict__['Width']  = 2.352 * M    ; UnitList['Width']  = Length
        self.__dict__['Height'] = 2.385 * M    ; UnitList['Height'] = Length

        self.NoneList['Area']   = None
        self.NoneList['Volume'] = None

#===============================================================================
    def _CalcArea(self):
        return self.Length * self.Width

#===============================================================================
    def _CalcVolume(self):
        return self.Area * self.Height


################################################################################
class GrowRack(ESBase):
    """
    A shelving rack of grow trays

    Attributes:
        Depth, Width, Height - Outside dimensions
        Shelves              - Number of shelves
        Tray                 - Width of a tray on a shelf
    """
#===============================================================================
    def __init__(self):
        super(GrowRack, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Depth']   = 0.5 * M     ; UnitList['Depth']   = Length
        self.__dict__['Width']   = 1.0 * M     ; UnitList['Width']   = Length
        self.__dict__['Height']  = 2.0 * M     ; UnitList['Height']  = Length
        self.__dict__['Shelves'] = 5           ; UnitList['Shelves'] = Unitless
        self.__dict__['Tray']    = 25 * cm     ; UnitList['Tray']    = Length


################################################################################
class GrowContainer(ESBase, ESReportBase):
    """
    A container filled with grow racks

    Attributes:
        Container      - The intermodal container
        Rack           - The rack design
        Light          - The grow light
        Rows           - Rows of racks along the container length
        LightsPerShelf - Grow lights on each shelf
        LightTime      - Time the cooling has to remove the light heat in
        LightHours     - Hours per day the lights are on
        EnergyPrice    - Price of electrical energy
    """
#===============================================================================
    def __init__(self, Container = None, Rack = None, Light = None):
        super(GrowContainer, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Container'] = Container if Container is not None else IntermodalContainer()
        self.__dict__['Rack']      = Rack if Rack is not None else GrowRack()
        self.__dict__['Light']     = Light if Light is not None else GrowLight()

        self.__dict__['Rows']           = 2              ; UnitList['Rows']           = Unitless
        self.__dict__['LightsPerShelf'] = 2              ; UnitList['LightsPerShelf'] = Unitless
        self.__dict__['LightTime']      = 1 * HR         ; UnitList['LightTime']      = Time
        self.__dict__['LightHours']     = 8 * HR/DAY     ; UnitList['LightHours']     = DutyCycle
        self.__dict__['EnergyPrice']    = 0.31 * EUR/kWh ; UnitList['EnergyPrice']    = PricePerEnergy

        self.NoneList['Racks']       = None
        self.NoneList['Shelves']     = None
        self.NoneList['Trays']       = None
        self.NoneList['TrayArea']    = None
        self.NoneList['Lights']      = None
        self.NoneList['PowerLights'] = None
        self.NoneList['PowerWaste']  = None
        self.NoneList['HeatRate']    = None

#===============================================================================
    def _CalcRacks(self):
        """
        Racks standing side by side along the container, in each row
        """
        self.Rack._CheckPositive('Width')
        return floor(self.Container.Length / self.Rack.Width) * self.Rows

#===============================================================================
    def _CalcShelves(self):
        return self.Rack.Shelves * self.Racks

#===============================================================================
    def _CalcTrays(self):
        self.Rack._CheckPositive('Tray')
        return floor(self.Rack.Width / self.Rack.Tray) * self.Shelves

#===============================================================================
    def _CalcTrayArea(self):
        return self.Rack.Tray * self.Rack.Depth * self.Trays

#===============================================================================
    def _CalcLights(self):
        return self.LightsPerShelf * self.Shelves

#===============================================================================
    def _CalcPowerLights(self):
        return self.Light.Power * self.Lights

#===============================================================================
    def _CalcPowerWaste(self):
        return self.Light.Waste * self.Lights

#===============================================================================
    def _CalcHeatRate(self):
        """
        Rate at which all the lights warm the air in the container
        """
        return self.Light.HeatRate(self.Container.Volume) * self.Lights

#===============================================================================
    def HeatRise(self):
        """
        Air temperature rise during LightTime without cooling
        """
        return self.HeatRate * self.LightTime

#===============================================================================
    def CoolingPower(self):
        """
        Air conditioning power that removes the heat rise within LightTime
        """
        return AirConditionPower(self.Container.Volume, self.HeatRise(), self.LightTime)

#===============================================================================
    def TotalPower(self):
        return self.PowerLights + self.CoolingPower()

#===============================================================================
    def Energy(self):
        """
        Energy used per day with the lights on for LightHours
        """
        return self.TotalPower() * self.LightHours

#===============================================================================
    def EnergyCost(self):
        """
        Cost of the energy per day
        """
        return self.EnergyPrice * self.Energy()

#===============================================================================
    def Report(self):
        """
        Formats the container layout, its power and its energy cost
        """
        Container = self.Container
        rows = [('Length'      , Container.Length       , M        , '%1.4g'),
                ('Width'       , Container.Width        , M        , '%1.4g'),
                ('Height'      , Container.Height       , M        , '%1.4g'),
                ('Area'        , Container.Area         , M**2     , '%1.2f'),
                ('Volume'      , Container.Volume       , M**3     , '%1.2f'),
                None,
                ('Racks'       , self.Racks             , None     , '%d'),
                ('Shelves'     , self.Shelves           , None     , '%d'),
                ('Trays'       , self.Trays             , None     , '%d'),
                ('Tray area'   , self.TrayArea          , M**2     , '%1.4g'),
                None,
                ('Light'       , self.Light.Power       , W        , '%1.4g'),
                ('Efficiency'  , self.Light.Efficiency  , percent  , '%1.4g'),
                None,
                ('Lights'      , self.Lights            , None     , '%d'),
                ('Lights power', self.PowerLights       , W        , '%1.4g'),
                ('Waste'       , self.PowerWaste        , W        , '%1.2f'),
                ('Heat'        , self.HeatRate          , K/HR     , '%1.3f'),
                ('Heat rise'   , self.HeatRise()        , K        , '%1.3f'),
                ('Cooling'     , self.CoolingPower()    , W        , '%1.1f'),
                ('Power'       , self.TotalPower()      , W        , '%1.1f'),
                ('Energy'      , self.Energy()          , kWh/DAY  , '%1.2f'),
                ('Energy cost' , self.EnergyCost()      , EUR/DAY  , '%1.2f')]

        return self.FormatReport('Grow container', rows)
