"""
Classes for estimating the energy stored as hydrogen

A HydrogenTank compares the energy of a volume of hydrogen stored as a gas at
ambient pressure with the same volume stored as a liquid. A GasCylinder
estimates the amount of hydrogen held by a compressed gas cylinder from the
ideal gas law.
"""

from Estimator.ESBase import ESBase, Volume, Density, SpecificEnergy, Pressure, \
                             Temperature, MolarMass
from Estimator.ESReportBase import ESReportBase
from scalar.units import KG, M, L, g, K, BAR, mol, kWh, Rgas
from scalar.scalar import AsUnit

# Lower heating value of hydrogen
LHV = 33.3 * kWh/KG

################################################################################
class HydrogenTank(ESBase, ESReportBase):
    """
    Energy of a volume of hydrogen as a gas and as a liquid

    Attributes:
        Volume        - The stored volume
        DensityGas    - Density of hydrogen gas at ambient conditions
        DensityLiquid - Density of liquid hydrogen
        LHV           - Lower heating value
    """
#===============================================================================
    def __init__(self):
        super(HydrogenTank, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Volume']        = 5 * L              ; UnitList['Volume']        = Volume
        self.__dict__['DensityGas']    = 0.08988 * KG/M**3  ; UnitList['DensityGas']    = Density
        self.__dict__['DensityLiquid'] = 70.85 * KG/M**3    ; UnitList['DensityLiquid'] = Density
        self.__dict__['LHV']           = LHV                ; UnitList['LHV']           = SpecificEnergy

        #
        # Calculated quantities
        #
        self.NoneList['MassGas']      = None
        self.NoneList['MassLiquid']   = None
        self.NoneList['EnergyGas']    = None
        self.NoneList['EnergyLiquid'] = None
        self.NoneList['Increase']     = None

#===============================================================================
    def Energy(self, Density):
        """
        Energy of the tank volume filled at a density

        Inputs:
            Density - The density of the hydrogen
        """
        return Density * self.Volume * self.LHV

#===============================================================================
    def _CalcMassGas(self):
        return self.DensityGas * self.Volume

#===============================================================================
    def _CalcMassLiquid(self):
        return self.DensityLiquid * self.Volume

#===============================================================================
    def _CalcEnergyGas(self):
        return self.Energy(self.DensityGas)

#===============================================================================
    def _CalcEnergyLiquid(self):
        return self.Energy(self.DensityLiquid)

#===============================================================================
    def _CalcIncrease(self):
        """
        How many times more energy the liquid holds
        """
        return self.EnergyLiquid / self.EnergyGas

#===============================================================================
    def Report(self):
        """
        Formats the hydrogen energy report
        """
        rows = [('Volume'         , self.Volume       , L      , '%1.4g'),
                None,
                ('Gas density'    , self.DensityGas   , KG/M**3, '%1.5g'),
                ('Gas mass'       , self.MassGas      , g      , '%1.4f'),
                ('Gas energy'     , self.EnergyGas    , kWh    , '%1.5f'),
                None,
                ('Liquid density' , self.DensityLiquid, KG/M**3, '%1.5g'),
                ('Liquid mass'    , self.MassLiquid   , g      , '%1.2f'),
                ('Liquid energy'  , self.EnergyLiquid , kWh    , '%1.4f'),
                None,
                ('Increase'       , self.Increase     , None   , '%1.1f')]

        return self.FormatReport('Hydrogen energy in ' + AsUnit(self.Volume, L), rows)


################################################################################
class GasCylinder(ESBase, ESReportBase):
    """
    Amount of a gas held by a cylinder, from the ideal gas law

    Attributes:
        Pressure    - Filling pressure
        Volume      - Cylinder volume
        Temperature - Gas temperature
        MolarMass   - Molar mass of the gas (hydrogen: 2 g/mol)
    """
#===============================================================================
    def __init__(self):
        super(GasCylinder, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Pressure']    = 200 * BAR    ; UnitList['Pressure']    = Pressure
        self.__dict__['Volume']      = 5 * L        ; UnitList['Volume']      = Volume
        self.__dict__['Temperature'] = 298 * K      ; UnitList['Temperature'] = Temperature
        self.__dict__['MolarMass']   = 2 * g/mol    ; UnitList['MolarMass']   = MolarMass

        self.NoneList['Moles'] = None
        self.NoneList['Mass']  = None

#===============================================================================
    def _CalcMoles(self):
        """
        n = P*V/(R*T)
        """
        return self.Pressure * self.Volume / (Rgas * self.Temperature)

#===============================================================================
    def _CalcMass(self):
        return self.Moles * self.MolarMass

#===============================================================================
    def Report(self):
        """
        Formats the compressed gas report
        """
        rows = [('Pressure'    , self.Pressure   , BAR  , '%1.4g'),
                ('Volume'      , self.Volume     , L    , '%1.4g'),
                ('Temperature' , self.Temperature, K    , '%1.4g'),
                ('Moles'       , self.Moles      , mol  , '%1.3f'),
                ('Mass'        , self.Mass       , g    , '%1.2f'),
                ('Energy'      , self.Mass * LHV , kWh  , '%1.3f')]

        return self.FormatReport('Compressed gas', rows)
