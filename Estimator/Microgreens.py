"""
Microgreens economics: what a tray of a plant costs and earns, and what a
grow container full of trays produces per cycle and per month.

Plants are either set up by hand or loaded from a catalog file with one
plant per line:

    part,name,seeds_per_tray_g,yield_per_tray_oz,days_per_tray,seed_price_per_25lb_eur
"""

import csv

from Estimator.ESBase import ESBase, ESError, Mass, Time, VolumeRate, DutyCycle, \
                             PricePerMass
from Estimator.ESReportBase import ESReportBase
from scalar.units import KG, g, L, mL, HR, DAY, IN, OZM, LBM, M
from scalar.finance import EUR

# A standard 1020 tray
TrayArea = (10 * IN) * (20 * IN)

################################################################################
class CatalogError(ESError):
    """ Error handler for malformed plant catalog lines """
    def __init__(self, path, line, message):
        ESError.__init__(self, path, line, message)
        self.path = path
        self.line = line
        self.msg = message

    def __str__(self):
        return str(self.path) + ", line " + str(self.line) + ": " + self.msg

################################################################################
class Microgreen(ESBase, ESReportBase):
    """
    A microgreen plant grown in one tray

    Attributes:
        Price       - Seed price
        Seeds       - Seeds sown per tray
        Water       - Water used per tray
        Light       - Hours of light per day
        Germination - Days to germinate
        Grow        - Days to grow
        Rest        - Days the tray rests before the next sowing
        Yield       - Harvest per tray
        MSRP        - Selling price of the harvest
        Period      - Period the number of cycles is counted over
    """
#===============================================================================
    def __init__(self):
        super(Microgreen, self).__init__()
        UnitList = self.UnitList

        self.__dict__['Price']       = 18 * EUR/KG      ; UnitList['Price']       = PricePerMass
        self.__dict__['Seeds']       = 13 * g           ; UnitList['Seeds']       = Mass
        self.__dict__['Water']       = 0.25 * L/DAY     ; UnitList['Water']       = VolumeRate
        self.__dict__['Light']       = 8 * HR/DAY       ; UnitList['Light']       = DutyCycle
        self.__dict__['Germination'] = 0 * DAY          ; UnitList['Germination'] = Time
        self.__dict__['Grow']        = 10 * DAY         ; UnitList['Grow']        = Time
        self.__dict__['Rest']        = 2 * DAY          ; UnitList['Rest']        = Time
        self.__dict__['Yield']       = 325 * g          ; UnitList['Yield']       = Mass
        self.__dict__['MSRP']        = 13 * EUR/KG      ; UnitList['MSRP']        = PricePerMass
        self.__dict__['Period']      = 30 * DAY         ; UnitList['Period']      = Time

        self.NoneList['SeedCost']    = None
        self.NoneList['Value']       = None
        self.NoneList['Profit']      = None
        self.NoneList['Cycle']       = None
        self.NoneList['Cycles']      = None
        self.NoneList['WaterUsage']  = None
        self.NoneList['SeedDensity'] = None

#===============================================================================
    def _CalcSeedCost(self):
        return self.Price * self.Seeds

#===============================================================================
    def _CalcValue(self):
        return self.MSRP * self.Yield

#===============================================================================
    def _CalcProfit(self):
        return self.Value - self.SeedCost

#===============================================================================
    def _CalcCycle(self):
        return self.Germination + self.Grow + self.Rest

#===============================================================================
    def _CalcCycles(self):
        """
        Harvests per Period. A grow time of zero gives an infinite count.
        """
        return self.Period / self.Grow

#===============================================================================
    def _CalcWaterUsage(self):
        return self.Water * (self.Grow + self.Rest)

#===============================================================================
    def _CalcSeedDensity(self):
        return self.Seeds / TrayArea

#===============================================================================
    def Report(self):
        """
        Formats the economics of a single tray
        """
        rows = [('Seeds'       , self.Seeds       , g        , '%1.4g'),
                ('Seed density', self.SeedDensity , g/M**2   , '%1.1f'),
                ('Price'       , self.SeedCost    , EUR      , '%1.2f'),
                None,
                ('Water'       , self.Water       , mL/DAY   , '%1.4g'),
                ('Light'       , self.Light       , HR/DAY   , '%1.4g'),
                ('Germination' , self.Germination , DAY      , '%1.4g'),
                ('Grow'        , self.Grow        , DAY      , '%1.4g'),
                ('Rest'        , self.Rest        , DAY      , '%1.4g'),
                ('Cycle'       , self.Cycle       , DAY      , '%1.4g'),
                ('Cycles'      , self.Cycles      , None     , '%1.2f'),
                None,
                ('Water usage' , self.WaterUsage  , L        , '%1.4g'),
                ('Yield'       , self.Yield       , g        , '%1.2f'),
                ('MSRP'        , self.MSRP        , EUR/KG   , '%1.4g'),
                ('Value'       , self.Value       , EUR      , '%1.2f'),
                ('Profit'      , self.Profit      , EUR      , '%1.2f')]

        return self.FormatReport('Microgreens ' + self.name + ' (1020 tray)', rows)

#===============================================================================
    def ContainerReport(self, gc):
        """
        Formats what a grow container full of trays of the plant produces
        in one cycle and in one Period

        Inputs:
            gc - The grow container
        """
        Trays = gc.Trays
        text = []
        for title, count in [('cycle', Trays), ('month', Trays * self.Cycles)]:
            rows = [('Seeds'       , self.Seeds * count               , KG   , '%1.2f'),
                    ('Price'       , self.SeedCost * count            , EUR  , '%1.2f'),
                    None,
                    ('Water usage' , self.WaterUsage * count          , L    , '%1.2f'),
                    ('Yield'       , self.Yield * count               , KG   , '%1.2f'),
                    ('Value'       , self.Value * count               , EUR  , '%1.2f'),
                    ('Profit'      , self.Profit * count              , EUR  , '%1.2f')]

            text.append(self.FormatReport('Microgreens ' + self.name + ' container (' + title + ')', rows))

        return '\n'.join(text)

#===============================================================================
def LoadMicrogreens(path):
    """
    Reads the plants of a catalog file

    The first line is a header. Fields the catalog does not carry (water,
    light, germination, rest and MSRP) keep the Microgreen defaults.

    Inputs:
        path - The catalog file
    """
    plants = []
    with open(path, newline='') as catalog:
        reader = csv.reader(catalog)
        next(reader, None) # skip header

        for row in reader:
            if not row or not ''.join(row).strip():
                continue

            if len(row) < 6:
                raise CatalogError(path, reader.line_num,
                                   "expected 6 fields, found " + str(len(row)))

            try:
                Seeds = float(row[2]) * g
                Yield = float(row[3]) * OZM
                Days  = float(row[4]) * DAY
                Price = float(row[5]) * EUR / (25 * LBM)
            except ValueError as e:
                raise CatalogError(path, reader.line_num, str(e))

            plant = Microgreen()
            plant.name  = row[1].strip()
            plant.Seeds = Seeds
            plant.Yield = Yield
            plant.Grow  = Days
            plant.Price = Price

            plants.append(plant)

    return plants
