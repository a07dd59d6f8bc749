"""
Prints the estimate reports

    python -m Estimator.RunReports [--catalog PATH] [--report NAME ...] [--plot]

The plant catalog is read from --catalog, or from the MICROGREENS_CATALOG
environment variable when the option is not given.
"""

import argparse
import os
import sys

import matplotlib.pyplot as pyl

from Estimator import Atmosphere
from Estimator.QuadCopter import QuadCopter, Flight, EstimatePowerConsumption
from Estimator.Hydrogen import HydrogenTank, GasCylinder
from Estimator.SolarPanel import SolarPanel, SolarPanelLocation
from Estimator.GrowContainer import GrowContainer
from Estimator.Microgreens import Microgreen, LoadMicrogreens, CatalogError
from scalar.units import M, L

#===============================================================================
def QuadCopterReport(args):
    copter = QuadCopter()
    flight = Flight()

    return EstimatePowerConsumption(copter, flight, [500*M, 1000*M, 1500*M])

#===============================================================================
def HydrogenReport(args):
    text = []
    for Volume in [5*L, 10*L, 25*L]:
        tank = HydrogenTank()
        tank.Volume = Volume
        text.append(tank.Report())

    text.append(GasCylinder().Report())
    return '\n'.join(text)

#===============================================================================
def SolarReport(args):
    return SolarPanel().Report(SolarPanelLocation())

#===============================================================================
def ContainerReport(args):
    gc = GrowContainer()
    return gc.Light.Report(gc.Container.Volume) + '\n' + gc.Report()

#===============================================================================
def MicrogreensReport(args):
    """
    The harvest example plant, followed by every plant in the catalog
    """
    gc = GrowContainer()

    harvest = Microgreen()
    harvest.name = 'harvest'
    plants = [harvest]

    if args.catalog:
        plants += LoadMicrogreens(args.catalog)

    return '\n'.join([plant.Report() + '\n' + plant.ContainerReport(gc) for plant in plants])

#===============================================================================
def AtmosphereReport(args):
    return Atmosphere.Report()

Reports = {'quadcopter'  : QuadCopterReport,
           'hydrogen'    : HydrogenReport,
           'microgreens' : MicrogreensReport,
           'solar'       : SolarReport,
           'container'   : ContainerReport,
           'atmosphere'  : AtmosphereReport}

Order = ['quadcopter', 'hydrogen', 'microgreens', 'solar', 'container', 'atmosphere']

#===============================================================================
def main(argv = None):
    """
    Command line entry point
    """
    parser = argparse.ArgumentParser(description="Engineering estimate reports")
    parser.add_argument("--catalog", default=os.environ.get("MICROGREENS_CATALOG"),
                        help="plant catalog file (default: $MICROGREENS_CATALOG)")
    parser.add_argument("--report", action="append", choices=Order,
                        help="report to print, may be repeated (default: all)")
    parser.add_argument("--plot", action="store_true",
                        help="plot the standard atmosphere profile")
    args = parser.parse_args(argv)

    for name in args.report or Order:
        try:
            print(Reports[name](args))
        except (CatalogError, OSError) as e:
            parser.error(str(e))

    if args.plot:
        Atmosphere.PlotProfile()
        pyl.show()

    return 0

if __name__ == '__main__':
    sys.exit(main())
