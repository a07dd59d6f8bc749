"""
A collection of unit tests to guarantee that the hydrogen storage classes are functioning properly
"""

import unittest
from scalar.units import L, g, KG, kWh, mol, BAR
from Estimator.Hydrogen import HydrogenTank, GasCylinder
from Estimator.ESBase import MessageError

################################################################################
class HydrogenTankTest(unittest.TestCase):
    """
    Gas versus liquid storage of 5 litres of hydrogen
    """
#===============================================================================
    def test_Mass(self):
        tank = HydrogenTank()
        self.assertAlmostEqual(tank.MassGas.asNumber(g), 0.4494, 7)
        self.assertAlmostEqual(tank.MassLiquid.asNumber(KG), 0.35425, 7)

#===============================================================================
    def test_Energy(self):
        tank = HydrogenTank()
        self.assertAlmostEqual(tank.EnergyGas.asNumber(kWh), 0.01496502, 7)
        self.assertAlmostEqual(tank.EnergyLiquid.asNumber(kWh), 11.796525, 5)
        self.assertAlmostEqual(float(tank.Increase), 788.27, 2)

#===============================================================================
    def test_Volume(self):
        """
        Energy scales with the volume, the increase does not
        """
        tank = HydrogenTank()
        tank.Volume = 25 * L
        self.assertAlmostEqual(tank.EnergyGas.asNumber(kWh), 5*0.01496502, 7)
        self.assertAlmostEqual(float(tank.Increase), 788.27, 2)

        self.assertRaises(MessageError, setattr, tank, 'Volume', 25 * KG)

#===============================================================================
    def test_Report(self):
        text = HydrogenTank().Report()
        self.assertTrue(text.startswith('Hydrogen energy in 5 l'))
        self.assertTrue('0.4494 g' in text)

################################################################################
class GasCylinderTest(unittest.TestCase):
    """
    Hydrogen compressed to 200 bar in a 5 litre cylinder
    """
#===============================================================================
    def test_Moles(self):
        cylinder = GasCylinder()
        self.assertAlmostEqual(cylinder.Moles.asNumber(mol), 40.36, 2)
        self.assertAlmostEqual(cylinder.Mass.asNumber(g), 80.72, 1)

        cylinder.Pressure = 100 * BAR
        self.assertAlmostEqual(cylinder.Moles.asNumber(mol), 20.18, 2)

################################################################################
if __name__ == '__main__':
    unittest.main()
