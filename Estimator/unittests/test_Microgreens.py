"""
A collection of unit tests to guarantee that the Microgreen class and the catalog loader are functioning properly
"""

import os
import shutil
import tempfile
import unittest

import numpy as npy

from scalar.units import g, KG, L, DAY, OZM, LBM, IN, M
from scalar.finance import EUR, USD
from scalar.scalar import DimensionMismatch
from Estimator.Microgreens import Microgreen, LoadMicrogreens, CatalogError, TrayArea
from Estimator.GrowContainer import GrowContainer
from Estimator.ESBase import MessageError

################################################################################
class MicrogreenTest(unittest.TestCase):
    """
    The harvest example: 13 g of seed at 18 EUR/kg giving 325 g sold at 13 EUR/kg
    """
#===============================================================================
    def test_Tray(self):
        plant = Microgreen()
        self.assertAlmostEqual(plant.SeedCost.asNumber(EUR), 0.234)
        self.assertAlmostEqual(plant.Value.asNumber(EUR), 4.225)
        self.assertAlmostEqual(plant.Profit.asNumber(EUR), 3.991)
        self.assertAlmostEqual(plant.Cycle.asNumber(DAY), 12)
        self.assertAlmostEqual(float(plant.Cycles), 3)
        self.assertAlmostEqual(plant.WaterUsage.asNumber(L), 3)

#===============================================================================
    def test_TrayArea(self):
        self.assertAlmostEqual(TrayArea.asNumber(IN**2), 200)
        self.assertAlmostEqual(TrayArea.asNumber(M**2), 200*0.0254**2)

#===============================================================================
    def test_ZeroGrow(self):
        """
        A grow time of zero days gives an infinite number of cycles
        """
        plant = Microgreen()
        plant.Grow = 0 * DAY
        self.assertTrue(npy.isinf(float(plant.Cycles)))

#===============================================================================
    def test_Currency(self):
        plant = Microgreen()
        self.assertRaises(MessageError, setattr, plant, 'Price', 18 * USD/KG)
        self.assertRaises(DimensionMismatch, plant.SeedCost.asUnit, USD)

#===============================================================================
    def test_Container(self):
        plant = Microgreen()
        gc = GrowContainer()

        month = gc.Trays * plant.Cycles
        self.assertAlmostEqual((plant.Seeds * month).asNumber(KG), 18.72, 6)
        self.assertAlmostEqual((plant.Profit * month).asNumber(EUR), 5747.04, 6)

        text = plant.ContainerReport(gc)
        self.assertTrue('(cycle)' in text)
        self.assertTrue('(month)' in text)
        self.assertTrue('5747.04 EUR' in text)

#===============================================================================
    def test_Report(self):
        text = Microgreen().Report()
        self.assertTrue('Price:' in text)
        self.assertTrue('0.23 EUR' in text)
        self.assertTrue('250 ml/d' in text)

################################################################################
class LoadMicrogreensTest(unittest.TestCase):
    """
    Tests of the plant catalog loader
    """
#===============================================================================
    def setUp(self):
        self.dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.dir)

    def _Catalog(self, text):
        path = os.path.join(self.dir, 'catalog.csv')
        with open(path, 'w') as f:
            f.write(text)
        return path

#===============================================================================
    def test_Load(self):
        path = self._Catalog("part,name,seeds,yield,days,price\n"
                             "MG-1,Pea Shoots,227,12,10,95\n"
                             "\n"
                             "MG-2,Radish,28,8,7,160\n")
        plants = LoadMicrogreens(path)

        self.assertEqual([p.name for p in plants], ['Pea Shoots', 'Radish'])

        pea = plants[0]
        self.assertAlmostEqual(pea.Seeds.asNumber(g), 227)
        self.assertAlmostEqual(pea.Yield.asNumber(OZM), 12)
        self.assertAlmostEqual(pea.Grow.asNumber(DAY), 10)
        self.assertAlmostEqual(pea.Price.asNumber(EUR/LBM), 95/25.)

        #
        # Fields the catalog does not carry keep the defaults
        #
        self.assertAlmostEqual(pea.Water.asNumber(L/DAY), 0.25)
        self.assertAlmostEqual(pea.Rest.asNumber(DAY), 2)
        self.assertAlmostEqual(pea.Germination.asNumber(DAY), 0)
        self.assertAlmostEqual(pea.MSRP.asNumber(EUR/KG), 13)

#===============================================================================
    def test_HeaderOnly(self):
        path = self._Catalog("part,name,seeds,yield,days,price\n")
        self.assertEqual(LoadMicrogreens(path), [])

#===============================================================================
    def test_Malformed(self):
        path = self._Catalog("part,name,seeds,yield,days,price\n"
                             "MG-1,Pea Shoots,227,12,10,95\n"
                             "MG-2,Radish,lots,8,7,160\n")
        try:
            LoadMicrogreens(path)
        except CatalogError as e:
            self.assertEqual(e.line, 3)
            self.assertTrue(str(e).startswith(path + ", line 3"))
        else:
            self.fail("CatalogError not raised")

        path = self._Catalog("part,name,seeds,yield,days,price\n"
                             "MG-1,Pea Shoots,227\n")
        self.assertRaises(CatalogError, LoadMicrogreens, path)

#===============================================================================
    def test_Missing(self):
        self.assertRaises(OSError, LoadMicrogreens, os.path.join(self.dir, 'none.csv'))

################################################################################
if __name__ == '__main__':
    unittest.main()
