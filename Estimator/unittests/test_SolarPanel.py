"""
A collection of unit tests to guarantee that the SolarPanel class is functioning properly
"""

import unittest
from scalar.units import M, cm, W, kW, kWh, HR, percent
from Estimator.SolarPanel import SolarPanel, SolarPanelLocation

################################################################################
class SolarPanelTest(unittest.TestCase):
    """
    A 5 m**2 panel at 18% in full sun for 12 hours
    """
#===============================================================================
    def test_PeakPower(self):
        panel = SolarPanel()
        self.assertAlmostEqual(panel.Area.asNumber(M**2), 5)
        self.assertAlmostEqual(panel.PeakPower.asNumber(kW), 0.9)

#===============================================================================
    def test_Output(self):
        panel = SolarPanel()
        location = SolarPanelLocation()

        self.assertAlmostEqual(panel.PowerOutput(location).asNumber(W), 900)
        self.assertAlmostEqual(panel.EnergyOutput(location).asNumber(kWh), 10.8)

        location.Irradiance = 500 * W/M**2
        location.Daylight = 6 * HR
        self.assertAlmostEqual(panel.EnergyOutput(location).asNumber(kWh), 2.7)

#===============================================================================
    def test_Area(self):
        """
        The area can be given instead of calculated
        """
        panel = SolarPanel()
        panel.Area = 2 * M**2
        panel.Efficiency = 20 * percent
        self.assertAlmostEqual(panel.PeakPower.asNumber(W), 400)

        panel.Area = None
        panel.Width = 200 * cm
        self.assertAlmostEqual(panel.PeakPower.asNumber(W), 400)

#===============================================================================
    def test_Report(self):
        text = SolarPanel().Report(SolarPanelLocation())
        self.assertTrue('Peak power:' in text)
        self.assertTrue('10.80 kWh' in text)

################################################################################
if __name__ == '__main__':
    unittest.main()
