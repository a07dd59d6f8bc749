"""
A collection of unit tests to guarantee that the QuadCopter class is functioning properly
"""

import unittest
from scalar.units import M, KG, N, W, HR, km, kWh, gacc
from Estimator.QuadCopter import QuadCopter, Flight, EstimatePowerConsumption

################################################################################
class FlightTest(unittest.TestCase):
    """
    Tests of the flight description
    """
#===============================================================================
    def test_Time(self):
        flight = Flight()
        self.assertAlmostEqual(flight.Time.asNumber(HR), 30)

        self.assertAlmostEqual(flight.WithSpeed(150*km/HR).Time.asNumber(HR), 20)
        self.assertAlmostEqual(flight.WithDistance(500*km).Time.asNumber(HR), 5)

#===============================================================================
    def test_With(self):
        flight = Flight()
        high = flight.WithAltitude(1500*M)

        self.assertAlmostEqual(high.Alt.asNumber(M), 1500)
        self.assertAlmostEqual(flight.Alt.asNumber(M), 1000)
        self.assertAlmostEqual(high.Distance.asNumber(km), 3000)

################################################################################
class QuadCopterTest(unittest.TestCase):
    """
    Tests of the power estimates
    """
#===============================================================================
    def test_Thrust(self):
        copter = QuadCopter()
        self.assertAlmostEqual(copter.Thrust.asNumber(N), 10*9.80665*1.3, 6)
        self.assertAlmostEqual(copter.Thrust.asNumber(KG*gacc), 13, 10)

#===============================================================================
    def test_SeaLevel(self):
        copter = QuadCopter()
        flight = Flight().WithAltitude(0*M)

        self.assertAlmostEqual(copter.PowerVertical(flight).asNumber(W), 10*9.80665*1.3*10/0.7, 4)
        self.assertAlmostEqual(copter.PowerHorizontal(flight).asNumber(W), 708.9, 0)

#===============================================================================
    def test_Altitude(self):
        """
        Thinner air costs hover power and saves drag power
        """
        copter = QuadCopter()
        flight = Flight()

        low  = flight.WithAltitude(500*M)
        high = flight.WithAltitude(1500*M)

        self.assertTrue(copter.PowerVertical(high) > copter.PowerVertical(low))
        self.assertTrue(copter.PowerHorizontal(high) < copter.PowerHorizontal(low))

#===============================================================================
    def test_Energy(self):
        copter = QuadCopter()
        flight = Flight()

        Power = copter.Power(flight)
        self.assertAlmostEqual(copter.Energy(flight).asNumber(kWh), Power.asNumber(W)*30/1000, 6)
        self.assertAlmostEqual(copter.PowerRatio(flight).asNumber(W/KG), Power.asNumber(W)/10, 6)

#===============================================================================
    def test_Report(self):
        text = EstimatePowerConsumption(QuadCopter(), Flight(), [500*M, 1000*M])
        self.assertEqual(text.count('Quad-copter at'), 2)
        self.assertTrue('Quad-copter at 500 m' in text)
        self.assertTrue('Flight time:' in text)

################################################################################
if __name__ == '__main__':
    unittest.main()
