"""
Tests of the report command line
"""

import contextlib
import io
import os
import unittest
from unittest import mock

from Estimator import RunReports

Catalog = os.path.join(os.path.dirname(RunReports.__file__), 'data', 'microgreens.csv')

################################################################################
class RunReportsTest(unittest.TestCase):
    """
    Runs the reports and checks what gets printed
    """
#===============================================================================
    def _Run(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = RunReports.main(argv)
        self.assertEqual(status, 0)
        return out.getvalue()

#===============================================================================
    def test_All(self):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop('MICROGREENS_CATALOG', None)
            text = self._Run([])

        for title in ['Quad-copter at 500 m', 'Hydrogen energy in 25 l', 'Compressed gas',
                      'Microgreens harvest', 'Solar panel', 'Grow light', 'Grow container',
                      'Standard Atmosphere']:
            self.assertTrue(title in text, title)

#===============================================================================
    def test_Catalog(self):
        text = self._Run(['--report', 'microgreens', '--catalog', Catalog])
        self.assertTrue('Microgreens Pea Shoots' in text)
        self.assertFalse('Solar panel' in text)

#===============================================================================
    def test_CatalogFromEnvironment(self):
        with mock.patch.dict(os.environ, {'MICROGREENS_CATALOG': Catalog}):
            text = self._Run(['--report', 'microgreens'])
        self.assertTrue('Microgreens Radish' in text)

#===============================================================================
    def test_BadCatalog(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            self.assertRaises(SystemExit, RunReports.main,
                              ['--report', 'microgreens', '--catalog', 'no/such/catalog.csv'])
        self.assertTrue('catalog.csv' in err.getvalue())

#===============================================================================
    def test_UnknownReport(self):
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, RunReports.main, ['--report', 'weather'])

################################################################################
if __name__ == '__main__':
    unittest.main()
