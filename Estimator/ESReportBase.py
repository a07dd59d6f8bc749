"""
A class for useful report functions
"""
from scalar.scalar import AsUnit

################################################################################
class ESReportBase(object):
    """
    A class for printing labeled quantities as aligned text reports

    A report row is either None (a blank line) or a tuple
        (label, value)
        (label, value, unit)
        (label, value, unit, fmt)
    where unit is the output unit and fmt a '%' number format.
    """
#===============================================================================
    def _GetLabelWidth(self, rows):
        """
        Calculates the width of the label column

        Inputs:
            rows - The report rows
        """
        labels = [row[0] for row in rows if row is not None]
        if not labels:
            return 0
        return max([len(label) for label in labels]) + 2

#===============================================================================
    def FormatReport(self, title, rows):
        """
        Formats a report as text

        Inputs:
            title - The title of the report
            rows  - The report rows
        """
        width = self._GetLabelWidth(rows)

        lines = [title, '-'*len(title)]
        for row in rows:
            if row is None:
                lines.append('')
                continue

            label, value = row[0], row[1]
            unit = row[2] if len(row) > 2 else None
            fmt  = row[3] if len(row) > 3 else '%1.4g'

            if isinstance(value, str):
                text = value
            else:
                text = AsUnit(value, unit, fmt)

            lines.append((label + ':').ljust(width) + text)

        return '\n'.join(lines) + '\n'
