#!/usr/bin/env python

"""
This python script defines currency as a kind: a base dimension of its own
next to the physical ones. Each currency is its own unit of that kind with
no exchange rate to the others, so amounts in different currencies can be
priced per kilogram or per kilowatt-hour but never added together.
"""

from scalar.scalar import kind

currency = kind("$", "currency")

EUR = euro = currency.unit("EUR")
USD = us_dollar = currency.unit("USD")

ct = cent = currency.unit("ct", EUR/100) # euro cent, a fixed fraction of EUR
