"""
This package contains the command line scripts installed with rotcalc.
"""
