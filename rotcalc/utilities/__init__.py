# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This package provides utilities used throughout rotcalc that are not themselves rotation math: the text encodings and
display formatting for rotations and the user options configuration layer.
"""

from rotcalc.utilities.encoding import (OutputFormat, FormattedResult, encode_chain, decode_chain, encode_mapping,
                                        decode_mapping, format_number, format_values, format_matrix, format_result)
from rotcalc.utilities.options import UserOptions

__all__ = ['OutputFormat', 'FormattedResult', 'encode_chain', 'decode_chain', 'encode_mapping', 'decode_mapping',
           'format_number', 'format_values', 'format_matrix', 'format_result', 'UserOptions']
