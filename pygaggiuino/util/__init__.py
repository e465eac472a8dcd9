"""Init for util"""
from ._decoding import (
    decode_json,
    decode_list,
    decode_object,
    flexible_bool,
    flexible_float,
    flexible_int,
    lenient_bool,
    scale_tenths,
    strict_bool,
    strict_float,
    strict_float_dict,
    strict_int,
    strict_int_list,
    strict_str,
)
from ._generic import is_success

__all__ = [
    "decode_json",
    "decode_list",
    "decode_object",
    "flexible_bool",
    "flexible_float",
    "flexible_int",
    "lenient_bool",
    "scale_tenths",
    "strict_bool",
    "strict_float",
    "strict_float_dict",
    "strict_int",
    "strict_int_list",
    "strict_str",
    "is_success",
]
