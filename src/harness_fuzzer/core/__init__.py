"""Rdzeń generatora: klucze wykonania, wartości brzegowe i generatory proste."""

from . import boundaries, generators, models
from .errors import FuzzerError, FuzzerNotInitializedError, UnsupportedDomainError
from .exec_key import generate_exec_key
from .fuzzer import (
	Fuzzer,
	current_fuzzer,
	deinit_fuzzer,
	fuzzer_session,
	init_fuzzer,
	random_ascii_string,
	random_ascii_string_with_maximum_length,
	random_integer,
	random_integer_in_range,
	random_positive_integer,
	random_sint8_boundary_value,
	random_uint8_boundary_value,
	random_uint16_boundary_value,
	random_uint32_boundary_value,
	random_uint64_boundary_value,
)
from .models import BoundaryDomain, BoundaryResult

__all__ = [
	"boundaries",
	"generators",
	"models",
	"BoundaryDomain",
	"BoundaryResult",
	"Fuzzer",
	"FuzzerError",
	"FuzzerNotInitializedError",
	"UnsupportedDomainError",
	"current_fuzzer",
	"deinit_fuzzer",
	"fuzzer_session",
	"generate_exec_key",
	"init_fuzzer",
	"random_ascii_string",
	"random_ascii_string_with_maximum_length",
	"random_integer",
	"random_integer_in_range",
	"random_positive_integer",
	"random_sint8_boundary_value",
	"random_uint8_boundary_value",
	"random_uint16_boundary_value",
	"random_uint32_boundary_value",
	"random_uint64_boundary_value",
]
