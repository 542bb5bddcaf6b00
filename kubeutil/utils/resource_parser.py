"""Resource parsing utilities for CPU and memory values.

Provides functions to parse Kubernetes resource strings into standardized formats:
- CPU: parsed to millicores (float)
- Memory: parsed to bytes (float)

and to pretty-print the normalized values back for display. Unlike the lenient
parsers used for display-only data, every function here raises
QuantityParseError on malformed input so aggregates are never silently wrong.
"""

from __future__ import annotations

from collections.abc import Callable

from kubeutil.constants.patterns import QUANTITY_PATTERN
from kubeutil.errors import QuantityParseError

# Module-level constants to avoid re-creating on every function call.
# Suffix (multiplier, divisor) pairs for parse_cpu_millicores() to convert to
# millicores. Divisors keep sub-unit suffixes exact for integral inputs.
_CPU_MILLICORE_SCALES: dict[str, tuple[int, int]] = {
    "": (1000, 1),
    "m": (1, 1),
    "u": (1, 1000),
    "n": (1, 1_000_000),
}

# Suffix (multiplier, divisor) pairs for memory_str_to_bytes() to convert to bytes.
_MEMORY_BYTES_SCALES: dict[str, tuple[int, int]] = {
    "": (1, 1),
    "m": (1, 1000),
    "k": (1000, 1),
    "M": (1000**2, 1),
    "G": (1000**3, 1),
    "T": (1000**4, 1),
    "P": (1000**5, 1),
    "E": (1000**6, 1),
    "Ki": (1024, 1),
    "Mi": (1024**2, 1),
    "Gi": (1024**3, 1),
    "Ti": (1024**4, 1),
    "Pi": (1024**5, 1),
    "Ei": (1024**6, 1),
}

# Display units for format_memory_bytes(), largest first.
_BINARY_UNITS: tuple[tuple[str, int], ...] = (
    ("PiB", 1024**5),
    ("TiB", 1024**4),
    ("GiB", 1024**3),
    ("MiB", 1024**2),
    ("KiB", 1024),
)

# Cores at or above this value are shown without a fractional part.
_CPU_INTEGER_DISPLAY_CORES = 10


def _parse_quantity(
    value: str, scales: dict[str, tuple[int, int]], kind: str
) -> float:
    """Parse a quantity token using a suffix -> (multiplier, divisor) table."""
    if not isinstance(value, str):
        raise QuantityParseError(str(value), kind)

    token = value.strip()
    match = QUANTITY_PATTERN.match(token)
    if match is None:
        raise QuantityParseError(value, kind)

    suffix = match.group("suffix")
    if suffix not in scales:
        raise QuantityParseError(value, kind)
    # An exponent and a suffix are mutually exclusive ("1e3Ki" is invalid).
    exponent = match.group("exponent")
    if exponent is not None and suffix:
        raise QuantityParseError(value, kind)

    number = float(match.group("number"))
    if exponent is not None:
        power = int(exponent)
        number = number * 10**power if power >= 0 else number / 10**-power
    multiplier, divisor = scales[suffix]
    return number * multiplier / divisor


def parse_cpu_millicores(cpu_str: str) -> float:
    """Parse CPU string to millicores.

    Handles various CPU resource formats:
    - Millicores: "100m" -> 100.0
    - Decimal: "1.5" -> 1500.0
    - Integer: "2" -> 2000.0
    - Microcores: "500000u" -> 500.0
    - Nanocores: "500000000n" -> 500.0

    Args:
        cpu_str: CPU value as string (e.g., "100m", "1.5", "2")

    Returns:
        CPU value in millicores.

    Raises:
        QuantityParseError: If the token is empty or not a CPU quantity.
    """
    return _parse_quantity(cpu_str, _CPU_MILLICORE_SCALES, "cpu")


def memory_str_to_bytes(memory_str: str) -> float:
    """Convert memory string to bytes.

    Handles binary ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei"), decimal ("k", "M",
    "G", "T", "P", "E"), exponent ("129e6") and plain byte values.

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1Gi", "1000000")

    Returns:
        Memory value in bytes.

    Raises:
        QuantityParseError: If the token is empty or not a memory quantity.
    """
    return _parse_quantity(memory_str, _MEMORY_BYTES_SCALES, "memory")


def sum_quantity_cell(cell: str, parser: Callable[[str], float]) -> float:
    """Sum a whitespace-separated list of quantity tokens.

    Pod rows carry one token per container. An empty cell means no container
    sets the value and sums to 0; every present token is parsed strictly.
    """
    return sum((parser(token) for token in cell.split()), 0.0)


def format_cpu_cores(millicores: float) -> str:
    """Format millicores as cores.

    Below 10 cores the value keeps six fractional digits ("5.000000"); at or
    above 10 cores it is shown as a truncated integer ("12").
    """
    cores = millicores / 1000
    if millicores < _CPU_INTEGER_DISPLAY_CORES * 1000:
        return f"{cores:f}"
    return f"{int(cores)}"


def format_memory_bytes(value: float) -> str:
    """Format memory bytes to human-readable IEC units."""
    for unit, size in _BINARY_UNITS:
        if value >= size:
            return f"{value / size:.2f} {unit}"
    return f"{value:.0f} B"
