"""Bundle of the factories a library under test provides.

Any slot may be ``None``; cases needing an absent factory are reported as
unsupported rather than failed. The expected operations are:

``datum_factory``
    ``create_ellipsoid(properties, semi_major_axis, semi_minor_axis, unit)``,
    ``create_flattened_sphere(properties, semi_major_axis, inverse_flattening, unit)``,
    ``create_prime_meridian(properties, longitude, unit)``,
    ``create_geodetic_datum(properties, ellipsoid, prime_meridian)``,
    ``create_vertical_datum(properties)``
``cs_factory``
    ``create_coordinate_system(definition)``
``crs_factory``
    ``create_geographic_crs(properties, datum, cs)``,
    ``create_geocentric_crs(properties, datum, cs)``,
    ``create_projected_crs(properties, base_crs, conversion, cs)``,
    ``create_vertical_crs(properties, datum, cs)``
``operation_factory``
    ``create_defining_conversion(properties, method_name, parameters)``,
    ``create_transformation(properties, source_crs, target_crs, method_name, parameters)``,
    ``create_concatenated_operation(properties, steps)``
``datum_authority``
    ``create_ellipsoid(code)``, ``create_prime_meridian(code)``,
    ``create_geodetic_datum(code)``, ``create_vertical_datum(code)``
``crs_authority``
    ``create_crs(code)``
``operation_authority``
    ``create_coordinate_operation(code)``
``unit_authority``
    ``create_unit(code)`` returning a :class:`gigs_harness.units.Unit`

Authority codes are passed as strings.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict

from .errors import UnsupportedCapability
from .validator import DEFAULT_VALIDATOR, StructuralValidator


@dataclass
class Factories:
    datum_factory: Any = None
    cs_factory: Any = None
    crs_factory: Any = None
    operation_factory: Any = None
    datum_authority: Any = None
    crs_authority: Any = None
    operation_authority: Any = None
    unit_authority: Any = None
    validator: StructuralValidator = field(default=DEFAULT_VALIDATOR)

    def require(self, slot: str) -> Any:
        factory = getattr(self, slot)
        if factory is None:
            raise UnsupportedCapability(f"No {slot} provided by the library under test.")
        return factory

    def available(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) is not None for f in fields(self) if f.name != "validator"}
