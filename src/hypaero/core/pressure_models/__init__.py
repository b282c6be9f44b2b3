"""Local surface pressure-coefficient relations."""

from .empirical import (
    acm_empirical_pressure_coefficient,
    empirical_tangent_cone_pressure_coefficient,
    empirical_tangent_wedge_pressure_coefficient,
    hankey_flat_surface_pressure_coefficient,
    high_mach_base_pressure_coefficient,
    modified_dahlem_buck_pressure_coefficient,
    smyth_delta_wing_pressure_coefficient,
)
from .isentropic import (
    local_to_static_pressure_ratio,
    mach_angle,
    pressure_coefficient_from_ratio,
    stagnation_pressure_coefficient,
    vacuum_pressure_coefficient,
)
from .newtonian import modified_newtonian_pressure_coefficient, newtonian_pressure_coefficient
from .prandtl_meyer import (
    INVERSE_PRANDTL_MEYER_COEFFICIENTS,
    MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE,
    PRANDTL_MEYER_PARAMETER_1,
    PRANDTL_MEYER_PARAMETER_2,
    PRANDTL_MEYER_PARAMETER_3,
    PRANDTL_MEYER_PARAMETER_4,
    PRANDTL_MEYER_PARAMETER_5,
    inverse_prandtl_meyer_function,
    prandtl_meyer_freestream_pressure_coefficient,
    prandtl_meyer_freestream_pressure_coefficients,
    prandtl_meyer_function,
    prandtl_meyer_functions,
)
from .tangent_wedge import tangent_wedge_pressure_coefficient
from .van_dyke import FlowTurning, van_dyke_unified_pressure_coefficient

__all__ = [
    "MAXIMUM_PRANDTL_MEYER_FUNCTION_VALUE",
    "PRANDTL_MEYER_PARAMETER_1",
    "PRANDTL_MEYER_PARAMETER_2",
    "PRANDTL_MEYER_PARAMETER_3",
    "PRANDTL_MEYER_PARAMETER_4",
    "PRANDTL_MEYER_PARAMETER_5",
    "INVERSE_PRANDTL_MEYER_COEFFICIENTS",
    "FlowTurning",
    "local_to_static_pressure_ratio",
    "mach_angle",
    "pressure_coefficient_from_ratio",
    "stagnation_pressure_coefficient",
    "vacuum_pressure_coefficient",
    "prandtl_meyer_function",
    "prandtl_meyer_functions",
    "inverse_prandtl_meyer_function",
    "prandtl_meyer_freestream_pressure_coefficient",
    "prandtl_meyer_freestream_pressure_coefficients",
    "newtonian_pressure_coefficient",
    "modified_newtonian_pressure_coefficient",
    "empirical_tangent_wedge_pressure_coefficient",
    "empirical_tangent_cone_pressure_coefficient",
    "modified_dahlem_buck_pressure_coefficient",
    "hankey_flat_surface_pressure_coefficient",
    "smyth_delta_wing_pressure_coefficient",
    "van_dyke_unified_pressure_coefficient",
    "high_mach_base_pressure_coefficient",
    "acm_empirical_pressure_coefficient",
    "tangent_wedge_pressure_coefficient",
]
