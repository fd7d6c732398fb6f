# Re-export convenient entry points for external use

from .errors import PathInputError, EmptyRingError

from .config import (
    PathConfig,
    get_path_config,
    set_path_config,
    reset_path_config,
)

from .geometry import (
    distance,
    generate_grid_points,
    compute_path_cost,
    point_path_length,
    line_travel_length,
)

from .candidates import (
    Waypoint,
    Wayline,
    CandidateRing,
)

from .salesman import (
    find_path,
    find_point_path,
    find_point_order,
    find_line_path,
    find_line_order,
)

from .heuristics import (
    nearest_neighbor_order,
    hilbert_order,
    zcurve_order,
    heuristics_registry_dict,
)

from .utils import (
    pick_random_combs,
    max_iter_from_k,
)

from .experiment import (
    compare_orderings,
    save_result_to_file,
    load_result_from_file,
)
