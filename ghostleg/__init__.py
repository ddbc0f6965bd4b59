"""ghostleg - ghost-leg (amidakuji) ladder generator and tracer."""

__version__ = "0.1.0"

from ghostleg.analysis import LadderStats, report_ladder
from ghostleg.config import (
    Config,
    GeometryConfig,
    InvalidConfiguration,
    LadderConfig,
    PathsConfig,
    load_config,
)
from ghostleg.generator import (
    GenerationError,
    GenerationResult,
    generate_from_config,
    generate_ladder,
    generate_with_seed,
)
from ghostleg.ladder import Ladder, PathPoint, TraceResult, compute_row_count
from ghostleg.output import (
    export_json,
    export_result_sheet,
    ladder_to_dict,
    load_ladder_json,
    render_ascii,
)
from ghostleg.permutations import (
    inverse_permutation,
    random_derangement,
    random_permutation,
)
from ghostleg.tracer import compute_all_results, trace_path, trace_with_geometry
from ghostleg.validator import (
    ValidationResult,
    has_no_adjacent_rungs,
    is_derangement,
    is_permutation,
    validate_ladder,
)

__all__ = [
    # Config
    "Config",
    "GeometryConfig",
    "InvalidConfiguration",
    "LadderConfig",
    "PathsConfig",
    "load_config",
    # Ladder
    "Ladder",
    "PathPoint",
    "TraceResult",
    "compute_row_count",
    # Permutations
    "inverse_permutation",
    "random_derangement",
    "random_permutation",
    # Generator
    "GenerationError",
    "GenerationResult",
    "generate_from_config",
    "generate_ladder",
    "generate_with_seed",
    # Tracer
    "compute_all_results",
    "trace_path",
    "trace_with_geometry",
    # Validator
    "ValidationResult",
    "has_no_adjacent_rungs",
    "is_derangement",
    "is_permutation",
    "validate_ladder",
    # Analysis
    "LadderStats",
    "report_ladder",
    # Output
    "export_json",
    "export_result_sheet",
    "ladder_to_dict",
    "load_ladder_json",
    "render_ascii",
]
