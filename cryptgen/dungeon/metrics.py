from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'rooms_attempts': 0,
        'rooms_placed': 0,
        'tunnels_carved': 0,
        'intersections': 0,
        'secret_passages': 0,
        'secret_doors': 0,
        'closed_doors': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
