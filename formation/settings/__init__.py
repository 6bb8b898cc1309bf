"""Engine settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("FORMATION_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("FORMATION_LOG_LEVEL", "INFO")
TRACE_NEGOTIATIONS = os.getenv("FORMATION_TRACE_NEGOTIATIONS", "0") == "1"

# Elections (Tweede Kamer defaults)
TOTAL_SEATS = int(os.getenv("FORMATION_TOTAL_SEATS", "150"))
ELECTORAL_THRESHOLD = float(os.getenv("FORMATION_THRESHOLD", "0.0"))

# Coalition search
MAX_COALITION_SIZE = int(os.getenv("FORMATION_MAX_COALITION_SIZE", "5"))
VIABILITY_FLOOR = float(os.getenv("FORMATION_VIABILITY_FLOOR", "0.3"))

# Negotiation
MAX_NEGOTIATION_DAYS = int(os.getenv("FORMATION_MAX_NEGOTIATION_DAYS", "120"))
DISRUPTION_PROBABILITY = float(os.getenv("FORMATION_DISRUPTION_PROBABILITY", "0.05"))

# Government
CONFIDENCE_THRESHOLD = float(os.getenv("FORMATION_CONFIDENCE_THRESHOLD", "20"))
COLLAPSE_THRESHOLD = float(os.getenv("FORMATION_COLLAPSE_THRESHOLD", "5"))
