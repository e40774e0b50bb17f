"""Configuration classes for opfinder components."""

import re
from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Defaults shared by the input loaders and the command line."""

    # Input file read when no path is given on the command line
    default_input: str = "input.txt"

    # Characters that separate integers on an input line
    separators: str = " ,="

    # Suffix appended to the input stem for exported results
    results_suffix: str = ".results.json"

    @property
    def separator_pattern(self) -> str:
        """Regular expression matching one or more separator characters."""
        return "[" + re.escape(self.separators) + "]+"


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
