"""Numerical defaults for HistFit.

These values reproduce the reference study setup (a N(50, 10) sample in
100 unit bins over [0, 100]). All of them can be overridden from the
configuration file or the command line.
"""

# =============================================================================
# Histogram generation
# =============================================================================

DEFAULT_MEAN = 50.0
DEFAULT_SIGMA = 10.0
DEFAULT_N_BINS = 100
DEFAULT_LOW = 0.0
DEFAULT_HIGH = 100.0
DEFAULT_ENTRIES = 1000

# =============================================================================
# Statistics
# =============================================================================

EXPECTED_FLOOR = 1e-12
"""Lower clamp for predicted bin contents before taking logarithms or ratios."""

N_GAUSSIAN_PARAMS = 3

# =============================================================================
# Optimisation
# =============================================================================

LEAST_SQUARES_FTOL = 1e-10
LEAST_SQUARES_XTOL = 1e-10
LEAST_SQUARES_MAX_NFEV = 2000

MINIMIZE_MAXITER = 2000
MINIMIZE_FTOL = 1e-12

HESSIAN_REL_STEP = 1e-4
"""Relative step for the central-difference Hessian of the likelihood."""

SIGMA_LOWER_BOUND = 1e-9

SINGULAR_RCOND = 1e-12
"""Eigenvalues of a curvature matrix below this fraction of the largest count as zero."""

NULL_SPACE_TOL = 1e-6

# =============================================================================
# Studies, toys and scans
# =============================================================================

DEFAULT_TRIALS = 10_000
DEFAULT_COMPARE_TRIALS = 1000
DEFAULT_COMPARE_ENTRIES = 10
DEFAULT_N_TOYS = 10_000

SCAN_N_POINTS = 200
SCAN_NLL_WIDTH = 2.0
"""Half-width of the likelihood scan, in units of the histogram std dev."""

SCAN_CHI2_CENTER = 50.0
SCAN_CHI2_HALF_WIDTH = 3.0

TOY_NLL_MIN_SPAN = 10.0
TOY_NLL_BINS = 80
