# Paramètres financiers par défaut (plan / moteur)

# --- Horizon ---
DEFAULT_PROJECTION_YEARS = 7
DEFAULT_CRUISE_YEAR = 3

# --- Taux ---
DEFAULT_DISCOUNT_RATE = 12.0  # % / an
DEFAULT_TAX_RATE = 15.0  # IS, % du résultat avant impôt
DEFAULT_TFP_RATE = 2.0  # 1% industrie, 2% autres
DEFAULT_FOPROLOS_RATE = 1.0
DEFAULT_TCL_RATE = 0.2  # % du CA

# --- Crédit ---
DEFAULT_LOAN_DURATION_MONTHS = 84
DEFAULT_LOAN_RATE_ANNUAL = 10.0  # %

# --- Équipement ---
DEFAULT_TVA_RATE = 19.0
DEFAULT_AMORT_YEARS = 5

# --- Plan de financement ---
FINANCING_GAP_TOLERANCE = 1.0  # écart toléré (en unités monétaires)

# --- Analyse coût-volume-profit ---
CVP_STEPS = 6  # 7 points de 0% à CVP_MAX_SCALE
CVP_MAX_SCALE = 1.2

# --- Solveur TRI (Newton-Raphson) ---
IRR_INITIAL_GUESS = 0.10
IRR_MAX_ITERATIONS = 1000
IRR_TOLERANCE = 1e-5
IRR_DIVERGENCE_BOUND = 100.0
