# Instruction Info
INST_OFFSET_BITS = 2

# Saturating Counter
CTR_MIN = 0b00
CTR_MAX = 0b11
CTR_TAKEN_THRESHOLD = 0b10
PHT_INIT = 0b10  # weakly taken
CHOOSER_INIT = 0b01  # weakly favours bimodal

# Index width limit, 1 << 30 entries is already far past any sane table
MAX_INDEX_BITS = 30

# Predictors
BIMODAL = "bimodal"
GSHARE = "gshare"
HYBRID = "hybrid"
PREDICTOR_NAMES = (BIMODAL, GSHARE, HYBRID)

# Report labels
CHOOSER_LABEL = "CHOOSER"
GSHARE_LABEL = "GSHARE"
BIMODAL_LABEL = "BIMODAL"

# Environment keys read from .env
ENV_LOG_LEVEL = "BPSIM_LOG_LEVEL"
ENV_LOG_FILE = "BPSIM_LOG_FILE"
