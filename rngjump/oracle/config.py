# rngjump/oracle/config.py
# Configuration for the oracle (generator service)

# Network config
HOST = '127.0.0.1'
PORT = 5000

# Generator served by the oracle, a key of rngjump.GENERATORS:
# 'cong' | 'shr3' | 'mwc1' | 'mwc2' | 'kiss' | 'mwc64' | 'kiss2' | 'lfsr88' | 'lfsr113'
GENERATOR = 'kiss'

# Seed configuration:
# - SEED_MODE:
#     'fixed'  : use the integers in SEEDS (if SEEDS is None, falls back to deterministic constants)
#     'random' : use os.urandom at startup (non-deterministic each run)
#     'time'   : use current unix time (int(time.time())) as seed - low entropy (for demo)
SEED_MODE = 'fixed'   # 'fixed' | 'random' | 'time'

# If SEED_MODE == 'fixed', one 32-bit seed per generator argument; extra seeds are ignored.
# If None, the default deterministic seeds are used.
SEEDS = (2247183469, 99545079, 3269400377, 3950144837)  # or None

# If SEED_MODE == 'time', this controls whether we use seconds or milliseconds.
# 's' -> int(time.time()), 'ms' -> int(time.time() * 1000)
TIME_GRANULARITY = 's'  # 's' or 'ms'

# Largest |n| accepted by /jumpahead, in bits. Reduction keeps the work bounded
# anyway; this only rejects absurd request bodies.
JUMP_BITS_MAX = 4096

# Logging level
LOG_LEVEL = 'INFO'
