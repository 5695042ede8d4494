# Codec configs
BIAS: int = 2  # added before encoding, subtracted after decoding

# Bit packing configs
BITS_PER_BYTE: int = 8

# Verification sweep configs
VERIFY_START: int = 0
VERIFY_STOP: int = 100001  # exclusive upper bound
PROGRESS_MIN_VALUES: int = 10000  # sweeps shorter than this run without a progress bar
