"""Bit-accounting constants shared by the encoders."""

# Baseline cost of one input character
BITS_PER_SYMBOL = 8

# RLE: fixed cost per emitted (count, symbol) run
RLE_RUN_BITS = 16

# LZW: fixed code width and the dictionary size it can address
LZW_ALPHABET_SIZE = 256
LZW_CODE_WIDTH = 12
LZW_MAX_DICT_SIZE = 1 << LZW_CODE_WIDTH

# Golomb: naive fixed-width integer baseline
GOLOMB_INT_BITS = 32
GOLOMB_DEFAULT_M = 4

# Arithmetic: float precision degrades past this many symbols
ARITHMETIC_MAX_SYMBOLS = 15
ARITHMETIC_TAG_DIGITS = 10
TRUNCATION_MARKER = '...'

# Tunstall: fixed code width, capacity 2**4
TUNSTALL_BIT_WIDTH = 4
TUNSTALL_MAX_DICT_SIZE = 1 << TUNSTALL_BIT_WIDTH

# In-band marker for a Tunstall position no dictionary entry matches
ERR_CODE = 'ERR'

# LZW flush step marker
EOF_MARKER = 'EOF'
