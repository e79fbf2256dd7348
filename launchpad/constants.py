"""Launchpad constants.

Amounts follow the ledger's units: SOL in lamports, tokens in base units.
"""

# Decimals of tokens minted by the launchpad
TOKEN_DECIMALS = 6

# Basis point denominator (10000 bps = 100%)
BPS_DENOMINATOR = 10_000

# Largest amount the ledger can hold (u64)
U64_MAX = 2**64 - 1

# Default sale parameters (mainnet deployment values)
DEFAULT_CURVE_A = 2_720_310_556
DEFAULT_TOKEN_SUPPLY = 1_000_000_000 * 10**TOKEN_DECIMALS
DEFAULT_TOKEN_THRESHOLD = 793_099_999_845_341
DEFAULT_BUY_FEE_BPS = 100
DEFAULT_SELL_FEE_BPS = 100
DEFAULT_DEPLOY_FEE = 0
