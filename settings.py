import os

# Commitment used for reads, preflight and confirmation
COMMITMENT = "confirmed"

# Console log threshold (DEBUG | INFO | WARNING | ERROR)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Loaded before the environment is read; real env vars take precedence
DOTENV_PATH = ".env"

REQUIRED_ENV = (
    "RPC_ENDPOINT",
    "HOLDER_SECRET",
    "FEEPAYER_SECRET",
    "ASSET_ADDRESS",
    "RECIPIENT_ADDRESS",
)
