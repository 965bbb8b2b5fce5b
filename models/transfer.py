from dataclasses import dataclass
from typing import Mapping

import settings
from models.asset import AssetKind
from modules.exceptions import ConfigError


@dataclass(frozen=True)
class Transfer:
    """Config object holding the five required transfer params."""

    rpc_endpoint: str
    holder_secret: str
    feepayer_secret: str
    asset_address: str
    recipient_address: str

    def __repr__(self):
        # keep secrets out of logs and tracebacks
        return (
            f"Transfer(rpc_endpoint={self.rpc_endpoint!r}, "
            f"asset_address={self.asset_address!r}, "
            f"recipient_address={self.recipient_address!r})"
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Transfer":
        values = {name: environ.get(name) or "" for name in settings.REQUIRED_ENV}
        missing = [name for name, value in values.items() if not value]

        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}\n"
                "Please copy .env.example to .env and fill in your values.",
                missing=missing,
            )

        return cls(
            rpc_endpoint=values["RPC_ENDPOINT"],
            holder_secret=values["HOLDER_SECRET"],
            feepayer_secret=values["FEEPAYER_SECRET"],
            asset_address=values["ASSET_ADDRESS"],
            recipient_address=values["RECIPIENT_ADDRESS"],
        )


@dataclass
class TransferResult:
    kind: AssetKind
    signature: str
    amount: int = None
    source_account: str = None
    destination_account: str = None
    created_destination: bool = False
