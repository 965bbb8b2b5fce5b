from dataclasses import dataclass
from enum import Enum, IntEnum

from solders.pubkey import Pubkey


class AssetKind(Enum):
    CORE_ASSET = "Core Asset"
    TOKEN_MINT = "SPL Token"


class UpdateAuthorityType(IntEnum):
    NONE = 0
    ADDRESS = 1
    COLLECTION = 2


@dataclass
class UpdateAuthority:
    type: UpdateAuthorityType
    address: Pubkey = None


@dataclass
class CoreAsset:
    address: Pubkey
    owner: Pubkey
    update_authority: UpdateAuthority
    name: str
    uri: str
    seq: int = None

    @property
    def collection(self) -> Pubkey | None:
        if self.update_authority.type == UpdateAuthorityType.COLLECTION:
            return self.update_authority.address
        return None


@dataclass
class AssetProbe:
    """
    Outcome of probing an address. CORE_ASSET carries the decoded asset,
    TOKEN_MINT carries the reason the Core fetch failed.
    """

    kind: AssetKind
    asset: CoreAsset = None
    core_error: str = None


@dataclass
class CoreTransferRequest:
    asset: Pubkey
    new_owner: Pubkey
    authority: Pubkey
    payer: Pubkey
    collection: Pubkey = None
