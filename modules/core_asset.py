import struct

from solana.rpc.api import Client
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from data.const import ASSET_V1_KEY, MPL_CORE_PROGRAM_ID, TRANSFER_V1_DISCRIMINATOR
from models.asset import (
    AssetKind,
    AssetProbe,
    CoreAsset,
    CoreTransferRequest,
    UpdateAuthority,
    UpdateAuthorityType,
)
from models.transfer import TransferResult
from modules.exceptions import AssetDecodeError, AssetNotFoundError
from modules.logger import logger
from modules.utils import truncate
from modules.wallet import Wallet

"""
Minimal Metaplex Core client: reads AssetV1 accounts and
builds TransferV1 instructions.
"""


class _Reader:
    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise AssetDecodeError(
                f"Unexpected end of asset data at byte {self.offset} (need {size})"
            )
        chunk = self.data[self.offset : end]
        self.offset = end
        return chunk

    def u8(self) -> int:
        return self.take(1)[0]

    def u32(self) -> int:
        return struct.unpack("<I", self.take(4))[0]

    def u64(self) -> int:
        return struct.unpack("<Q", self.take(8))[0]

    def pubkey(self) -> Pubkey:
        return Pubkey.from_bytes(self.take(32))

    def string(self) -> str:
        return self.take(self.u32()).decode("utf-8")


def decode_asset(address: Pubkey, data: bytes) -> CoreAsset:
    """
    Decode the base AssetV1 record. Plugin data appended after it is ignored.
    """
    reader = _Reader(bytes(data))

    key = reader.u8()
    if key != ASSET_V1_KEY:
        raise AssetDecodeError(f"Account {address} is not an AssetV1 (key={key})")

    owner = reader.pubkey()

    ua_tag = reader.u8()
    try:
        ua_type = UpdateAuthorityType(ua_tag)
    except ValueError as err:
        raise AssetDecodeError(f"Unknown update authority variant {ua_tag}") from err

    ua_address = None if ua_type == UpdateAuthorityType.NONE else reader.pubkey()

    name = reader.string()
    uri = reader.string()

    seq = None
    if reader.offset < len(reader.data) and reader.u8() == 1:
        seq = reader.u64()

    return CoreAsset(
        address=address,
        owner=owner,
        update_authority=UpdateAuthority(type=ua_type, address=ua_address),
        name=name,
        uri=uri,
        seq=seq,
    )


def build_transfer_instruction(request: CoreTransferRequest) -> Instruction:
    """
    TransferV1 with no compression proof. Optional accounts that are not
    provided are filled with the program id.
    """

    def optional(pubkey: Pubkey | None, is_signer: bool = False) -> AccountMeta:
        if pubkey is None:
            return AccountMeta(MPL_CORE_PROGRAM_ID, is_signer=False, is_writable=False)
        return AccountMeta(pubkey, is_signer=is_signer, is_writable=False)

    accounts = [
        AccountMeta(request.asset, is_signer=False, is_writable=True),
        optional(request.collection),
        AccountMeta(request.payer, is_signer=True, is_writable=True),
        optional(request.authority, is_signer=True),
        AccountMeta(request.new_owner, is_signer=False, is_writable=False),
        optional(None),  # system_program
        optional(None),  # log_wrapper
    ]

    data = bytes([TRANSFER_V1_DISCRIMINATOR, 0])

    return Instruction(MPL_CORE_PROGRAM_ID, data, accounts)


class CoreAssetClient:
    def __init__(self, client: Client):
        self.client = client

    def fetch_asset(self, address: Pubkey) -> CoreAsset:
        account = self.client.get_account_info(address).value

        if account is None:
            raise AssetNotFoundError(f"The account of type [AssetV1] was not found at {address}")

        if account.owner != MPL_CORE_PROGRAM_ID:
            raise AssetDecodeError(
                f"Account {address} is owned by {account.owner}, not the Core program"
            )

        return decode_asset(address, account.data)

    def probe(self, address: Pubkey) -> AssetProbe:
        """
        Try to read the address as a Core Asset. Never raises: a failed fetch
        yields a TOKEN_MINT probe carrying the reason.
        """
        try:
            asset = self.fetch_asset(address)
        except Exception as err:
            logger.debug(f"Core Asset fetch failed for {address}: {err}")
            return AssetProbe(kind=AssetKind.TOKEN_MINT, core_error=str(err))

        return AssetProbe(kind=AssetKind.CORE_ASSET, asset=asset)

    def transfer(
        self, asset: CoreAsset, holder: Wallet, fee_payer: Wallet, recipient: Pubkey
    ) -> TransferResult:
        logger.info("Detected Metaplex Core Asset")
        logger.info(f"Asset owner: {asset.owner}")
        logger.info(f"Asset name: {asset.name}")

        if asset.owner != holder.address:
            logger.warning(
                f"Asset is owned by {asset.owner}, not the holder {holder.address}"
            )

        request = CoreTransferRequest(
            asset=asset.address,
            new_owner=recipient,
            authority=holder.address,
            payer=fee_payer.address,
        )

        # Asset is in a collection
        if asset.collection is not None:
            request.collection = asset.collection
            logger.info(f"Asset is in collection: {asset.collection}")

        logger.info("Transferring Core Asset...")
        signature = fee_payer.send_tx(
            [build_transfer_instruction(request)],
            signers=[holder.keypair],
            tx_label=f"{holder.label} Transfer {asset.name} to {truncate(recipient)}",
        )

        return TransferResult(kind=AssetKind.CORE_ASSET, signature=signature)
