from solana.rpc.api import Client
from solders.pubkey import Pubkey
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import (
    TransferParams,
    create_associated_token_account,
    get_associated_token_address,
)
from spl.token.instructions import transfer as spl_transfer

from models.asset import AssetKind
from models.transfer import TransferResult
from modules.logger import logger
from modules.utils import truncate
from modules.wallet import Wallet


class TokenLedger:
    def __init__(self, client: Client):
        self.client = client

    def get_or_create_token_account(
        self, mint: Pubkey, owner: Pubkey, fee_payer: Wallet
    ) -> tuple[Pubkey, bool]:
        """
        Return the owner's associated token account for mint, creating it
        with the fee payer's funds when it does not exist yet.
        """
        ata = get_associated_token_address(owner, mint)

        if self.client.get_account_info(ata).value is not None:
            return ata, False

        ix = create_associated_token_account(payer=fee_payer.address, owner=owner, mint=mint)
        fee_payer.send_tx([ix], tx_label=f"{fee_payer.label} Create token account {truncate(ata)}")

        return ata, True

    def get_balance(self, token_account: Pubkey) -> int:
        return int(self.client.get_token_account_balance(token_account).value.amount)

    def transfer_all(
        self, mint: Pubkey, holder: Wallet, fee_payer: Wallet, recipient: Pubkey
    ) -> TransferResult:
        """
        Move the holder's entire balance of mint to the recipient.
        """
        logger.info("Detected SPL Token")

        source = get_associated_token_address(holder.address, mint)
        logger.info(f"Holder token account: {source}")

        logger.info("Getting or creating recipient token account...")
        dest, created = self.get_or_create_token_account(mint, recipient, fee_payer)
        logger.info(f"Recipient token account: {dest}")

        amount = self.get_balance(source)

        logger.info(f"Transferring {amount} tokens...")

        ix = spl_transfer(
            TransferParams(
                program_id=TOKEN_PROGRAM_ID,
                source=source,
                dest=dest,
                owner=holder.address,
                amount=amount,
            )
        )
        signature = fee_payer.send_tx(
            [ix],
            signers=[holder.keypair],
            tx_label=f"{holder.label} Transfer {amount} tokens to {truncate(recipient)}",
        )

        return TransferResult(
            kind=AssetKind.TOKEN_MINT,
            signature=signature,
            amount=amount,
            source_account=str(source),
            destination_account=str(dest),
            created_destination=created,
        )
